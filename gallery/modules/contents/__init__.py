"""Contents module"""
