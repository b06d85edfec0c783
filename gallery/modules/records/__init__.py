"""Records module"""
