"""Elements module"""
