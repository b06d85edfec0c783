"""Authors module"""
