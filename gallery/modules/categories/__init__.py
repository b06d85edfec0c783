"""Categories module"""
