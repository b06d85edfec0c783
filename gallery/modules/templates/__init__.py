"""Templates module"""
