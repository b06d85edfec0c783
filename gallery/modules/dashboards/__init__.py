"""Dashboards module"""
