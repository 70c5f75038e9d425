"""
Fitness Tracker

User management REST service.
"""
