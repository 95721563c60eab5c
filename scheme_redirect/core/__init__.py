"""
Core application settings.
"""
