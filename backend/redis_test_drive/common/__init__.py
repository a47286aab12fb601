"""
Common Module Initialization
"""
