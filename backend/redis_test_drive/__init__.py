"""
Redis Test Drive

A FastAPI service exercising the string, set and geo datatypes of Redis.
"""

__version__ = "0.1.0"
