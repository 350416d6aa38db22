"""
Shared constants and exception types
"""
