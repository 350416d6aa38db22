"""
Customer Manager

Customer management service: CRUD over customers with cached lookups.
"""

__version__ = "1.0.0"
