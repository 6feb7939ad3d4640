"""
Console client for the retail ordering database.
"""

__version__ = "0.3.0"
