"""
CLI tasks and deployment tables for the Gelato automation contracts.
"""

__version__ = "0.1.0"
