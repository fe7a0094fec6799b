"""
CineCritic Movie Rating API package.

This package contains the HTTP API, the MongoDB persistence gateway, and
shared utilities.
"""

__version__ = "1.0.0"
