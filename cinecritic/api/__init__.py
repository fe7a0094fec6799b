"""
HTTP API for the movie resource.
"""
