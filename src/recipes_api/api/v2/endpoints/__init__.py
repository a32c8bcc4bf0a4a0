"""API v2 endpoint modules."""
