"""Recipes API - recipe management service backed by an ingredients catalog."""

__version__ = "2.0.0"
