"""Infrastructure layer.

Configuration, logging setup, and catalog file access.
"""
