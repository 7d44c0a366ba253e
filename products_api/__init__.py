"""Products API.

Read-only HTTP query layer over a static product catalog.
"""

__version__ = "0.1.0"
