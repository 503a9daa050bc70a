"""
Exposes the version of gps2ned
"""

__version__ = 'v0.1.0'

__all__ = ["__version__"]
