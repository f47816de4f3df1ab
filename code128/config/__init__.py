"""
Runtime configuration for the code128 command line.
"""

from .logging import configure_logging

__all__ = ["configure_logging"]
