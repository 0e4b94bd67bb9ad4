"""
Command-line entry point.
"""

__all__ = ["main"]

from .main import main
