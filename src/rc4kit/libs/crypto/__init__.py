"""
Stream cipher primitives.
"""

__all__ = ["RC4"]

from .rc4 import RC4
