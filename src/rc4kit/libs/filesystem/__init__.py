"""
Filesystem utilities for streaming files through the cipher.
"""

__all__ = [
    "check_key_length",
    "read_key",
    "transform_file",
    "transform_stream",
]

from .stream import check_key_length, read_key, transform_file, transform_stream
