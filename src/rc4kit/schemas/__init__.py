"""
Data contracts and type definitions.
"""

__all__ = [
    "LoggingConfig",
    "StreamConfig",
]

from .config import LoggingConfig, StreamConfig
