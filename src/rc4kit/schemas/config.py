"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class StreamConfig:
    """Configuration for streaming files through the cipher.

    Attributes:
        chunk_size: Number of bytes read, transformed and written per step.
        warn_key_length: Whether to warn about keys that are not 256 bytes.
    """

    chunk_size: int = 256
    warn_key_length: bool = True


@dataclass
class LoggingConfig:
    """Configuration for log output.

    Attributes:
        log_level: Logging level name, such as "INFO" or "DEBUG".
        log_dir: Optional directory for a log file. Console only if None.
    """

    log_level: str = "INFO"
    log_dir: Path | None = None
