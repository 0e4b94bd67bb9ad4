"""
Stream files through the RC4 cipher in fixed-size chunks.
"""

from __future__ import annotations

__all__ = [
    "check_key_length",
    "read_key",
    "transform_file",
    "transform_stream",
]

import logging
from pathlib import Path
from typing import BinaryIO

from rc4kit.errors import InputFileError, KeyFileError, OutputFileError, StreamIOError
from rc4kit.libs.crypto.rc4 import RC4, state_size
from rc4kit.schemas import StreamConfig

logger = logging.getLogger(__name__)


def read_key(key_path: str | Path) -> bytes:
    """Read the whole key file as raw bytes.

    Args:
        key_path: Path to the key file.

    Returns:
        The key bytes.

    Raises:
        KeyFileError: If the file cannot be read or is empty.
    """
    path = Path(key_path)
    try:
        key = path.read_bytes()
    except OSError as e:
        raise KeyFileError(f"Cannot read from key file: {path}: {e}") from e

    if not key:
        raise KeyFileError(f"Cannot read from key file: {path}: file is empty")

    logger.debug("Loaded %d key bytes from %s", len(key), path)
    return key


def check_key_length(key: bytes) -> None:
    """Warn when the key length is not exactly 256 bytes.

    Neither case is rejected: short keys are cycled by the key schedule and
    bytes past the 256th are ignored.
    """
    if len(key) < state_size:
        logger.warning(
            "Key is less than %d bytes long, some bytes might be reused",
            state_size,
        )
    elif len(key) > state_size:
        logger.warning(
            "Key is more than %d bytes long, these bytes will not be used",
            state_size,
        )


def transform_stream(
    cipher: RC4,
    src: BinaryIO,
    dst: BinaryIO,
    chunk_size: int = 256,
) -> int:
    """Copy ``src`` to ``dst``, applying the keystream chunk by chunk.

    Chunks are written as soon as they are transformed and in read order,
    since the keystream is continuous across chunks.

    Args:
        cipher: Keyed cipher; its state advances by the number of bytes copied.
        src: Binary stream to read from.
        dst: Binary stream to write to.
        chunk_size: Size of the read buffer in bytes.

    Returns:
        Number of bytes processed. Equal to the number written.

    Raises:
        ValueError: If ``chunk_size`` is not positive.
        StreamIOError: If reading or writing fails.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    buf = bytearray(chunk_size)
    view = memoryview(buf)
    total = 0

    while True:
        try:
            n = src.readinto(buf)
        except OSError as e:
            raise StreamIOError(f"Failed to read input: {e}") from e
        if not n:
            break

        chunk = view[:n]
        cipher.apply_keystream(chunk)
        try:
            dst.write(chunk)
        except OSError as e:
            raise StreamIOError(f"Failed to write output: {e}") from e
        total += n

    return total


def transform_file(
    input_path: str | Path,
    output_path: str | Path,
    key: bytes,
    config: StreamConfig | None = None,
) -> int:
    """Encrypt or decrypt ``input_path`` into a new file ``output_path``.

    The output file is created exclusively and is never overwritten.

    Args:
        input_path: File to read.
        output_path: File to create.
        key: RC4 key bytes (non-empty).
        config: Streaming options; defaults to :class:`StreamConfig`.

    Returns:
        Number of bytes written.

    Raises:
        InputFileError: If the input file cannot be opened.
        OutputFileError: If the output file exists or cannot be created.
        StreamIOError: If reading or writing fails midway.
    """
    cfg = config or StreamConfig()
    src_path = Path(input_path)
    dst_path = Path(output_path)

    try:
        src = src_path.open("rb")
    except OSError as e:
        raise InputFileError(f"Cannot open input file: {src_path}: {e}") from e

    with src:
        if cfg.warn_key_length:
            check_key_length(key)
        cipher = RC4(key)

        try:
            dst = dst_path.open("xb")
        except FileExistsError as e:
            raise OutputFileError(
                f"Cannot create output file: {dst_path}: file already exists"
            ) from e
        except OSError as e:
            raise OutputFileError(f"Cannot create output file: {dst_path}: {e}") from e

        with dst:
            total = transform_stream(cipher, src, dst, cfg.chunk_size)

    logger.info("Processed %d bytes: %s -> %s", total, src_path, dst_path)
    return total
