from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rc4kit import __version__
from rc4kit.errors import RC4KitError
from rc4kit.infra.config import ConfigAdapter, load_config
from rc4kit.infra.logger import setup_logging
from rc4kit.libs.filesystem import read_key, transform_file

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rc4kit",
        description=(
            "Applies RC4 cipher to input file data and writes the result "
            "to output file."
        ),
    )
    parser.add_argument(
        "-i",
        "--in",
        dest="input",
        type=Path,
        required=True,
        help="Path to the file with input data",
    )
    parser.add_argument(
        "-o",
        "--out",
        dest="output",
        type=Path,
        required=True,
        help="Path to the file to place output data to (must not exist)",
    )
    parser.add_argument(
        "-k",
        "--key",
        type=Path,
        required=True,
        help="Path to the file with key",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a settings file (.toml or .json)",
    )
    parser.add_argument(
        "--chunk-size",
        type=_positive_int,
        default=None,
        help="Bytes processed per read/write step (default: 256)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _load_settings(config_path: Path | None) -> dict[str, Any]:
    """Load the settings file, or nothing when none was requested or found."""
    try:
        return load_config(config_path)
    except FileNotFoundError:
        if config_path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}") from None
        return {}


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        adapter = ConfigAdapter(_load_settings(args.config))
        stream_cfg = adapter.get_stream_config()
        log_cfg = adapter.get_logging_config()
        if args.chunk_size is not None:
            stream_cfg.chunk_size = args.chunk_size
        if args.log_level is not None:
            log_cfg.log_level = args.log_level
        setup_logging(log_cfg.log_level, log_cfg.log_dir)
    except (OSError, ValueError) as e:
        parser.exit(EXIT_FAILURE, f"{parser.prog}: configuration error: {e}\n")

    try:
        key = read_key(args.key)
        transform_file(args.input, args.output, key, stream_cfg)
    except RC4KitError as e:
        logger.error("%s", e)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
