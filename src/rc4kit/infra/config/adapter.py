from __future__ import annotations

from pathlib import Path
from typing import Any

from rc4kit.schemas import LoggingConfig, StreamConfig


class ConfigAdapter:
    """High-level accessor for the loaded configuration.

    Values are read from the ``general`` block and fall back to built-in
    defaults.

    Args:
        config (dict[str, Any]): Loaded configuration mapping, optionally
            containing a ``general`` block.

    Attributes:
        _config (dict[str, Any]): Internal stored configuration mapping.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        self._config: dict[str, Any] = dict(config)

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping.

        Returns:
            dict[str, Any]: The stored configuration.
        """
        return self._config

    def get_stream_config(self) -> StreamConfig:
        """Build a StreamConfig from the general block.

        Returns:
            StreamConfig: Resolved streaming configuration.

        Raises:
            ValueError: If ``chunk_size`` is not a positive integer or
                ``warn_key_length`` is not a boolean.
        """
        cfg = self._gen_cfg()
        chunk_size = cfg.get("chunk_size", 256)
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
            raise ValueError(
                f"Invalid chunk_size: expected int, got {type(chunk_size).__name__}"
            )
        if chunk_size <= 0:
            raise ValueError(f"Invalid chunk_size: must be positive, got {chunk_size}")

        warn_key_length = cfg.get("warn_key_length", True)
        if not isinstance(warn_key_length, bool):
            raise ValueError(
                "Invalid warn_key_length: expected bool, "
                f"got {type(warn_key_length).__name__}"
            )

        return StreamConfig(
            chunk_size=chunk_size,
            warn_key_length=warn_key_length,
        )

    def get_logging_config(self) -> LoggingConfig:
        """Build a LoggingConfig from the ``general.debug`` block.

        Returns:
            LoggingConfig: Resolved logging configuration.
        """
        return LoggingConfig(
            log_level=self.get_log_level(),
            log_dir=self.get_log_dir(),
        )

    def get_log_level(self) -> str:
        """Return the configured logging level.

        Returns:
            str: Logging level or ``"INFO"`` if missing.
        """
        level = self._debug_cfg().get("log_level") or "INFO"
        return str(level).upper()

    def get_log_dir(self) -> Path | None:
        """Return directory for log files.

        Returns:
            Path | None: Absolute log directory path, or None if unset.
        """
        log_dir = self._debug_cfg().get("log_dir")
        if not log_dir:
            return None
        return Path(log_dir).expanduser().resolve()

    def _gen_cfg(self) -> dict[str, Any]:
        return self._config.get("general") or {}

    def _debug_cfg(self) -> dict[str, Any]:
        return self._gen_cfg().get("debug") or {}
