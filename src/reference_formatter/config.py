"""Runtime settings and logging setup."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_PREFIX = "REFERENCE_FORMATTER_"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings() -> Settings:
    """Read settings from the environment, after loading a local ``.env`` file."""
    load_dotenv()
    defaults = Settings()
    port = os.getenv(f"{ENV_PREFIX}PORT", str(defaults.port))
    try:
        port_number = int(port)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {port!r}") from exc
    return Settings(
        log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
        host=os.getenv(f"{ENV_PREFIX}HOST", defaults.host),
        port=port_number,
    )


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Send package logs to stderr at the given level."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("reference_formatter").setLevel(level)
