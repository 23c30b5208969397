from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


OUTPUT_FORMATS = {"text", "json"}


@dataclass(slots=True)
class Settings:
    log_level: str
    output_format: str


def _parse_dotenv_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if line.startswith("export "):
        line = line[len("export ") :].lstrip()
    if not line or line.startswith("#"):
        return None
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return key, value


def load_dotenv(dotenv_path: str = ".env") -> None:
    """Copy ``KEY=value`` pairs into the environment without overriding it."""
    path = Path(dotenv_path)
    if not path.is_file():
        return
    with path.open(encoding="utf-8") as handle:
        for raw_line in handle:
            parsed = _parse_dotenv_line(raw_line)
            if parsed is not None:
                os.environ.setdefault(*parsed)


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
    return level


def load_settings(dotenv_path: str = ".env") -> Settings:
    load_dotenv(dotenv_path)
    output_format = os.getenv("OUTPUT_FORMAT", "text").strip().lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"OUTPUT_FORMAT must be one of {sorted(OUTPUT_FORMATS)}, got {output_format!r}")

    return Settings(
        log_level=_parse_log_level(os.getenv("LOG_LEVEL", "INFO")),
        output_format=output_format,
    )
