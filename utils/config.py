import codecs
import logging
import os
from dataclasses import dataclass


@dataclass
class Settings:
    encoding: str
    max_chars: int
    log_level: str


def _encoding(name: str, default: str) -> str:
    encoding = os.getenv(name, default)
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ValueError(f"{name} is not a known text encoding: {encoding!r}") from e
    return encoding


def _positive_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


def _log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).upper()
    # getLevelName maps known names to ints and anything else to "Level <x>"
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {level!r}")
    return level


def get_settings() -> Settings:
    return Settings(
        encoding=_encoding("PLAGIARISM_ENCODING", "utf-8"),
        max_chars=_positive_int("PLAGIARISM_MAX_CHARS", "20000"),
        log_level=_log_level("PLAGIARISM_LOG_LEVEL", "WARNING"),
    )
