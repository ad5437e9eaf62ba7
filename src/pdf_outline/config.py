"""Environment-driven settings for the outline reader.

Values are read once at import time. A ``.env`` file in the working
directory is honoured via python-dotenv.
"""
import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


LOG_FILE = os.getenv("PDF_OUTLINE_LOG_FILE", "logs/pdf_outline.log")
LOG_LEVEL = os.getenv("PDF_OUTLINE_LOG_LEVEL", "INFO").upper()

# Defaults used by the CLI for level projection
DEFAULT_LEVEL = _env_int("PDF_OUTLINE_DEFAULT_LEVEL", 0)
DEFAULT_INTER_LEVEL_TEXT = _env_bool("PDF_OUTLINE_INTER_LEVEL_TEXT", False)
