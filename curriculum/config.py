"""
Centralized configuration for curriculum ingestion.

Values come from the environment; the CLI loads .env / .env.local first.
"""

import os
from pathlib import Path

# Curriculum sub-directories (relative to the curriculum root) per language
CURRICULUM_SUBPATHS = {
    "javascript": "15-javascript-algorithms-and-data-structures-22",
    "python": "08-data-analysis-with-python",
}

DEFAULT_CURRICULUM_ROOT = "../freeCodeCamp/curriculum/challenges/english"


def get_curriculum_root() -> Path:
    """Get the freeCodeCamp challenges root from env or default."""
    return Path(os.getenv("CURRICULUM_ROOT", DEFAULT_CURRICULUM_ROOT))


def get_curriculum_path(language: str, root: Path | None = None) -> Path:
    """
    Get the curriculum directory for a language.

    Raises:
        KeyError: If the language has no configured sub-path
    """
    base = root if root is not None else get_curriculum_root()
    return base / CURRICULUM_SUBPATHS[language]


def get_output_dir() -> Path:
    """Get the directory course JSON files are written to."""
    return Path(os.getenv("INGEST_OUTPUT_DIR", "output"))


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_log_level() -> str:
    """Get LOG_LEVEL, falling back to INFO for unknown names."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    return level if level in LOG_LEVELS else "INFO"


def get_sentry_dsn() -> str | None:
    """Sentry DSN, or None to leave error reporting disabled."""
    return os.getenv("SENTRY_DSN") or None
