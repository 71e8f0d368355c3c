# curriculum/lessons/walker.py
"""Find lesson markdown files under a curriculum directory."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def find_markdown_files(root: Path | str) -> list[Path]:
    """
    Recursively find all markdown files in a directory.

    Paths are built from root, so a relative root gives relative paths.
    Directories reachable twice through symbolic links are only listed once.

    Args:
        root: The directory to search

    Returns:
        List of .md file paths

    Raises:
        OSError: If a directory cannot be listed (missing, permission denied)
    """
    results = []
    visited: set[str] = set()
    pending = [Path(root)]

    while pending:
        directory = pending.pop()
        real_path = os.path.realpath(directory)
        if real_path in visited:
            logger.debug(f"Skipping already visited directory: {directory}")
            continue
        visited.add(real_path)

        with os.scandir(directory) as entries:
            listing = sorted(entries, key=lambda entry: entry.name)

        subdirectories = []
        for entry in listing:
            full_path = directory / entry.name
            if entry.is_dir():
                subdirectories.append(full_path)
            elif full_path.suffix == MARKDOWN_SUFFIX:
                results.append(full_path)

        # Reversed so the stack pops subdirectories in name order
        pending.extend(reversed(subdirectories))

    return results
