# curriculum/lessons/base.py
"""Shared parser boundary: read, validate frontmatter, never raise."""

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path

from .frontmatter import split_frontmatter
from .types import LessonDocument, NoLesson, ParseResult

logger = logging.getLogger(__name__)

# ```lang ... ``` with the tag immediately after the backticks
FENCED_BLOCK_PATTERN = re.compile(r"```(\w+)[ \t]*\n(.*?)```", re.DOTALL)


class LessonParser(ABC):
    """
    Base class for lesson markdown parsers.

    Subclasses implement _build_lesson(title, body). Everything that can go
    wrong below this boundary becomes a NoLesson plus a logged warning.
    """

    name = "lesson"

    def parse(self, text: str, source: str = "<text>") -> ParseResult:
        """
        Parse lesson markdown text.

        Args:
            text: Full markdown text of the lesson
            source: Label used in log messages

        Returns:
            LessonDocument, or NoLesson if the text is not a valid challenge
        """
        try:
            return self._parse_text(text)
        except Exception as e:
            logger.warning(f"Could not parse {self.name} lesson: {source}. Error: {e}")
            return NoLesson(reason=f"{type(e).__name__}: {e}")

    def parse_file(self, path: Path | str) -> ParseResult:
        """
        Parse a lesson markdown file from disk.

        Unreadable files (missing, permission denied) are logged and reported
        as NoLesson.
        """
        try:
            # Invalid UTF-8 bytes become U+FFFD instead of dropping the lesson
            text = Path(path).read_bytes().decode("utf-8", errors="replace")
            return self._parse_text(text)
        except Exception as e:
            logger.warning(f"Could not parse {self.name} file: {path}. Error: {e}")
            return NoLesson(reason=f"{type(e).__name__}: {e}")

    def _parse_text(self, text: str) -> ParseResult:
        metadata, body = split_frontmatter(text.replace("\r\n", "\n"))

        # A valid challenge must have an id and a title in its frontmatter
        if not metadata.get("id") or not metadata.get("title"):
            return NoLesson(reason="frontmatter is missing id or title")

        return self._build_lesson(str(metadata["title"]), body)

    @abstractmethod
    def _build_lesson(self, title: str, body: str) -> LessonDocument:
        """Build the lesson from a validated title and the body text."""
