"""Lesson markdown parsing."""

from .types import (
    LessonFile,
    LessonDocument,
    NoLesson,
    ParseResult,
    Course,
)
from .frontmatter import split_frontmatter, FrontmatterError
from .base import LessonParser
from .freecodecamp_parser import FreeCodeCampParser, parse_markdown_file
from .python_parser import PythonLessonParser, parse_python_markdown_file
from .walker import find_markdown_files
from .registry import get_parser, get_available_languages, UnknownLanguageError

__all__ = [
    "LessonFile",
    "LessonDocument",
    "NoLesson",
    "ParseResult",
    "Course",
    "split_frontmatter",
    "FrontmatterError",
    "LessonParser",
    "FreeCodeCampParser",
    "parse_markdown_file",
    "PythonLessonParser",
    "parse_python_markdown_file",
    "find_markdown_files",
    "get_parser",
    "get_available_languages",
    "UnknownLanguageError",
]
