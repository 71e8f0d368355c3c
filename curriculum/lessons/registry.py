# curriculum/lessons/registry.py
"""Pick the lesson parser for a curriculum language."""

from .base import LessonParser
from .freecodecamp_parser import FreeCodeCampParser
from .python_parser import PythonLessonParser


class UnknownLanguageError(Exception):
    """Raised when no parser handles the requested language."""

    pass


PARSERS_BY_LANGUAGE: dict[str, type[LessonParser]] = {
    "javascript": FreeCodeCampParser,
    "python": PythonLessonParser,
}


def get_parser(language: str) -> LessonParser:
    """
    Get a parser instance for a curriculum language.

    Raises:
        UnknownLanguageError: If the language is not supported
    """
    parser_class = PARSERS_BY_LANGUAGE.get(language)
    if parser_class is None:
        available = ", ".join(sorted(PARSERS_BY_LANGUAGE))
        raise UnknownLanguageError(
            f"No parser for language: {language} (available: {available})"
        )
    return parser_class()


def get_available_languages() -> list[str]:
    return sorted(PARSERS_BY_LANGUAGE)
