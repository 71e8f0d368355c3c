# curriculum/lessons/python_parser.py
"""Parse single-file Python challenge markdown."""

import re
from pathlib import Path

from .base import LessonParser
from .types import LessonDocument, LessonFile, ParseResult

_PYTHON_BLOCK_PATTERN = re.compile(r"```(?:py|python)[ \t]*\n(.*?)```", re.DOTALL)


def extract_section(content: str, section_name: str) -> str:
    """
    Extract a # --name-- section up to the next # -- header or end of text.

    Only the first matching section is used. Missing sections give "".
    """
    pattern = re.compile(
        rf"^# --{re.escape(section_name)}--[ \t]*$\n?(.*?)(?=^# --|\Z)",
        re.DOTALL | re.MULTILINE,
    )
    match = pattern.search(content)
    return match.group(1).strip() if match else ""


class PythonLessonParser(LessonParser):
    """Python challenges always produce a single main.py."""

    name = "Python"

    def _build_lesson(self, title: str, body: str) -> LessonDocument:
        seed = extract_section(body, "seed")
        boilerplate_match = _PYTHON_BLOCK_PATTERN.search(seed)
        boilerplate = boilerplate_match.group(1).strip() if boilerplate_match else ""

        return LessonDocument(
            title=title,
            description=extract_section(body, "description"),
            files=(LessonFile(name="main.py", language="python", content=boilerplate),),
            test_code=extract_section(body, "hints"),
        )


_parser = PythonLessonParser()


def parse_python_markdown_file(path: Path | str) -> ParseResult:
    """
    Parse a single Python challenge file.

    Args:
        path: Path to the challenge .md file

    Returns:
        LessonDocument with one main.py file, or NoLesson
    """
    return _parser.parse_file(path)
