# curriculum/lessons/freecodecamp_parser.py
"""
Parse freeCodeCamp-style multi-file challenge markdown.

Layout of a challenge body:

    # --description--
    ...
    # --hints--          (older files use # --tests--)
    ...
    # --seed--
    ## --seed-contents--
    ```html
    ...
    ```
    # --solutions--
    ...
"""

import re
from pathlib import Path

from .base import FENCED_BLOCK_PATTERN, LessonParser
from .types import LessonDocument, LessonFile, ParseResult

# Fence tag -> output filename. Every other tag is treated as the script.
FILENAMES_BY_LANGUAGE = {
    "html": "index.html",
    "css": "styles.css",
}
DEFAULT_FILENAME = "script.js"

# Any line starting with "# --" opens a segment; only "# --name--" lines name it
_SECTION_HEADER = re.compile(r"^# --(?:([\w-]+)--[ \t]*$)?")
_SUBSECTION_HEADER = re.compile(r"^## --(?:([\w-]+)--[ \t]*$)?")


def _split_into_segments(
    content: str, pattern: re.Pattern = _SECTION_HEADER
) -> list[tuple[str, str]]:
    """Split content into (segment_name, segment_content) tuples."""
    segments = []
    current_name = None
    current_lines = []

    for line in content.split("\n"):
        match = pattern.match(line)
        if match:
            if current_name is not None:
                segments.append((current_name, "\n".join(current_lines).strip()))

            # Unnamed headers close the previous segment and are ignored
            current_name = match.group(1) or ""
            current_lines = []
        elif current_name is not None:
            current_lines.append(line)

    if current_name is not None:
        segments.append((current_name, "\n".join(current_lines).strip()))

    return segments


def _extract_seed_contents(seed: str) -> str:
    """Return the ## --seed-contents-- block of a seed segment."""
    for name, content in _split_into_segments(seed, _SUBSECTION_HEADER):
        if name == "seed-contents":
            return content
    return ""


def parse_code_blocks(block: str) -> list[LessonFile]:
    """Turn every fenced code block into a file, in order of appearance."""
    files = []
    for match in FENCED_BLOCK_PATTERN.finditer(block):
        language = match.group(1)
        files.append(
            LessonFile(
                name=FILENAMES_BY_LANGUAGE.get(language, DEFAULT_FILENAME),
                language=language,
                content=match.group(2).strip(),
            )
        )
    return files


class FreeCodeCampParser(LessonParser):
    """Multi-file (html/css/js) challenges."""

    name = "freeCodeCamp"

    def _build_lesson(self, title: str, body: str) -> LessonDocument:
        description = ""
        test_code = ""
        files: list[LessonFile] = []
        solution_files: list[LessonFile] = []

        for name, content in _split_into_segments(body):
            if name == "description":
                description = content
            elif name in ("hints", "tests"):
                # Current and legacy names share one field; the later one wins
                test_code = content
            elif name == "seed":
                files.extend(parse_code_blocks(_extract_seed_contents(content)))
            elif name == "seed-contents":
                files.extend(parse_code_blocks(content))
            elif name == "solutions":
                solution_files.extend(parse_code_blocks(content))

        return LessonDocument(
            title=title,
            description=description,
            files=tuple(files),
            test_code=test_code,
            solution_files=tuple(solution_files),
        )


_parser = FreeCodeCampParser()


def parse_markdown_file(path: Path | str) -> ParseResult:
    """
    Parse a single freeCodeCamp challenge file.

    Args:
        path: Path to the challenge .md file

    Returns:
        LessonDocument, or NoLesson if it is not a valid challenge
    """
    return _parser.parse_file(path)
