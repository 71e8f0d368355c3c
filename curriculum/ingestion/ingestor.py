# curriculum/ingestion/ingestor.py
"""Batch ingestion: curriculum directory -> one course JSON file per project."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

import sentry_sdk

from curriculum.lessons import (
    Course,
    LessonDocument,
    find_markdown_files,
    get_parser,
)

logger = logging.getLogger(__name__)


class CurriculumNotFoundError(Exception):
    """Raised when the curriculum directory does not exist."""

    pass


@dataclass
class IngestionSummary:
    """Counts and outputs of one ingestion run."""

    language: str
    files_found: int = 0
    lessons_parsed: int = 0
    files_skipped: int = 0
    courses: dict[str, Course] = field(default_factory=dict)
    written: list[Path] = field(default_factory=list)


def course_title_from_slug(slug: str) -> str:
    """'build-a-palindrome-checker-project' -> 'Build A Palindrome Checker Project'."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def collect_courses(
    curriculum_path: Path, language: str, summary: IngestionSummary | None = None
) -> dict[str, Course]:
    """
    Parse every challenge under curriculum_path and group lessons by project.

    The project is the name of the directory holding the challenge file.
    Files that are not valid challenges are skipped.
    """
    parser = get_parser(language)
    courses: dict[str, Course] = {}

    paths = find_markdown_files(curriculum_path)
    logger.info(f"Found {len(paths)} markdown files in {curriculum_path}")
    if summary is not None:
        summary.files_found = len(paths)

    for path in paths:
        lesson = parser.parse_file(path)
        if not isinstance(lesson, LessonDocument):
            logger.debug(f"Skipping {path}: {lesson.reason}")
            if summary is not None:
                summary.files_skipped += 1
            continue

        slug = path.parent.name
        if slug not in courses:
            courses[slug] = Course(
                slug=slug,
                title=course_title_from_slug(slug),
                description=(
                    f"A project-based course on {language} imported from freeCodeCamp."
                ),
                language=language,
            )
        courses[slug].lessons.append(lesson)
        if summary is not None:
            summary.lessons_parsed += 1

    return courses


def write_courses(courses: dict[str, Course], output_dir: Path) -> list[Path]:
    """
    Write each course to <output_dir>/<slug>.json.

    A course that cannot be written is logged and skipped.

    Returns:
        Paths of the files written
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []

    for slug, course in courses.items():
        output_path = output_dir / f"{slug}.json"
        try:
            output_path.write_text(
                json.dumps(course.to_dict(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            logger.error(f"Failed to write course {slug} to {output_path}: {e}")
            sentry_sdk.capture_exception(e)
            continue

        logger.info(f"Saved {len(course.lessons)} lesson(s) to {output_path}")
        written.append(output_path)

    return written


def ingest_curriculum(
    language: str,
    curriculum_path: Path,
    output_dir: Path,
    dry_run: bool = False,
) -> IngestionSummary:
    """
    Run a full ingestion for one language.

    Args:
        language: Curriculum language ("javascript" or "python")
        curriculum_path: Directory to scan for challenge files
        output_dir: Where course JSON files go
        dry_run: Parse and group, but write nothing

    Raises:
        UnknownLanguageError: If no parser handles the language
        CurriculumNotFoundError: If curriculum_path does not exist
    """
    # Fail on the language before touching the file system
    get_parser(language)

    if not curriculum_path.is_dir():
        raise CurriculumNotFoundError(
            f"Curriculum path does not exist: {curriculum_path}"
        )

    summary = IngestionSummary(language=language)
    summary.courses = collect_courses(curriculum_path, language, summary)
    logger.info(
        f"Parsed {summary.lessons_parsed} lesson(s) into "
        f"{len(summary.courses)} course(s) for {language}"
    )

    if not dry_run:
        summary.written = write_courses(summary.courses, output_dir)

    return summary
