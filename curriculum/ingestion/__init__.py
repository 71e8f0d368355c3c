"""Course ingestion from a local curriculum checkout."""

from .ingestor import (
    collect_courses,
    write_courses,
    ingest_curriculum,
    course_title_from_slug,
    IngestionSummary,
    CurriculumNotFoundError,
)

__all__ = [
    "collect_courses",
    "write_courses",
    "ingest_curriculum",
    "course_title_from_slug",
    "IngestionSummary",
    "CurriculumNotFoundError",
]
