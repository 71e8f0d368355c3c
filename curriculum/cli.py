"""
Command line entry point for curriculum ingestion.

Run with: curriculum-ingest <language> [--root DIR] [--output DIR] [--dry-run]
"""

import argparse
import logging
import sys
from pathlib import Path

import sentry_sdk
from dotenv import load_dotenv

from curriculum.config import (
    get_curriculum_path,
    get_log_level,
    get_output_dir,
    get_sentry_dsn,
)
from curriculum.ingestion import CurriculumNotFoundError, ingest_curriculum
from curriculum.lessons import get_available_languages

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert freeCodeCamp challenge markdown into course JSON files"
    )
    parser.add_argument(
        "language",
        choices=get_available_languages(),
        help="Which curriculum to ingest",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Curriculum root (default: CURRICULUM_ROOT env var)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: INGEST_OUTPUT_DIR env var or ./output)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and report without writing files",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    # .env.local holds local overrides, .env is the fallback
    load_dotenv(Path.cwd() / ".env.local")
    load_dotenv()

    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    dsn = get_sentry_dsn()
    if dsn:
        sentry_sdk.init(dsn=dsn)

    curriculum_path = get_curriculum_path(args.language, args.root)
    output_dir = args.output if args.output is not None else get_output_dir()

    logger.info(f"Starting ingestion for {args.language} from {curriculum_path}")
    if args.dry_run:
        logger.info("Dry run: no files will be written")

    try:
        summary = ingest_curriculum(
            args.language, curriculum_path, output_dir, dry_run=args.dry_run
        )
    except CurriculumNotFoundError as e:
        logger.error(str(e))
        logger.error("Clone the freeCodeCamp repository under the curriculum root.")
        return 1

    print(
        f"{args.language}: {summary.files_found} files, "
        f"{summary.lessons_parsed} lessons, {summary.files_skipped} skipped, "
        f"{len(summary.courses)} courses"
    )
    for path in summary.written:
        print(f"  -> {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
