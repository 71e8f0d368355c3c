#!/usr/bin/env python3
"""
Ingest a freeCodeCamp curriculum into course JSON files.

Usage:
    python scripts/run_ingestor.py python --root ../freeCodeCamp/curriculum/challenges/english
"""

import sys

from curriculum.cli import main

if __name__ == "__main__":
    sys.exit(main())
