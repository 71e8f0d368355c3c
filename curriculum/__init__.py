"""Curriculum ingestion: lesson parsing and course building."""
