"""Attendance notification engine package.

Generates, deduplicates, prioritizes and tracks per-student attendance
notifications on top of a SQLAlchemy store.
"""
