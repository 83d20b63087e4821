"""Everyday helpers for strings, formatting, files, GUIDs, queues and SQLite."""

__version__ = "0.1.0"

__all__ = ["base", "text", "util", "formatting", "files", "eventqueue", "sqlitedb"]