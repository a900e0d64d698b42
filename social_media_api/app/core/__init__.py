"""Shared infrastructure: settings, logging and SQLite bootstrap."""
