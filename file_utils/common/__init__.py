"""Shared constants, settings, errors and logging helpers for file_utils."""
