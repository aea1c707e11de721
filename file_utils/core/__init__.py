"""Core extraction, permission and filesystem logic."""
