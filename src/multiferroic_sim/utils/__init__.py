"""Shared constants and defaults."""
