"""Shared helpers: errors, logging, constants and timestamp formatting."""
