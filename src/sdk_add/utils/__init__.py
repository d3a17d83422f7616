"""Ambient helpers: settings and logging."""
