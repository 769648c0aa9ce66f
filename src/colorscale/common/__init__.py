"""Shared infrastructure: environment settings and logging helpers."""
