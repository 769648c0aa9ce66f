"""Utility helpers (configuration loading)."""
