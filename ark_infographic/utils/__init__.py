"""Utility helpers (image encoding and embedding)."""
