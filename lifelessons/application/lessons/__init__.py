"""Lessons application layer."""
