"""Lessons infrastructure layer."""
