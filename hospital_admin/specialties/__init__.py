"""Specialty catalogue with case-insensitive unique names."""
