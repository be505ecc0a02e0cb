"""Medication inventory records."""
