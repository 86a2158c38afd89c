"""Helpers for testing the suite without real engines."""
