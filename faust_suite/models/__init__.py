"""Data models for scenarios and their results."""
