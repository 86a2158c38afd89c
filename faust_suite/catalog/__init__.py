"""Scenario catalog and snippet tables."""
