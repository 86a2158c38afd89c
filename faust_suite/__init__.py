"""Integration suite for the Faust analysis engines."""
