"""Pytest plugins shipped with the suite."""
