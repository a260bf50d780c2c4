"""Frequency analysis and line generation engine."""
