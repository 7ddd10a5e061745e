"""Shared helpers used across parser modules."""
