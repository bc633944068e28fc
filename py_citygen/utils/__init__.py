"""Shared helpers for city layout generation."""
