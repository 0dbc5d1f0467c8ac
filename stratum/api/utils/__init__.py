"""Helpers shared by the API layer."""
