"""Shared helpers: logging, errors and text utilities."""
