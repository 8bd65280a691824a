"""Command line helpers for media-format."""
