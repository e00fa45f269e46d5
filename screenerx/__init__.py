"""Batch-capture screenshots of a list of URLs with a headless browser."""
