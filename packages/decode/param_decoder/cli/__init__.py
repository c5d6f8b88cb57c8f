"""Command line interface for param-decoder."""
