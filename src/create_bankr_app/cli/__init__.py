"""Command-line interface and project generator."""
