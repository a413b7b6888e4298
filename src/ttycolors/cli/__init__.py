"""Command-line interface for ttycolors."""
