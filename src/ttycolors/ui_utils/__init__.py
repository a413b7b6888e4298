"""Presentation helpers built on ``ttycolors.lib``."""
