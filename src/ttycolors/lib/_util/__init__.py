"""Internal helpers with no ttycolors state dependencies."""
