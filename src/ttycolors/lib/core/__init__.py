"""Color level, use-color state, platform hooks, paths and config."""
