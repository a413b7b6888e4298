"""Library layer: color detection, state and rendering (no CLI code)."""
