# Densest glyph first: black pixels map to "@", white pixels to " "
DENSITY_RAMP = "@#8&$%*+;:,. "

# Terminal cells are roughly twice as tall as they are wide
CELL_ASPECT = 0.55

DEFAULT_WIDTH = 64
