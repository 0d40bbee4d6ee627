"""
Fixed layout policy values for the listing formatter.
"""

# Display width of the right-aligned size field ("4.0K" fits with room to spare).
SIZE_WIDTH = 8

# Spaces between the left and right column in two-column mode.
GUTTER = 4

# Two columns are only attempted on terminals at least this wide.
TWO_COLUMN_MIN_WIDTH = 100

# Used when the terminal width cannot be determined.
DEFAULT_TERMINAL_WIDTH = 80
