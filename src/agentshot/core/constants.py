"""Shared constants for terminal capture processing."""

TAB_WIDTH = 8

# One Dark theme, 16-color palette (index 0-15)
PALETTE_16: tuple[str, ...] = (
    "#282c34",  # 0 - Black
    "#e06c75",  # 1 - Red
    "#98c379",  # 2 - Green
    "#e5c07b",  # 3 - Yellow
    "#61afef",  # 4 - Blue
    "#c678dd",  # 5 - Magenta
    "#56b6c2",  # 6 - Cyan
    "#abb2bf",  # 7 - White
    "#5c6370",  # 8 - Bright Black
    "#e06c75",  # 9 - Bright Red
    "#98c379",  # 10 - Bright Green
    "#e5c07b",  # 11 - Bright Yellow
    "#61afef",  # 12 - Bright Blue
    "#c678dd",  # 13 - Bright Magenta
    "#56b6c2",  # 14 - Bright Cyan
    "#ffffff",  # 15 - Bright White
)

DEFAULT_FG = "#abb2bf"
DEFAULT_BG = "#282c34"

# Stands in for code points that cannot appear in an XML document
REPLACEMENT_CHAR = "\ufffd"
