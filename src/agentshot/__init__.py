"""
agentshot: terminal output to SVG screenshots

Feed the raw output of a command (escape sequences and all) into a
fixed-size virtual terminal and render what it shows as an SVG image.

Quick Start:
    >>> import agentshot
    >>> svg = agentshot.render_svg(b"hello", cols=80, rows=24)
    >>> screen = agentshot.Screen(80, 24)
    >>> screen.feed(b"hello")
    >>> screen.to_text()
    'hello'

Features:
    - Virtual terminal with cursor movement, erase and SGR colors
      (16-color, 256-color and true color)
    - Scrolling grid of fixed size, no scrollback
    - SVG rendering with run-length grouping of styled text
    - Plain text export
    - CLI that runs a command in a pty or reads piped input
"""

__version__ = "0.1.0"

# Core types
from agentshot.core.cell import Cell
from agentshot.core.color import Color
from agentshot.core.screen import Screen

# Renderers
from agentshot.render.svg import SvgRenderer
from agentshot.render.text import TextRenderer


def render_svg(
    data: bytes,
    cols: int = 120,
    rows: int = 40,
    font_size: int = 14,
    font_family: str = "monospace",
) -> str:
    """Feed raw terminal output into a fresh screen and render it as SVG."""
    screen = Screen(cols, rows)
    screen.feed(data)
    return screen.to_svg(font_size=font_size, font_family=font_family)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Color",
    "Screen",
    # Renderers
    "SvgRenderer",
    "TextRenderer",
    "render_svg",
]
