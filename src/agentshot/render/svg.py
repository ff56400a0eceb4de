"""Render a terminal screen to SVG."""

import html

from agentshot.core.cell import Cell
from agentshot.core.constants import DEFAULT_BG
from agentshot.core.screen import Screen


DEFAULT_FONT_FAMILY = "monospace"
PADDING = 20.0


def sanitize_font_family(font: str) -> str:
    """
    Strip a font-family down to characters safe inside an attribute.

    Letters, digits, spaces, hyphens, underscores and commas (for font
    stacks) survive; anything else is dropped. Falls back to
    ``monospace`` when nothing is left.
    """
    safe = ''.join(
        c for c in font
        if c.isascii() and (c.isalnum() or c in ' -_,')
    )
    return safe or DEFAULT_FONT_FAMILY


class SvgRenderer:
    """
    Render a Screen to a self-contained SVG document.

    Consecutive cells sharing foreground, background and weight are
    grouped into one ``<text>`` node; cells with a background get a
    ``<rect>`` underneath spanning the whole run.
    """

    def __init__(
        self,
        font_size: int = 14,
        font_family: str = DEFAULT_FONT_FAMILY,
    ):
        if font_size < 1:
            raise ValueError(f"font_size must be positive, got {font_size}")
        self.font_size = font_size
        self.font_family = sanitize_font_family(font_family)

    @property
    def char_width(self) -> float:
        return self.font_size * 0.6

    @property
    def line_height(self) -> float:
        return self.font_size * 1.2

    def size(self, screen: Screen) -> tuple[int, int]:
        """Pixel (width, height) of the document for this screen."""
        width = int(screen.cols * self.char_width + PADDING * 2)
        height = int(screen.rows * self.line_height + PADDING * 2)
        return width, height

    def render(self, screen: Screen) -> str:
        """Render screen to SVG string."""
        width, height = self.size(screen)

        parts: list[str] = [
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" '
            f'width="{width}" height="{height}">',
            f'<rect width="100%" height="100%" fill="{DEFAULT_BG}"/>',
            f'<g font-family="{self.font_family}" font-size="{self.font_size}px">',
        ]
        for y, row in enumerate(screen.lines()):
            parts.extend(self._render_row(y, row))
        parts.append('</g>')
        parts.append('</svg>')

        return '\n'.join(parts) + '\n'

    def _render_row(self, y: int, row: list[Cell]) -> list[str]:
        char_width = self.char_width
        line_height = self.line_height
        baseline = PADDING + (y + 1) * line_height - line_height * 0.2

        nodes: list[str] = []
        col = 0
        while col < len(row):
            first = row[col]
            if first.char == ' ' and first.bg is None:
                col += 1
                continue

            # Extend the run while the style matches
            start = col
            col += 1
            while col < len(row) and _same_style(row[col], first):
                col += 1

            raw = ''.join(cell.char for cell in row[start:col])
            x = PADDING + start * char_width

            if first.bg is not None:
                nodes.append(
                    f'<rect x="{x:.1f}" y="{baseline - line_height + line_height * 0.2:.1f}" '
                    f'width="{len(raw) * char_width:.1f}" height="{line_height:.1f}" '
                    f'fill="{first.bg}"/>'
                )

            text = raw.rstrip(' ')
            if not text:
                continue

            weight = "bold" if first.bold else "normal"
            nodes.append(
                f'<text x="{x:.1f}" y="{baseline:.1f}" fill="{first.fg}" '
                f'font-weight="{weight}" xml:space="preserve">{html.escape(text)}</text>'
            )
        return nodes


def _same_style(a: Cell, b: Cell) -> bool:
    return a.fg == b.fg and a.bg == b.bg and a.bold == b.bold
