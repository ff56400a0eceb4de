"""Render a terminal screen to plain text."""

from agentshot.core.screen import Screen


class TextRenderer:
    """Render a Screen to plain text, dropping colors and styles."""

    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace

    def render(self, screen: Screen) -> str:
        """Render screen rows joined by newlines."""
        lines = [''.join(cell.char for cell in row) for row in screen.lines()]
        if self.preserve_whitespace:
            return '\n'.join(lines)

        # Blank rows below the output are not part of it
        lines = [line.rstrip() for line in lines]
        while lines and not lines[-1]:
            lines.pop()
        return '\n'.join(lines)
