"""Screen - fixed-size terminal grid fed by raw output."""

from typing import Iterator

from agentshot.codec.ansi_parser import CSI_PATTERN, GraphicsState, parse_params
from agentshot.core.cell import Cell
from agentshot.core.constants import REPLACEMENT_CHAR, TAB_WIDTH


def _xml_char(char: str) -> str:
    """Replace surrogates, U+FFFE and U+FFFF, which XML cannot carry."""
    code = ord(char)
    if 0xD800 <= code <= 0xDFFF or code in (0xFFFE, 0xFFFF):
        return REPLACEMENT_CHAR
    return char


class Screen:
    """
    A fixed-size grid of Cells driven by a byte stream.

    Simulates the visible part of a terminal: printable text is written
    at the cursor, CSI sequences move the cursor, erase cells or change
    the graphics state. Writing past the last row scrolls the grid up;
    nothing is kept above the top row.

    Feeding never raises. Unknown or malformed sequences are consumed
    without effect.
    """

    def __init__(self, cols: int = 120, rows: int = 40):
        if cols < 1 or rows < 1:
            raise ValueError(f"Screen size must be positive, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        self._buffer: list[list[Cell]] = [self._blank_row() for _ in range(rows)]

        # Terminal state
        self.cursor_x = 0
        self.cursor_y = 0
        self.state = GraphicsState()

    def _blank_row(self) -> list[Cell]:
        return [Cell() for _ in range(self.cols)]

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if not 0 <= x < self.cols:
            raise IndexError(f"x={x} out of bounds (cols={self.cols})")
        if not 0 <= y < self.rows:
            raise IndexError(f"y={y} out of bounds (rows={self.rows})")
        return self._buffer[y][x]

    @property
    def cursor(self) -> tuple[int, int]:
        return self.cursor_x, self.cursor_y

    def lines(self) -> Iterator[list[Cell]]:
        """Iterate over rows, top to bottom."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                yield x, y, cell

    def feed(self, data: bytes) -> None:
        """Process raw output bytes (UTF-8, invalid bytes become U+FFFD)."""
        self.feed_text(data.decode('utf-8', errors='replace'))

    def feed_text(self, text: str) -> None:
        """Process already-decoded text with ANSI sequences."""
        last_end = 0
        for match in CSI_PATTERN.finditer(text):
            self._process_plain(text[last_end:match.start()])
            self._handle_csi(match.group(1), match.group(2))
            last_end = match.end()
        self._process_plain(text[last_end:])

    def _process_plain(self, text: str) -> None:
        for char in text:
            if char == '\n':
                self._newline()
            elif char == '\r':
                self.cursor_x = 0
            elif char == '\t':
                for _ in range(TAB_WIDTH - self.cursor_x % TAB_WIDTH):
                    self._put_char(' ')
            elif ord(char) >= 32:
                self._put_char(_xml_char(char))
            # Remaining C0 controls are dropped

    def _newline(self) -> None:
        self.cursor_x = 0
        if self.cursor_y + 1 >= self.rows:
            self._scroll()
        else:
            self.cursor_y += 1

    def _scroll(self) -> None:
        """Drop the top row and append a blank one at the bottom."""
        del self._buffer[0]
        self._buffer.append(self._blank_row())
        self.cursor_y = self.rows - 1

    def _put_char(self, char: str) -> None:
        """Put a character at current cursor position."""
        # Pending wrap from the previous write
        if self.cursor_x >= self.cols:
            self.cursor_x = 0
            self.cursor_y += 1
        if self.cursor_y >= self.rows:
            self._scroll()

        if 0 <= self.cursor_y < self.rows and 0 <= self.cursor_x < self.cols:
            state = self.state
            self._buffer[self.cursor_y][self.cursor_x] = Cell(
                char=char,
                fg=state.fg,
                bg=state.bg,
                bold=state.bold,
                dim=state.dim,
                italic=state.italic,
            )

        self.cursor_x += 1

    def _handle_csi(self, params_str: str, command: str) -> None:
        """Handle a CSI escape sequence."""
        params = parse_params(params_str)

        if command == 'm':
            self.state.apply_sgr(params)
        elif command == 'H' or command == 'f':
            # Cursor position (1-based)
            row = params[0] if params else 1
            col = params[1] if len(params) > 1 else 1
            self.cursor_y = max(0, min(row - 1, self.rows - 1))
            self.cursor_x = max(0, min(col - 1, self.cols - 1))
        elif command == 'J':
            # Erase in display
            mode = params[0] if params else 0
            self._erase_display(mode)
        elif command == 'K':
            # Erase in line
            mode = params[0] if params else 0
            self._erase_line(mode)
        elif command in 'ABCD':
            n = params[0] if params and params[0] > 0 else 1
            if command == 'A':
                self.cursor_y = max(0, self.cursor_y - n)
            elif command == 'B':
                self.cursor_y = min(self.rows - 1, self.cursor_y + n)
            elif command == 'C':
                self.cursor_x = min(self.cols - 1, self.cursor_x + n)
            else:
                self.cursor_x = max(0, self.cursor_x - n)

    def _erase_display(self, mode: int) -> None:
        """Erase in display. Only full erase (2, 3) is supported."""
        if mode in (2, 3):
            self._buffer = [self._blank_row() for _ in range(self.rows)]
            self.cursor_x = 0
            self.cursor_y = 0

    def _erase_line(self, mode: int) -> None:
        """Erase in line."""
        row = self._buffer[self.cursor_y]

        if mode == 0:
            # Erase from cursor to end of line
            start, end = self.cursor_x, self.cols
        elif mode == 1:
            # Erase from start of line to cursor
            start, end = 0, min(self.cursor_x + 1, self.cols)
        elif mode == 2:
            # Erase entire line
            start, end = 0, self.cols
        else:
            return
        for x in range(start, end):
            row[x] = Cell()

    def to_svg(self, font_size: int = 14, font_family: str = "monospace") -> str:
        """Render to an SVG document."""
        from agentshot.render.svg import SvgRenderer
        return SvgRenderer(font_size=font_size, font_family=font_family).render(self)

    def to_text(self) -> str:
        """Render to plain text (no colors)."""
        from agentshot.render.text import TextRenderer
        return TextRenderer().render(self)
