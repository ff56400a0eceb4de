"""CSI sequence matching and Select Graphic Rendition handling."""

import re
from dataclasses import dataclass

from agentshot.core.color import Color
from agentshot.core.constants import DEFAULT_FG


# Regex for CSI sequences: ESC [ params command
CSI_PATTERN = re.compile(r'\x1b\[([0-9;]*)([A-Za-z])')

MAX_PARAM_DIGITS = 9
PARAM_LIMIT = 999_999_999


def parse_params(params_str: str) -> list[int]:
    """
    Parse a ``;``-separated CSI parameter string.

    An empty string gives an empty list; empty entries count as 0.
    """
    if not params_str:
        return []
    return [_to_int(p) for p in params_str.split(';')]


def _to_int(param: str) -> int:
    # Overlong values saturate; every consumer clamps them anyway
    digits = param.lstrip('0')
    if len(digits) > MAX_PARAM_DIGITS:
        return PARAM_LIMIT
    return int(digits) if digits else 0


@dataclass(slots=True)
class GraphicsState:
    """Current rendition copied into every written cell."""
    fg: str = DEFAULT_FG
    bg: str | None = None
    bold: bool = False
    dim: bool = False
    italic: bool = False

    def reset(self) -> None:
        self.fg = DEFAULT_FG
        self.bg = None
        self.bold = False
        self.dim = False
        self.italic = False

    def apply_sgr(self, params: list[int]) -> None:
        """Apply SGR (Select Graphic Rendition) parameters in order."""
        if not params:
            params = [0]

        i = 0
        while i < len(params):
            p = params[i]

            if p == 0:
                self.reset()
            elif p == 1:
                self.bold = True
            elif p == 2:
                self.dim = True
            elif p == 3:
                self.italic = True
            elif p == 22:
                self.bold = False
                self.dim = False
            elif p == 23:
                self.italic = False
            elif 30 <= p <= 37:
                self.fg = Color.from_sgr(p).to_hex()
            elif p == 38:
                # Extended foreground color
                color, consumed = _extended_color(params, i)
                if color is not None:
                    self.fg = color
                i += consumed
            elif p == 39:
                self.fg = DEFAULT_FG
            elif 40 <= p <= 47:
                self.bg = Color.from_sgr(p).to_hex()
            elif p == 48:
                # Extended background color
                color, consumed = _extended_color(params, i)
                if color is not None:
                    self.bg = color
                i += consumed
            elif p == 49:
                self.bg = None
            elif 90 <= p <= 97:
                # Bright foreground
                self.fg = Color.from_sgr(p).to_hex()
            elif 100 <= p <= 107:
                # Bright background
                self.bg = Color.from_sgr(p).to_hex()

            i += 1


def _extended_color(params: list[int], i: int) -> tuple[str | None, int]:
    """
    Decode ``5;N`` or ``2;R;G;B`` following the 38/48 at ``params[i]``.

    Returns the resolved hex color (None if unusable) and how many extra
    parameters were consumed. A truncated form consumes nothing.
    """
    if i + 2 < len(params) and params[i + 1] == 5:
        # 256-color: 38;5;n
        index = params[i + 2]
        if index > 255:
            return None, 2
        return Color.from_256(index).to_hex(), 2
    if i + 4 < len(params) and params[i + 1] == 2:
        # True color: 38;2;r;g;b
        r, g, b = (min(c, 255) for c in params[i + 2:i + 5])
        return Color.from_rgb(r, g, b).to_hex(), 4
    return None, 0
