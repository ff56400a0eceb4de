"""Color representation for captured terminal output."""

from dataclasses import dataclass
from enum import Enum

from agentshot.core.constants import PALETTE_16


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format an RGB triple as ``#rrggbb``."""
    return f"#{r:02x}{g:02x}{b:02x}"


def color256_to_hex(index: int) -> str:
    """
    Resolve a 256-color index to a hex color.

    0-15 map onto the named palette, 16-231 onto the 6x6x6 color cube
    and 232-255 onto the 24-step grayscale ramp.
    """
    if not 0 <= index <= 255:
        raise ValueError(f"256-color index must be 0-255, got {index}")
    if index < 16:
        return PALETTE_16[index]
    if index >= 232:
        gray = (index - 232) * 10 + 8
        return rgb_to_hex(gray, gray, gray)
    index -= 16
    r = index // 36
    g = (index // 6) % 6
    b = index % 6
    return rgb_to_hex(r * 51, g * 51, b * 51)


@dataclass(frozen=True)
class Color:
    """
    Represents a color value from an SGR sequence.

    Supports 16-color, 256-color, and true color modes. Cells never keep
    a Color around; they store the result of :meth:`to_hex`.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from an SGR code (30-37, 40-47, 90-97, 100-107)."""
        if 30 <= code <= 37:
            return cls(ColorMode.STANDARD_16, code - 30)
        elif 40 <= code <= 47:
            return cls(ColorMode.STANDARD_16, code - 40)
        elif 90 <= code <= 97:
            return cls(ColorMode.STANDARD_16, code - 90 + 8)
        elif 100 <= code <= 107:
            return cls(ColorMode.STANDARD_16, code - 100 + 8)
        else:
            raise ValueError(f"Invalid SGR color code: {code}")

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    def to_hex(self) -> str:
        """Return the ``#rrggbb`` form used by cells and renderers."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            return PALETTE_16[self.value]
        elif self.mode == ColorMode.EXTENDED_256:
            assert isinstance(self.value, int)
            return color256_to_hex(self.value)
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            return rgb_to_hex(*self.value)

