"""Cell - one position of the terminal grid."""

from dataclasses import dataclass

from agentshot.core.constants import DEFAULT_FG


@dataclass(slots=True)
class Cell:
    """
    A single character cell with styling attributes.

    Colors are stored already resolved to ``#rrggbb`` strings. A ``bg``
    of None means no background (the screen background shows through).
    """
    char: str = ' '
    fg: str = DEFAULT_FG
    bg: str | None = None
    bold: bool = False
    dim: bool = False
    italic: bool = False

    def is_default(self) -> bool:
        """Check if this cell has default values (empty space, default colors)."""
        return (
            self.char == ' '
            and self.fg == DEFAULT_FG
            and self.bg is None
            and not self.bold
            and not self.dim
            and not self.italic
        )
