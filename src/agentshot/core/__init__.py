"""Core data structures for the captured terminal grid."""

from agentshot.core.cell import Cell
from agentshot.core.color import Color
from agentshot.core.screen import Screen

__all__ = ["Cell", "Color", "Screen"]
