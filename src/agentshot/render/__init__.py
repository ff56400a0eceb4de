"""Renderers for outputting a captured screen to various formats."""

from agentshot.render.svg import SvgRenderer, sanitize_font_family
from agentshot.render.text import TextRenderer

__all__ = ["SvgRenderer", "TextRenderer", "sanitize_font_family"]
