"""Escape sequence decoding for captured terminal output."""

from agentshot.codec.ansi_parser import CSI_PATTERN, GraphicsState, parse_params

__all__ = ["CSI_PATTERN", "GraphicsState", "parse_params"]
