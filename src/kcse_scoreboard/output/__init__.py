"""Scoreboard output: plain text and printable PDF."""

from .renderer import render_scoreboard_pdf
from .text import render_scoreboard_text

__all__ = ["render_scoreboard_pdf", "render_scoreboard_text"]
