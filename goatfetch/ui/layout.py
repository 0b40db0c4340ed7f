#!/usr/bin/env python3
"""
Column layout helpers that account for ANSI escape sequences.
"""

import re
from typing import List, Sequence

from .colors import BOLD, RESET

GUTTER = "  "

# ESC, any parameter bytes, then the final letter (or end of string)
ANSI_PATTERN = re.compile(r'\x1b[^A-Za-z]*(?:[A-Za-z]|$)')


def strip_ansi(text: str) -> str:
    """Remove all ANSI escape sequences from text."""
    return ANSI_PATTERN.sub("", text)


def visible_length(text: str) -> int:
    """Number of code points left once escape sequences are stripped."""
    return len(strip_ansi(text))


def column_width(lines: Sequence[str]) -> int:
    """Widest visible length among lines, 0 when there are none."""
    return max((visible_length(line) for line in lines), default=0)


def center_padding(total_width: int, text: str) -> int:
    """Spaces needed to center ``text`` within ``total_width``; never negative."""
    return max((total_width - len(text)) // 2, 0)


def interleave(art_lines: Sequence[str], info_lines: Sequence[str],
               art_width: int, gutter: str = GUTTER) -> List[str]:
    """
    Zip art and info lines into rows.

    Args:
        art_lines: Plain art lines, rendered bold
        info_lines: Already colorized info lines
        art_width: Width the art column is padded to
        gutter: Separator between the two columns

    Returns:
        One string per row; the shorter column is filled with empty lines
    """
    rows = []
    for i in range(max(len(art_lines), len(info_lines))):
        art = art_lines[i] if i < len(art_lines) else ""
        info = info_lines[i] if i < len(info_lines) else ""
        styled = f"{BOLD}{art}{RESET}" if art else ""
        padding = " " * max(art_width - visible_length(art), 0)
        rows.append(f"{styled}{padding}{gutter}{info}")
    return rows
