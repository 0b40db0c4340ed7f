#!/usr/bin/env python3
"""
ANSI escape codes used by the renderer.
"""

RESET = "\033[0m"
BOLD = "\033[1m"
GREEN = "\033[32m"
CYAN = "\033[36m"

COLOR_BLOCK = "███"

# Foreground codes for the two swatch rows
STANDARD_COLORS = tuple(range(30, 38))
BRIGHT_COLORS = tuple(range(90, 98))


def foreground(code: int) -> str:
    """Escape sequence selecting foreground color ``code``."""
    return f"\033[{code}m"
