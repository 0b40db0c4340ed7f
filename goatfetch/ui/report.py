#!/usr/bin/env python3
"""
Report renderer: the goat, the facts beside it, and the color swatches.
"""

import logging
from typing import Dict, List, NamedTuple, Sequence

from ..modules.base import UNKNOWN
from .colors import RESET, BOLD, GREEN, CYAN, COLOR_BLOCK, STANDARD_COLORS, BRIGHT_COLORS, foreground
from .layout import GUTTER, column_width, center_padding, interleave

logger = logging.getLogger("goatfetch.report")

GOAT_ART = (
    "  (_(",
    "  /_/'______/)",
    "  \"  |      |",
    "     |\"\"\"\"\"\"|",
    "",
)


class InfoLine(NamedTuple):
    """A single ``label: value`` row."""

    label: str
    value: str

    def render(self) -> str:
        return f"{CYAN}{self.label}:{RESET} {self.value}"


class FetchReport:
    """Lays out collected facts next to the ASCII art."""

    def __init__(self, facts: Dict[str, str], art: Sequence[str] = GOAT_ART):
        self.facts = facts
        self.art = list(art)

    @property
    def user(self) -> str:
        return self.facts.get("User") or UNKNOWN

    @property
    def host(self) -> str:
        return self.facts.get("Host") or UNKNOWN

    def info_lines(self) -> List[str]:
        return [InfoLine(label, value).render() for label, value in self.facts.items()]

    def generate(self) -> str:
        """Generate the full output block."""
        info = self.info_lines()
        art_width = column_width(self.art)
        info_width = column_width(info)
        total_width = art_width + len(GUTTER) + info_width
        logger.debug(f"Layout: art width {art_width}, info width {info_width}, {len(info)} facts")

        user_host = f"{self.user}@{self.host}"
        indent = " " * center_padding(total_width, user_host)

        lines = [
            f"{indent}{BOLD}{GREEN}{self.user}{RESET}{BOLD}{GREEN}@{self.host}{RESET}",
            f"{indent}{'-' * len(user_host)}",
        ]
        lines.extend(interleave(self.art, info, art_width))
        lines.append("")
        lines.extend(self.color_rows(art_width))
        lines.append("")
        return "\n".join(lines)

    def color_rows(self, art_width: int) -> List[str]:
        """Swatch rows of standard and bright colors, aligned with the info column."""
        indent = " " * art_width + GUTTER
        rows = []
        for palette in (STANDARD_COLORS, BRIGHT_COLORS):
            blocks = "".join(f"{foreground(code)}{COLOR_BLOCK}" for code in palette)
            rows.append(f"{indent}{blocks}{RESET}")
        return rows
