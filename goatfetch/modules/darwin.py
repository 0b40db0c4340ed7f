#!/usr/bin/env python3
"""
macOS collector.
"""

import re
from typing import Dict, Optional

from .base import UNKNOWN
from .unix import UnixCollector
from .units import format_memory

PAGE_SIZE_PATTERN = re.compile(r'page size of (\d+) bytes')
PAGES_PATTERN = re.compile(r'^(Pages [^:]+):\s+(\d+)\.?', re.MULTILINE)

DEFAULT_PAGE_SIZE = 4096

TOTAL_PAGE_KINDS = (
    "Pages free",
    "Pages active",
    "Pages inactive",
    "Pages speculative",
    "Pages wired down",
    "Pages occupied by compressor",
)
RECLAIMABLE_PAGE_KINDS = (
    "Pages free",
    "Pages inactive",
    "Pages speculative",
)


def parse_vm_stat(output: str) -> Dict[str, int]:
    """Page counts from ``vm_stat`` output, plus the page size under ``page_size``."""
    match = PAGE_SIZE_PATTERN.search(output)
    stats = {"page_size": int(match.group(1)) if match else DEFAULT_PAGE_SIZE}
    for key, value in PAGES_PATTERN.findall(output):
        stats[key] = int(value)
    return stats


class DarwinCollector(UnixCollector):
    """Collector for macOS."""

    name = "darwin"

    def product_name(self) -> Optional[str]:
        name = self.safe_run_command(["sw_vers", "-productName"])
        if not name or not name.strip():
            return None
        name = name.strip()

        version = self.safe_run_command(["sw_vers", "-productVersion"])
        if version and version.strip():
            return f"{name} {version.strip()}"
        return name

    def memory(self) -> str:
        output = self.safe_run_command(["vm_stat"])
        if not output:
            return UNKNOWN

        stats = parse_vm_stat(output)
        total_pages = sum(stats.get(kind, 0) for kind in TOTAL_PAGE_KINDS)
        if total_pages <= 0:
            return UNKNOWN
        used_pages = total_pages - sum(stats.get(kind, 0) for kind in RECLAIMABLE_PAGE_KINDS)

        page_kib = stats["page_size"] / 1024
        return format_memory(used_pages * page_kib, total_pages * page_kib)
