#!/usr/bin/env python3
"""
Human readable formatting for durations and memory sizes.
"""


def format_duration(seconds) -> str:
    """
    Format an elapsed time as ``"<d>d <h>h <m>m"``.

    Leading zero components are dropped: no days gives ``"<h>h <m>m"``,
    no days and no hours gives ``"<m>m"``. Seconds are truncated.
    """
    total = max(int(seconds), 0)
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes = rest // 60

    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_memory(used_kib, total_kib) -> str:
    """Format used/total kibibytes as ``"<used>MiB / <total>MiB"``."""
    return f"{used_kib / 1024:.1f}MiB / {total_kib / 1024:.1f}MiB"
