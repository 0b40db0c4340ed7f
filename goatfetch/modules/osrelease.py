#!/usr/bin/env python3
"""
Parsing of os-release style distribution identification files.
"""

import logging

logger = logging.getLogger("goatfetch.collectors")

OS_RELEASE_FILES = (
    "/etc/os-release",
    "/usr/lib/os-release",
    "/etc/openwrt_release",
    "/etc/lsb-release",
)


def parse_os_release(text: str) -> str:
    """
    Extract the distribution name from os-release content.

    ``PRETTY_NAME`` wins over ``NAME``; an empty string means neither key
    was present.
    """
    pretty_name = ""
    name = ""
    for line in text.splitlines():
        line = line.strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip().strip('"').strip("'")
        if key == "PRETTY_NAME":
            pretty_name = value
        elif key == "NAME":
            name = value
    return pretty_name or name


def read_os_release(path: str) -> str:
    """Parse the file at ``path``, returning "" if it cannot be read."""
    try:
        with open(path, "r") as f:
            return parse_os_release(f.read())
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Skipping release file {path}: {e}")
        return ""
