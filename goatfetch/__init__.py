#!/usr/bin/env python3
"""
goatfetch

A small terminal system information tool that prints host facts next to an
ASCII art goat.
"""

__version__ = "1.0.0"
