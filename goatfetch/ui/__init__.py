#!/usr/bin/env python3
"""
UI module initialization for goatfetch.
"""

from .report import FetchReport, InfoLine, GOAT_ART
