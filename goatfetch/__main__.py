#!/usr/bin/env python3
"""
Allow running goatfetch with ``python -m goatfetch``.
"""

from .main import main

main()
