#!/usr/bin/env python3
"""Command-line editor for the system hosts file."""

__version__ = "1.0.0"
