#!/usr/bin/env python3
"""
Data Models Module

This module contains the data structures used to describe how a
progress bar is drawn.
"""

from .format import BarFormat

__all__ = [
    "BarFormat",
]
