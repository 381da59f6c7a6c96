#!/usr/bin/env python3
"""
Application Constants

This module contains the default bar geometry and glyphs used
throughout the progress string package.
"""

# Bar geometry defaults
DEFAULT_TOTAL = 100
DEFAULT_WIDTH = 50
DEFAULT_HELPER_WIDTH = 30  # create_progress_bar() keeps its compact width

# Glyph defaults
DEFAULT_BAR_START = "["
DEFAULT_BAR_END = "]"
DEFAULT_FILL = "█"  # full block
DEFAULT_EMPTY = " "

# Eighth-block ramp, emptiest to fullest
DEFAULT_PARTIAL = " ▏▎▍▌▋▊▉"

# Percent text precision
PERCENT_DECIMALS = 2
