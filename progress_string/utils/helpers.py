"""
General helper utilities for progress string.

This module provides shortcuts for callers that only need a bar once
and do not want to keep a tracker around.
"""

from typing import Optional

from ..constants import DEFAULT_HELPER_WIDTH
from ..core import ProgressTracker
from ..models import BarFormat


def create_progress_bar(
    current: float,
    total: float,
    width: int = DEFAULT_HELPER_WIDTH,
    bar_format: Optional[BarFormat] = None,
) -> str:
    """
    Create a text-based progress bar.

    Args:
        current: Current progress
        total: Total items
        width: Width of the progress bar
        bar_format: Glyphs to draw with (default BarFormat())

    Returns:
        Progress bar string without the percentage, e.g. ``[███▌      ]``
    """
    tracker = ProgressTracker(total, width, format=bar_format, include_percent=False)
    tracker.set_current(current)
    return tracker.readout()
