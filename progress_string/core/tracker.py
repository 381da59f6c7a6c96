"""
Progress tracking and rendering components.

This module provides the ProgressTracker, which owns the current and total
values of a long-running operation and turns them into a bar string such as
``[█████████████████▊                                ] 35.70%``.

The tracker never writes anything itself. Callers print the readout and
handle any cursor movement on their own, using get_last_width() to know how
many cells the previous readout took.
"""

import logging
import math
from numbers import Real
from typing import Optional

from ..constants import PERCENT_DECIMALS
from ..models import BarFormat

logger = logging.getLogger(__name__)


class ProgressTracker:
    """
    Tracks progress toward a total and renders it as a text bar.

    The glyph region between the brackets is always exactly ``width`` cells.
    Values of ``current`` outside ``[0, total]`` are accepted: the bar is
    clamped to empty or full while the percentage text keeps the real ratio,
    so overshoot stays visible.

    A zero total renders as 0% with an empty bar. So does a NaN current,
    which has no meaningful position on the bar.

    Not thread-safe. Share a tracker between threads only behind a lock.
    """

    def __init__(
        self,
        total: Real,
        width: int,
        format: Optional[BarFormat] = None,
        include_percent: bool = True,
        include_numbers: bool = False,
    ):
        """
        Initialize progress tracker.

        Args:
            total: Value that corresponds to 100% completion
            width: Number of glyph cells between the brackets
            format: Glyphs and brackets to draw with (default BarFormat())
            include_percent: Append the percentage after the bar
            include_numbers: Append ``current/total`` after the bar

        Raises:
            ValueError: If width is negative or not a whole number, or if
                total is negative or NaN
        """
        if not float(width).is_integer():
            raise ValueError(f"width must be a whole number, got {width}")
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        if math.isnan(total):
            raise ValueError("total must be a number, got NaN")
        if total < 0:
            raise ValueError(f"total must be non-negative, got {total}")

        self.total = total
        self.width = int(width)
        self.current: Real = 0
        self.format = format if format is not None else BarFormat()
        self.include_percent = include_percent
        self.include_numbers = include_numbers
        self.last_width = 0

        logger.debug(f"Created progress tracker: total={total}, width={self.width}")

    def set_current(self, value: Real) -> None:
        """
        Replace the current progress value.

        Args:
            value: New progress value, not clamped
        """
        self.last_width = self.get_width()
        self.current = value

    def add_current(self, delta: Real) -> None:
        """
        Add to the current progress value.

        Args:
            delta: Amount to add, may be negative
        """
        self.last_width = self.get_width()
        self.current += delta

    def ratio(self) -> float:
        """
        Return current / total, unclamped.

        A zero total, a NaN current, or an infinite current over an infinite
        total has no meaningful ratio and gives 0.0.
        """
        if self.total == 0:
            logger.debug("Progress total is zero, treating ratio as 0")
            return 0.0
        ratio = self.current / self.total
        if math.isnan(ratio):
            logger.debug(f"Progress ratio of {self.current}/{self.total} is undefined, treating as 0")
            return 0.0
        return ratio

    def percentage(self) -> float:
        """Return the unclamped completion percentage."""
        return self.ratio() * 100

    def readout(self) -> str:
        """
        Render the progress bar.

        Returns:
            ``bar_start + glyphs + bar_end``, followed by the percentage and
            the raw numbers when those are enabled
        """
        ratio = self.ratio()
        parts = [self.format.bar_start, self._render_cells(ratio), self.format.bar_end]

        if self.include_percent:
            parts.append(f" {ratio * 100:.{PERCENT_DECIMALS}f}%")
        if self.include_numbers:
            parts.append(f" {self.current}/{self.total}")

        return "".join(parts)

    def get_width(self) -> int:
        """Return the number of characters in the current readout."""
        return len(self.readout())

    def get_last_width(self) -> int:
        """Return the readout width as it was before the last update."""
        return self.last_width

    def _render_cells(self, ratio: float) -> str:
        """Build the glyph region for the given ratio."""
        bar_format = self.format
        filled = min(max(ratio, 0.0), 1.0) * self.width
        full_count = math.floor(filled)
        remainder = filled - full_count

        cells = bar_format.fill * full_count
        if remainder > 0 and full_count < self.width and bar_format.partial:
            ramp = bar_format.partial
            index = min(math.floor(remainder * len(ramp)), len(ramp) - 1)
            cells += ramp[index]

        return cells + bar_format.empty * (self.width - len(cells))

    def __str__(self) -> str:
        return self.readout()

    def __repr__(self) -> str:
        return (
            f"ProgressTracker(current={self.current!r}, total={self.total!r}, "
            f"width={self.width!r})"
        )
