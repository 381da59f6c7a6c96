"""
Fluent construction of progress trackers.

Example:
    >>> bar = BarBuilder().total(1000).width(20).empty("0").fill("X").build()
    >>> bar.set_current(500)
    >>> bar.readout()
    '[XXXXXXXXXX0000000000] 50.00%'
"""

import logging
from numbers import Real
from typing import Sequence, Union

from ..constants import DEFAULT_TOTAL, DEFAULT_WIDTH
from ..models import BarFormat
from .tracker import ProgressTracker

logger = logging.getLogger(__name__)


class BarBuilder:
    """Collects tracker settings and builds independent ProgressTracker instances."""

    def __init__(self):
        self._total: Real = DEFAULT_TOTAL
        self._width = DEFAULT_WIDTH
        self._format = BarFormat()
        self._include_percent = True
        self._include_numbers = False

    @classmethod
    def from_config(cls, config) -> "BarBuilder":
        """
        Create a builder seeded from a loaded configuration.

        Args:
            config: A validated ConfigSchema instance

        Returns:
            BarBuilder with the configured total, width, glyphs and suffixes
        """
        return (
            cls()
            .total(config.total)
            .width(config.width)
            .format(config.to_bar_format())
            .include_percent(config.include_percent)
            .include_numbers(config.include_numbers)
        )

    def total(self, total: Real) -> "BarBuilder":
        """Set the value that corresponds to 100% (default 100)."""
        self._total = total
        return self

    def width(self, width: int) -> "BarBuilder":
        """Set the number of glyph cells (default 50)."""
        self._width = width
        return self

    def format(self, bar_format: BarFormat) -> "BarBuilder":
        """Replace every glyph and bracket at once."""
        self._format = bar_format
        return self

    def bar_start(self, text: str) -> "BarBuilder":
        self._format = self._format.replace(bar_start=text)
        return self

    def bar_end(self, text: str) -> "BarBuilder":
        self._format = self._format.replace(bar_end=text)
        return self

    def fill(self, glyph: str) -> "BarBuilder":
        """Set the glyph for a full cell (default '█')."""
        self._format = self._format.replace(fill=glyph)
        return self

    def partial(self, ramp: Union[str, Sequence[str]]) -> "BarBuilder":
        """Set the partial-cell ramp, emptiest glyph first. Pass "" to disable."""
        self._format = self._format.replace(partial=ramp)
        return self

    def empty(self, glyph: str) -> "BarBuilder":
        """Set the glyph for an unfilled cell (default ' ')."""
        self._format = self._format.replace(empty=glyph)
        return self

    def include_percent(self, enabled: bool = True) -> "BarBuilder":
        self._include_percent = enabled
        return self

    def include_numbers(self, enabled: bool = True) -> "BarBuilder":
        """Append ``current/total`` after the bar."""
        self._include_numbers = enabled
        return self

    def build(self) -> ProgressTracker:
        """
        Build a tracker from the collected settings.

        Returns:
            A new ProgressTracker starting at zero

        Raises:
            ValueError: If the configured width or total is invalid
        """
        logger.debug("Building progress tracker from builder settings")
        return ProgressTracker(
            total=self._total,
            width=self._width,
            format=self._format,
            include_percent=self._include_percent,
            include_numbers=self._include_numbers,
        )
