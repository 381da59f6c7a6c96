#!/usr/bin/env python3
"""
Bar Format Models

This module contains the immutable style configuration that controls
which characters bound and fill a progress bar.
"""

from dataclasses import dataclass, replace
from typing import Sequence, Tuple, Union

from ..constants import (
    DEFAULT_BAR_START,
    DEFAULT_BAR_END,
    DEFAULT_FILL,
    DEFAULT_PARTIAL,
    DEFAULT_EMPTY,
)


def _check_glyph(name: str, glyph: str) -> None:
    """Raise ValueError unless glyph is a single code point."""
    if not isinstance(glyph, str) or len(glyph) != 1:
        raise ValueError(f"{name} must be a single character, got {glyph!r}")


@dataclass(frozen=True)
class BarFormat:
    """
    Characters used to draw a progress bar.

    Every glyph occupies exactly one cell of the bar, so fill, empty and each
    entry of the partial ramp must be a single code point. The brackets are
    free-form strings and may be empty.

    Attributes:
        bar_start: String placed before the glyph region
        bar_end: String placed after the glyph region
        fill: Glyph for a fully filled cell
        partial: Glyphs for a partly filled cell, ordered emptiest to fullest
        empty: Glyph for an unfilled cell
    """

    bar_start: str = DEFAULT_BAR_START
    bar_end: str = DEFAULT_BAR_END
    fill: str = DEFAULT_FILL
    partial: Union[str, Sequence[str]] = DEFAULT_PARTIAL
    empty: str = DEFAULT_EMPTY

    def __post_init__(self):
        """Validate glyphs and normalize the partial ramp to a tuple."""
        if not isinstance(self.bar_start, str):
            raise ValueError(f"bar_start must be a string, got {self.bar_start!r}")
        if not isinstance(self.bar_end, str):
            raise ValueError(f"bar_end must be a string, got {self.bar_end!r}")
        _check_glyph("fill", self.fill)
        _check_glyph("empty", self.empty)

        ramp: Tuple[str, ...] = tuple(self.partial)
        for index, glyph in enumerate(ramp):
            _check_glyph(f"partial[{index}]", glyph)
        object.__setattr__(self, "partial", ramp)

    def replace(self, **changes) -> "BarFormat":
        """Return a copy of this format with the given fields changed."""
        return replace(self, **changes)
