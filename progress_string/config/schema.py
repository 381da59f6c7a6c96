"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema for bar defaults.
Each field names the environment variable that can set it.
"""

import math
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_TOTAL,
    DEFAULT_WIDTH,
    DEFAULT_BAR_START,
    DEFAULT_BAR_END,
    DEFAULT_FILL,
    DEFAULT_PARTIAL,
    DEFAULT_EMPTY,
)
from ..models import BarFormat


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    This is the single source of truth for configurable bar defaults.
    Fields flagged with ``glyph`` keep surrounding whitespace when loaded,
    since a space is a legitimate glyph.
    """

    # Bar geometry
    total: Union[int, float] = Field(
        DEFAULT_TOTAL,
        description="Value that corresponds to 100% completion",
        json_schema_extra={"env_var": "PROGRESS_TOTAL"},
    )

    width: int = Field(
        DEFAULT_WIDTH,
        ge=0,
        description="Number of glyph cells between the brackets",
        json_schema_extra={"env_var": "PROGRESS_WIDTH"},
    )

    # Glyphs
    bar_start: str = Field(
        DEFAULT_BAR_START,
        description="String drawn before the glyph region",
        json_schema_extra={"env_var": "PROGRESS_BAR_START", "glyph": True},
    )

    bar_end: str = Field(
        DEFAULT_BAR_END,
        description="String drawn after the glyph region",
        json_schema_extra={"env_var": "PROGRESS_BAR_END", "glyph": True},
    )

    fill: str = Field(
        DEFAULT_FILL,
        description="Glyph for a full cell",
        json_schema_extra={"env_var": "PROGRESS_FILL", "glyph": True},
    )

    partial: str = Field(
        DEFAULT_PARTIAL,
        description="Partial-cell glyphs ordered emptiest to fullest",
        json_schema_extra={"env_var": "PROGRESS_PARTIAL", "glyph": True},
    )

    empty: str = Field(
        DEFAULT_EMPTY,
        description="Glyph for an unfilled cell",
        json_schema_extra={"env_var": "PROGRESS_EMPTY", "glyph": True},
    )

    # Suffixes
    include_percent: bool = Field(
        True,
        description="Append the percentage after the bar",
        json_schema_extra={"env_var": "PROGRESS_INCLUDE_PERCENT"},
    )

    include_numbers: bool = Field(
        False,
        description="Append current/total after the bar",
        json_schema_extra={"env_var": "PROGRESS_INCLUDE_NUMBERS"},
    )

    @field_validator("total")
    @classmethod
    def non_negative_total(cls, v: Union[int, float]) -> Union[int, float]:
        """Reject negative and NaN totals."""
        if math.isnan(v):
            raise ValueError("must be a number, got NaN")
        if v < 0:
            raise ValueError(f"must be non-negative, got {v}")
        return v

    @field_validator("fill", "empty")
    @classmethod
    def single_character(cls, v: str) -> str:
        """Require exactly one character so each glyph is one cell."""
        if len(v) != 1:
            raise ValueError(f"must be a single character, got {v!r}")
        return v

    @field_validator("include_percent", "include_numbers", mode="before")
    @classmethod
    def parse_bool(cls, v: Any) -> bool:
        """Parse boolean from string values."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            v_lower = v.strip().lower()
            if v_lower in ("1", "true", "yes", "on"):
                return True
            elif v_lower in ("0", "false", "no", "off"):
                return False
            else:
                raise ValueError(f"Invalid boolean value: {v}")
        return bool(v)

    def to_bar_format(self) -> BarFormat:
        """Return the BarFormat described by the glyph fields."""
        return BarFormat(
            bar_start=self.bar_start,
            bar_end=self.bar_end,
            fill=self.fill,
            partial=self.partial,
            empty=self.empty,
        )

    model_config = {
        "validate_assignment": True,
        "extra": "forbid",
    }
