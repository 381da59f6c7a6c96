#!/usr/bin/env python3
"""
Core package for progress string.

This package provides the progress tracker and its builder.
"""

from .tracker import (
    ProgressTracker,
)

from .builder import (
    BarBuilder,
)

__all__ = [
    # Tracking and rendering
    "ProgressTracker",
    # Construction
    "BarBuilder",
]
