#!/usr/bin/env python3
"""
Progress String Package

Render textual progress bars such as ``[█████████████████▊      ] 35.70%``
from a current value and a total, with sub-cell precision from a
partial-block glyph ramp.

The package only produces strings. Writing them to a terminal and moving
the cursor is left to the caller.
"""

from .version import __version__, __author__, __description__

__license__ = "MIT"

# Import models for public API
from .models import BarFormat

# Import core functionality for public API
from .core import (
    ProgressTracker,
    BarBuilder,
)

# Import configuration for public API
from .config import (
    ConfigSchema,
    ConfigLoader,
    ConfigError,
)

# Import utilities for public API
from .utils import (
    setup_logging,
    create_progress_bar,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "BarFormat",
    # Core functionality
    "ProgressTracker",
    "BarBuilder",
    # Configuration
    "ConfigSchema",
    "ConfigLoader",
    "ConfigError",
    # Utilities
    "setup_logging",
    "create_progress_bar",
]
