"""
Utilities module for progress string.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup
- General helper functions for one-shot rendering
"""

# Logging utilities
from .logging import setup_logging

# General helper utilities
from .helpers import create_progress_bar

__all__ = [
    "setup_logging",
    "create_progress_bar",
]
