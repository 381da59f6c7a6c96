"""
Logging utilities for progress string.

The library only emits DEBUG records through module loggers and never
installs handlers on import. Applications that want a quick default
setup can call setup_logging().
"""

import logging


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Library internals stay quiet unless verbose
    logging.getLogger("progress_string").setLevel(level)
