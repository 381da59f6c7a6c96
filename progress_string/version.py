"""Package version metadata, kept import-free so setup.py can read it."""

__version__ = "1.0.0"
__author__ = "Progress String Contributors"
__description__ = "Render textual progress bars with sub-cell precision"
