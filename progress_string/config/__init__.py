"""
Configuration management for progress string.

This module provides schema-driven loading of bar defaults from
environment variables and .env files, validated with Pydantic.
"""

from .schema import ConfigSchema
from .loader import ConfigLoader, ConfigError

__all__ = ["ConfigSchema", "ConfigLoader", "ConfigError"]
