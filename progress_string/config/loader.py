"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to load, validate, and merge bar defaults from multiple sources.
"""

import logging
import os
from typing import Dict, Any, Optional, Mapping

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import ConfigSchema


logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env.local"


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        overrides: Optional[Mapping[str, Any]] = None,
        env_file: Optional[str] = DEFAULT_ENV_FILE,
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. Dotenv file (if it exists; never overrides the OS environment)
        3. OS environment variables
        4. Explicit overrides keyed by environment variable name

        The result is returned to the caller and not cached anywhere.

        Args:
            schema: The configuration schema class to use
            overrides: Mapping of env var names to values that win over everything
            env_file: Dotenv file to read, or None to skip it

        Returns:
            Validated configuration instance

        Raises:
            ConfigError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        # Step 1: Load the dotenv file into the process environment
        if env_file:
            _load_from_dotenv_file(env_file)

        # Step 2: Load from environment variables based on schema
        for field_name, field_info in schema.model_fields.items():
            extra = field_info.json_schema_extra or {}
            env_var = extra.get("env_var")
            if not env_var:
                continue
            value = _clean_value(os.getenv(env_var), glyph=extra.get("glyph", False))
            if value is not None:
                config_dict[field_name] = value

        # Step 3: Apply explicit overrides (highest priority)
        if overrides:
            for field_name, field_info in schema.model_fields.items():
                extra = field_info.json_schema_extra or {}
                env_var = extra.get("env_var")
                if env_var not in overrides:
                    continue
                value = overrides[env_var]
                if isinstance(value, str) and not extra.get("glyph", False):
                    value = _clean_value(value, glyph=False)
                if value is not None:
                    config_dict[field_name] = value

        # Step 4: Create and validate the configuration
        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else "config"
                msg = error["msg"]
                field_info = schema.model_fields.get(field)
                extra = field_info.json_schema_extra if field_info and field_info.json_schema_extra else {}
                env_var = extra.get("env_var", str(field).upper())
                errors.append(f"{env_var}: {msg}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ConfigError(error_msg) from e


def _clean_value(value: Optional[str], glyph: bool) -> Optional[str]:
    """
    Normalize a raw string value.

    Glyph values are kept verbatim, including the empty string, since a
    space is a valid glyph and an empty bracket or ramp is a valid setting.
    Non-glyph values are whitespace-stripped and an empty one means "not set".
    """
    if value is None:
        return None
    if glyph:
        return value
    stripped = value.strip()
    return stripped or None


def _load_from_dotenv_file(env_file: str) -> None:
    """Load values from a dotenv file if it exists."""
    if os.path.exists(env_file):
        load_dotenv(env_file, override=False)
        logger.debug(f"Loaded configuration from {env_file}")
    else:
        logger.debug(f"{env_file} not found, skipping")
