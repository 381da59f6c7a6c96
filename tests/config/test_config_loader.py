#!/usr/bin/env python3
"""
Tests for schema-driven configuration loading.

Validates defaults, environment overrides, dotenv files, explicit
overrides and validation errors for the bar configuration.
"""

import os
import tempfile
import unittest
from unittest.mock import patch

from progress_string.config import ConfigLoader, ConfigError, ConfigSchema
from progress_string.models import BarFormat


class TestConfigDefaults(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        config = ConfigLoader.load(env_file=None)
        self.assertEqual(config.total, 100)
        self.assertEqual(config.width, 50)
        self.assertEqual(config.fill, "█")
        self.assertEqual(config.empty, " ")
        self.assertEqual(config.partial, " ▏▎▍▌▋▊▉")
        self.assertTrue(config.include_percent)
        self.assertFalse(config.include_numbers)

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults_match_bar_format(self):
        config = ConfigLoader.load(env_file=None)
        self.assertEqual(config.to_bar_format(), BarFormat())

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_env_file_is_skipped(self):
        config = ConfigLoader.load(env_file="does-not-exist.env")
        self.assertEqual(config.width, 50)


class TestConfigOverrides(unittest.TestCase):

    @patch.dict(os.environ, {
        "PROGRESS_TOTAL": "250",
        "PROGRESS_WIDTH": " 20 ",
        "PROGRESS_FILL": "#",
        "PROGRESS_EMPTY": " ",
        "PROGRESS_PARTIAL": "",
        "PROGRESS_BAR_START": "|",
        "PROGRESS_INCLUDE_PERCENT": "off",
        "PROGRESS_INCLUDE_NUMBERS": "yes",
    }, clear=True)
    def test_env_overrides(self):
        config = ConfigLoader.load(env_file=None)
        self.assertEqual(config.total, 250)
        self.assertEqual(config.width, 20)
        self.assertEqual(config.fill, "#")
        # A single space is a valid glyph and must survive loading
        self.assertEqual(config.empty, " ")
        # An empty ramp is a real setting for glyph fields
        self.assertEqual(config.partial, "")
        self.assertEqual(config.bar_start, "|")
        self.assertFalse(config.include_percent)
        self.assertTrue(config.include_numbers)

    @patch.dict(os.environ, {
        "PROGRESS_BAR_START": "",
        "PROGRESS_BAR_END": "",
        "PROGRESS_PARTIAL": "",
        "PROGRESS_WIDTH": "",
    }, clear=True)
    def test_empty_glyph_env_values_are_kept(self):
        config = ConfigLoader.load(env_file=None)
        self.assertEqual(config.bar_start, "")
        self.assertEqual(config.bar_end, "")
        self.assertEqual(config.partial, "")
        self.assertEqual(config.to_bar_format().partial, ())
        # Non-glyph fields still treat an empty value as unset
        self.assertEqual(config.width, 50)

    @patch.dict(os.environ, {"PROGRESS_BAR_START": "", "PROGRESS_PARTIAL": ""}, clear=True)
    def test_env_and_overrides_agree_on_empty_glyphs(self):
        from_env = ConfigLoader.load(env_file=None)
        with patch.dict(os.environ, {}, clear=True):
            from_overrides = ConfigLoader.load(
                overrides={"PROGRESS_BAR_START": "", "PROGRESS_PARTIAL": ""},
                env_file=None,
            )
        self.assertEqual(from_env, from_overrides)

    @patch.dict(os.environ, {"PROGRESS_TOTAL": "2.5"}, clear=True)
    def test_fractional_total(self):
        config = ConfigLoader.load(env_file=None)
        self.assertEqual(config.total, 2.5)

    @patch.dict(os.environ, {"PROGRESS_WIDTH": "20", "PROGRESS_FILL": "#"}, clear=True)
    def test_explicit_overrides_win(self):
        config = ConfigLoader.load(
            overrides={"PROGRESS_WIDTH": "8", "PROGRESS_FILL": "=", "PROGRESS_BAR_END": ""},
            env_file=None,
        )
        self.assertEqual(config.width, 8)
        self.assertEqual(config.fill, "=")
        # Glyph overrides are taken verbatim, so an empty bracket is allowed
        self.assertEqual(config.bar_end, "")

    @patch.dict(os.environ, {"PROGRESS_WIDTH": "12"}, clear=True)
    def test_dotenv_file_does_not_override_environment(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_path = os.path.join(tmp, ".env.local")
            with open(env_path, "w", encoding="utf-8") as f:
                f.write("PROGRESS_WIDTH=30\nPROGRESS_FILL=*\n")

            config = ConfigLoader.load(env_file=env_path)

        self.assertEqual(config.width, 12)
        self.assertEqual(config.fill, "*")


class TestConfigValidation(unittest.TestCase):

    @patch.dict(os.environ, {"PROGRESS_WIDTH": "-1"}, clear=True)
    def test_negative_width(self):
        with self.assertRaises(ConfigError) as ctx:
            ConfigLoader.load(env_file=None)
        self.assertIn("PROGRESS_WIDTH", str(ctx.exception))

    @patch.dict(os.environ, {"PROGRESS_TOTAL": "-10"}, clear=True)
    def test_negative_total(self):
        with self.assertRaises(ConfigError) as ctx:
            ConfigLoader.load(env_file=None)
        self.assertIn("PROGRESS_TOTAL", str(ctx.exception))

    @patch.dict(os.environ, {"PROGRESS_TOTAL": "nan"}, clear=True)
    def test_nan_total(self):
        with self.assertRaises(ConfigError) as ctx:
            ConfigLoader.load(env_file=None)
        self.assertIn("PROGRESS_TOTAL", str(ctx.exception))

    @patch.dict(os.environ, {"PROGRESS_WIDTH": "2.7"}, clear=True)
    def test_fractional_width(self):
        with self.assertRaises(ConfigError) as ctx:
            ConfigLoader.load(env_file=None)
        self.assertIn("PROGRESS_WIDTH", str(ctx.exception))

    @patch.dict(os.environ, {"PROGRESS_FILL": "##"}, clear=True)
    def test_multi_character_fill(self):
        with self.assertRaises(ConfigError) as ctx:
            ConfigLoader.load(env_file=None)
        self.assertIn("PROGRESS_FILL", str(ctx.exception))

    @patch.dict(os.environ, {"PROGRESS_INCLUDE_PERCENT": "maybe"}, clear=True)
    def test_invalid_boolean(self):
        with self.assertRaises(ConfigError):
            ConfigLoader.load(env_file=None)

    def test_schema_rejects_unknown_fields(self):
        with self.assertRaises(Exception):
            ConfigSchema(colour="red")

    def test_schema_validates_assignment(self):
        config = ConfigSchema()
        with self.assertRaises(Exception):
            config.width = -4


if __name__ == "__main__":
    unittest.main()
