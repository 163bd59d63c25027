"""Tests for config loading and input sanitization.

Malformed files fall back to defaults; each invalid value is dropped on its
own while valid neighbours are kept.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from anitui.input.modes import CaptureArrowPolicy
from anitui.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def _load_with(self, payload: str) -> config.AppConfig:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(payload, encoding="utf-8")
            with mock.patch("anitui.runtime.config.CONFIG_PATH", config_path):
                return config.load_app_config()

    def test_missing_file_gives_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("anitui.runtime.config.CONFIG_PATH", Path(tmp) / "absent.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_app_config(), config.AppConfig())

    def test_malformed_or_non_object_json_gives_defaults(self) -> None:
        self.assertEqual(self._load_with("{not json"), config.AppConfig())
        self.assertEqual(self._load_with("[1, 2]"), config.AppConfig())

    def test_valid_values_are_loaded(self) -> None:
        loaded = self._load_with(
            json.dumps(
                {
                    "theme": " ocean ",
                    "images": False,
                    "capture_arrows": "IGNORE",
                    "poster_dir": "/tmp/posters",
                    "cell_pixels": [10, 20],
                    "enhanced_keyboard": False,
                    "debug_log": True,
                }
            )
        )
        self.assertEqual(
            loaded,
            config.AppConfig(
                theme="ocean",
                images=False,
                capture_arrows=CaptureArrowPolicy.IGNORE,
                poster_dir=Path("/tmp/posters"),
                cell_pixels=(10, 20),
                enhanced_keyboard=False,
                debug_log=True,
            ),
        )

    def test_invalid_values_fall_back_individually(self) -> None:
        loaded = self._load_with(
            json.dumps(
                {
                    "theme": "   ",
                    "images": "no",
                    "capture_arrows": "sideways",
                    "poster_dir": 42,
                    "cell_pixels": [True, 20],
                    "enhanced_keyboard": 0,
                    "debug_log": True,
                }
            )
        )
        self.assertEqual(loaded, config.AppConfig(debug_log=True))

    def test_cell_pixels_shapes(self) -> None:
        self.assertIsNone(config._cell_pixels_value({"cell_pixels": [8]}))
        self.assertIsNone(config._cell_pixels_value({"cell_pixels": [8, 0]}))
        self.assertIsNone(config._cell_pixels_value({"cell_pixels": [8.5, 16]}))
        self.assertEqual(config._cell_pixels_value({"cell_pixels": [9, 18]}), (9, 18))

    def test_parse_capture_arrows(self) -> None:
        self.assertIs(config.parse_capture_arrows("abandon"), CaptureArrowPolicy.ABANDON)
        self.assertIs(config.parse_capture_arrows(" Ignore "), CaptureArrowPolicy.IGNORE)
        self.assertIsNone(config.parse_capture_arrows(None))
        self.assertIsNone(config.parse_capture_arrows("later"))


if __name__ == "__main__":
    unittest.main()
