"""Bootstrap wiring tests for ``anitui.runtime.app``."""

from __future__ import annotations

import unittest
from unittest import mock

from anitui.image import HalfBlockImageProtocol, KittyImageProtocol
from anitui.input.modes import CaptureArrowPolicy
from anitui.runtime import app
from anitui.runtime.config import AppConfig


class BuildAppStateTests(unittest.TestCase):
    def test_defaults_seed_catalog_with_no_selection(self) -> None:
        state = app.build_app_state(AppConfig(), kitty_graphics_supported=False)

        self.assertEqual(len(state.catalog), 3)
        self.assertIsNone(state.cursor.selected)
        self.assertIsInstance(state.image_binding.protocol, HalfBlockImageProtocol)
        self.assertFalse(state.image_binding.synced)
        self.assertIs(state.capture_arrows, CaptureArrowPolicy.ABANDON)

    def test_kitty_protocol_uses_configured_cell_size(self) -> None:
        config = AppConfig(cell_pixels=(9, 18), capture_arrows=CaptureArrowPolicy.IGNORE)
        state = app.build_app_state(config, kitty_graphics_supported=True)

        protocol = state.image_binding.protocol
        self.assertIsInstance(protocol, KittyImageProtocol)
        self.assertEqual((protocol.cell_width, protocol.cell_height), (9, 18))
        self.assertIs(state.capture_arrows, CaptureArrowPolicy.IGNORE)

    def test_images_disabled(self) -> None:
        state = app.build_app_state(AppConfig(images=False), kitty_graphics_supported=True)
        self.assertIsNone(state.image_binding)


class RunAppTests(unittest.TestCase):
    def test_run_app_wires_terminal_reader_and_theme(self) -> None:
        config = AppConfig(theme="ocean", enhanced_keyboard=False)
        with mock.patch("anitui.runtime.app.TerminalController") as controller_cls, mock.patch(
            "anitui.runtime.app.run_main_loop"
        ) as loop_mock:
            controller_cls.return_value.supports_kitty_graphics.return_value = False
            app.run_app(config, stdin_fd=5, stdout_fd=6)

        controller_cls.assert_called_once_with(5, 6, enhanced_keyboard=False)
        loop_mock.assert_called_once()
        state, terminal, events, composer = loop_mock.call_args.args
        self.assertIs(terminal, controller_cls.return_value)
        self.assertEqual(events.fd, 5)
        self.assertEqual(composer.theme.name, "ocean")
        self.assertEqual(len(state.catalog), 3)


if __name__ == "__main__":
    unittest.main()
