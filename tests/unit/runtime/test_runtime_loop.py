"""Main-loop behavior tests with a scripted event source.

The terminal, terminal size, and image adapter are fakes so each test can
count renders, image binds, and out-of-band placement writes.
"""

from __future__ import annotations

import os
import unittest
from contextlib import contextmanager

from PIL import Image

from anitui.catalog import Catalog, Item
from anitui.image.binding import ImageBinding
from anitui.input.events import DOWN, ENTER, UP, KeyEvent, KeyEventKind, press
from anitui.input.modes import InputMode
from anitui.render.composer import ViewComposer
from anitui.runtime.loop import run_main_loop
from anitui.runtime.state import AppState


class _FakeTerminal:
    def __init__(self) -> None:
        self.writes: list[str] = []
        self.raw_mode_entered = 0
        self.raw_mode_exited = 0

    @contextmanager
    def raw_mode(self):
        self.raw_mode_entered += 1
        try:
            yield
        finally:
            self.raw_mode_exited += 1

    def write(self, text: str) -> None:
        self.writes.append(text)

    def count(self, text: str) -> int:
        return sum(1 for chunk in self.writes if chunk == text)

    def frames(self) -> list[str]:
        return [chunk for chunk in self.writes if chunk.startswith("\033[H")]


class _ScriptedEvents:
    """Replays events; ``None`` entries are poll timeouts. Closes when drained."""

    def __init__(self, events: list[KeyEvent | None | type[BaseException]]) -> None:
        self._events = list(events)
        self.closed = False

    def read_event(self, timeout_ms: int | None = None) -> KeyEvent | None:
        if not self._events:
            self.closed = True
            return None
        event = self._events.pop(0)
        if isinstance(event, type) and issubclass(event, BaseException):
            raise event()
        return event


class _FakeProtocol:
    name = "fake"

    def bind(self, image):
        return ("drawable", image.size)

    def paint(self, drawable, region, screen) -> None:
        pass

    def place(self, drawable, region) -> str:
        return "<PLACE>"

    def clear(self) -> str:
        return "<CLEAR>"


def _make_state(*names: str, images: bool = True) -> AppState:
    items = [Item(name=name, image=Image.new("RGB", (4, 6)) if images else None) for name in names]
    return AppState.for_catalog(Catalog(items), image_binding=ImageBinding(_FakeProtocol()))


def _run(state: AppState, events: list, sizes: list[tuple[int, int]] | None = None) -> _FakeTerminal:
    terminal = _FakeTerminal()
    remaining = list(sizes or [(80, 24)])

    def _size(_fallback):
        columns, lines = remaining.pop(0) if len(remaining) > 1 else remaining[0]
        return os.terminal_size((columns, lines))

    run_main_loop(state, terminal, _ScriptedEvents(events), ViewComposer(), get_terminal_size=_size)
    return terminal


class RuntimeLoopTests(unittest.TestCase):
    def test_navigation_rebinds_once_per_selection_change(self) -> None:
        state = _make_state("A", "B", "C")

        terminal = _run(state, [press(DOWN), press(DOWN), press(UP), press("q")])

        self.assertTrue(state.should_exit)
        self.assertEqual(state.cursor.selected, 0)
        self.assertEqual(state.image_binding.bind_count, 3)
        self.assertEqual(terminal.count("<PLACE>"), 3)
        # Two replacements plus the teardown clear.
        self.assertEqual(terminal.count("<CLEAR>"), 3)

    def test_unmapped_key_neither_rebinds_nor_rerenders(self) -> None:
        state = _make_state("A", "B")

        terminal = _run(state, [press("x"), press("z")])

        self.assertIsNone(state.cursor.selected)
        self.assertEqual(state.image_binding.bind_count, 0)
        self.assertEqual(state.image_binding.generation, 1)
        self.assertEqual(len(terminal.frames()), 1)

    def test_release_and_repeat_events_are_ignored(self) -> None:
        state = _make_state("A", "B")

        terminal = _run(
            state,
            [KeyEvent(DOWN, KeyEventKind.RELEASE), KeyEvent("q", KeyEventKind.REPEAT)],
        )

        self.assertFalse(state.should_exit)
        self.assertIsNone(state.cursor.selected)
        self.assertEqual(state.image_binding.bind_count, 0)
        self.assertEqual(len(terminal.frames()), 1)

    def test_capture_commit_appends_item_without_rebinding(self) -> None:
        state = _make_state("A", "B", "C")
        events = [press("i")] + [press(ch) for ch in "Naruto"] + [press(ENTER)]

        terminal = _run(state, events)

        self.assertIs(state.mode, InputMode.COMMAND)
        self.assertEqual([item.name for item in state.catalog], ["A", "B", "C", "Naruto"])
        self.assertEqual(state.capture.text, "")
        self.assertEqual(state.image_binding.bind_count, 0)
        self.assertIn("Naruto - Ongoing", terminal.frames()[-1])

    def test_placement_is_written_only_when_drawable_changes(self) -> None:
        state = _make_state("A", "B", "C")

        terminal = _run(state, [press(DOWN), press("x"), None, press(DOWN)])

        self.assertEqual(state.cursor.selected, 1)
        self.assertEqual(terminal.count("<PLACE>"), 2)

    def test_resize_rerenders_and_replaces_image(self) -> None:
        state = _make_state("A", "B")

        terminal = _run(state, [press(DOWN), None], sizes=[(80, 24), (80, 24), (100, 30)])

        self.assertEqual(state.image_binding.bind_count, 1)
        self.assertEqual(len(terminal.frames()), 3)
        self.assertEqual(terminal.count("<PLACE>"), 2)

    def test_keyboard_interrupt_does_not_stop_loop(self) -> None:
        state = _make_state("A")

        _run(state, [KeyboardInterrupt, press(DOWN), press("q")])

        self.assertTrue(state.should_exit)
        self.assertEqual(state.cursor.selected, 0)

    def test_closed_input_exits_and_restores_terminal(self) -> None:
        state = _make_state("A")

        terminal = _run(state, [])

        self.assertFalse(state.should_exit)
        self.assertEqual((terminal.raw_mode_entered, terminal.raw_mode_exited), (1, 1))
        self.assertEqual(len(terminal.frames()), 1)
        self.assertEqual(terminal.count("<CLEAR>"), 0)

    def test_state_without_image_binding(self) -> None:
        state = AppState.for_catalog(Catalog([Item(name="A")]))

        terminal = _run(state, [press(DOWN), press("q")])

        self.assertEqual(state.cursor.selected, 0)
        self.assertEqual(len(terminal.frames()), 2)
        self.assertNotIn("<PLACE>", terminal.writes)


if __name__ == "__main__":
    unittest.main()
