from __future__ import annotations

from typing import List

from markdown_engine.adapters.textual import (
    TextualMarkdownAdapter,
    TextualUIHooks,
    parse_textual_key,
)
from markdown_engine.buffer import Selection
from markdown_engine.editor import MarkdownEditor


def make_adapter(text: str = "", **hooks: object) -> TextualMarkdownAdapter:
    hooks.setdefault("update_buffer", lambda mirror: None)
    return TextualMarkdownAdapter(MarkdownEditor(text), TextualUIHooks(**hooks))


def test_parse_textual_key_names() -> None:
    bold = parse_textual_key("ctrl+b")
    assert bold is not None
    assert bold.chord.token == "mod+KeyB"

    redo = parse_textual_key("ctrl+shift+z")
    assert redo is not None
    assert redo.chord.token == "mod+shift+KeyZ"

    shifted = parse_textual_key("ctrl+S")
    assert shifted is not None
    assert shifted.chord.token == "mod+shift+KeyS"

    assert parse_textual_key("ctrl+left").chord.token == "mod+ArrowLeft"


def test_adapter_updates_buffer_and_status() -> None:
    updates: List[str] = []
    statuses: List[str] = []
    adapter = make_adapter(
        "hello",
        update_buffer=lambda mirror: updates.append(mirror.text),
        update_status=lambda status: statuses.append(status),
    )

    result = adapter.handle_textual_key("ctrl+b")

    assert result.consumed
    assert updates[0] == "hello"
    assert updates[-1] == "**hello**"
    assert "inline.bold" in statuses


def test_plain_keys_are_left_to_the_widget() -> None:
    adapter = make_adapter("hello")

    result = adapter.handle_textual_key("a")

    assert not result.consumed
    assert adapter.editor.text == "hello"


def test_text_changes_use_row_column_locations() -> None:
    adapter = make_adapter("ab")

    adapter.handle_text_change("ab\ncd", (1, 2))

    assert adapter.editor.text == "ab\ncd"
    assert adapter.editor.selection.start == 5
    assert adapter.selection_locations() == ((1, 2), (1, 2))


def test_reversed_host_selection_is_normalized() -> None:
    adapter = make_adapter("ab\ncd")

    adapter.handle_selection_change((1, 1), (0, 1))

    assert (adapter.editor.selection.start, adapter.editor.selection.end) == (1, 4)


def test_adapter_relays_history_events() -> None:
    events: List[str] = []
    adapter = make_adapter(
        "hello",
        handle_event=lambda name, payload: events.append(name),
    )

    adapter.run_action("inline.bold")
    adapter.handle_textual_key("ctrl+z")

    assert "edit.command" in events
    assert "history.undo" in events
    assert adapter.editor.text == "hello"


def test_engine_errors_surface_as_status() -> None:
    statuses: List[str] = []
    adapter = make_adapter("x", update_status=lambda status: statuses.append(status))

    result = adapter.handle_textual_key("hyper+b")

    assert result.status == "error"
    assert statuses[-1].startswith("error:")


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter("x", log=lambda line: logs.append(line))

    adapter.handle_textual_key("ctrl+b")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_buffer_sync_round_trip() -> None:
    adapter = make_adapter("ab")
    mirror = adapter.pull_buffer()
    mirror.text = "abc"
    mirror.selection = Selection.caret(3)

    adapter.push_host_edit(mirror)

    assert adapter.editor.text == "abc"
    assert adapter.pull_buffer().can_undo
