from __future__ import annotations

from typing import List, Tuple

import pytest

from markdown_engine.buffer import Selection
from markdown_engine.config import EngineConfig
from markdown_engine.editor import MarkdownEditor
from markdown_engine.keymaps import KeyInput


def record_events(editor: MarkdownEditor, *names: str) -> List[Tuple[str, object]]:
    seen: List[Tuple[str, object]] = []
    for name in names:
        editor.bus.subscribe(name, lambda payload, name=name: seen.append((name, payload)))
    return seen


def test_execute_bold_on_word_at_caret() -> None:
    editor = MarkdownEditor("hello world")

    result = editor.execute("inline.bold")

    assert result.consumed
    assert result.changed
    assert result.action_id == "inline.bold"
    assert editor.text == "**hello** world"
    assert editor.selection == Selection(2, 7)


def test_execute_params_override_action_defaults() -> None:
    editor = MarkdownEditor("Title")

    editor.execute("block.heading", level=3)

    assert editor.text == "### Title"


def test_ordered_list_action() -> None:
    editor = MarkdownEditor("- item1\n- item2")
    editor.select(0, len(editor.text))

    editor.execute("list.ordered")

    assert editor.text == "1. item1\n2. item2"


def test_unknown_action_raises() -> None:
    with pytest.raises(KeyError):
        MarkdownEditor().execute("block.table_of_contents")


def test_shortcuts_dispatch_through_keymap() -> None:
    editor = MarkdownEditor("hello")

    editor.handle_key(KeyInput("b", ("ctrl",)))
    assert editor.text == "**hello**"

    undone = editor.handle_key(KeyInput("KeyZ", ("meta",)))
    assert undone.action_id == "history.undo"
    assert editor.text == "hello"

    editor.handle_key(KeyInput("KeyZ", ("ctrl", "shift")))
    assert editor.text == "**hello**"


def test_unbound_key_is_not_consumed() -> None:
    result = MarkdownEditor("x").handle_key(KeyInput("KeyQ", ("ctrl",)))

    assert not result.consumed
    assert result.status == "miss"


def test_undo_at_start_is_a_noop() -> None:
    result = MarkdownEditor("x").undo()

    assert result.status == "noop"
    assert not result.changed


def test_typing_run_then_command_undo_order() -> None:
    editor = MarkdownEditor("")
    for text in ("h", "hi"):
        editor.type_text(text, Selection.caret(len(text)))
    editor.select(0, 2)
    editor.execute("inline.italic")

    assert editor.text == "_hi_"
    editor.undo()
    assert editor.text == "hi"
    editor.undo()
    assert editor.text == ""
    assert not editor.can_undo()


def test_load_creates_no_undo_step() -> None:
    editor = MarkdownEditor("draft")
    seen = record_events(editor, "history.reset")

    editor.load("# Loaded")

    assert editor.text == "# Loaded"
    assert not editor.can_undo()
    assert [name for name, _ in seen] == ["history.reset"]


def test_bus_reports_edits_history_and_selection() -> None:
    editor = MarkdownEditor("hello")
    seen = record_events(
        editor, "edit.command", "edit.keystroke", "history.undo", "selection.change"
    )

    editor.type_text("hello!", Selection.caret(6))
    editor.execute("inline.code")
    editor.undo()

    names = [name for name, _ in seen]
    assert names[0] == "edit.keystroke"
    assert "edit.command" in names
    assert "history.undo" in names
    assert "selection.change" in names


def test_markers_follow_config() -> None:
    editor = MarkdownEditor("word", config=EngineConfig(italic_marker="*", bold_marker="__"))

    editor.execute("inline.italic")
    assert editor.text == "*word*"

    editor.execute("inline.italic")
    editor.execute("inline.bold")
    assert editor.text == "__word__"


def test_invalid_params_do_not_touch_history() -> None:
    editor = MarkdownEditor("Title")

    with pytest.raises(ValueError):
        editor.execute("block.heading", level=9)

    assert editor.text == "Title"
    assert not editor.can_undo()


def test_mirror_reports_slide_and_history_flags() -> None:
    editor = MarkdownEditor("a")
    editor.execute("insert.slide")

    mirror = editor.mirror()

    assert mirror.text == "\n---\na"
    assert mirror.can_undo
    assert mirror.attributes["slide"] == "2"
