from __future__ import annotations

import pytest

from markdown_engine.buffer import BufferValidationError, EditorSession, EditResult, Selection
from markdown_engine.commands.blocks import apply_heading
from markdown_engine.commands.inline import toggle_bold
from markdown_engine.config import EngineConfig


def test_apply_commits_text_and_selection_together() -> None:
    session = EditorSession("hello world")

    result = session.apply(toggle_bold, label="inline.bold")

    assert session.text == result.text == "**hello** world"
    assert session.selection == Selection(2, 7)
    assert session.history.current.label == "inline.bold"


def test_failed_operation_leaves_session_untouched() -> None:
    session = EditorSession("Title")

    with pytest.raises(ValueError):
        session.apply(apply_heading, 9, label="block.heading")

    assert session.text == "Title"
    assert len(session.history) == 1


def test_undo_restores_selection_of_earlier_state() -> None:
    session = EditorSession("hello world")
    session.apply(toggle_bold, label="inline.bold")

    session.undo()
    assert session.text == "hello world"
    assert session.selection == Selection.caret(0)

    session.redo()
    assert session.selection == Selection(2, 7)


def test_select_is_validated() -> None:
    session = EditorSession("abc")

    assert session.select(1, 3) == Selection(1, 3)
    with pytest.raises(BufferValidationError):
        session.select(2, 9)


def test_type_text_defaults_caret_to_end() -> None:
    session = EditorSession("")

    session.type_text("abc")

    assert session.selection == Selection.caret(3)
    mirror = session.mirror()
    assert mirror.can_undo
    assert not mirror.can_redo


def test_load_resets_history() -> None:
    session = EditorSession("old")
    session.type_text("older")

    session.load("new")

    assert session.text == "new"
    assert not session.history.can_undo()
    assert session.selection == Selection.caret(0)


def test_history_limit_comes_from_config() -> None:
    session = EditorSession("", config=EngineConfig(max_history_size=2))
    for text in ("a", "b", "c"):
        session.apply(
            lambda buffer, selection, value=text: EditResult.with_caret(value, len(value)),
            label="set",
        )

    assert [entry.text for entry in session.history.entries] == ["b", "c"]


def test_current_slide_follows_caret() -> None:
    session = EditorSession("one\n---\ntwo")

    assert session.current_slide == 1
    session.select(9)
    assert session.current_slide == 2


def test_snapshot_tracks_history_position() -> None:
    session = EditorSession("a")
    session.type_text("ab")

    view = session.snapshot()

    assert view.text == "ab"
    assert (view.history_index, view.history_size) == (1, 2)
