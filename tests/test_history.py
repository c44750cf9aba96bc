from __future__ import annotations

from typing import List

import pytest

from markdown_engine.buffer import HistoryManager, Keystroke, Selection


def texts(history: HistoryManager) -> List[str]:
    return [entry.text for entry in history.entries]


def test_commands_undo_and_redo() -> None:
    history = HistoryManager("start")
    history.execute_command("one", Selection.caret(3))
    history.execute_command("two")

    assert history.undo().text == "one"
    assert history.undo().text == "start"
    assert history.undo() is None
    assert history.redo().text == "one"
    assert history.current.selection == Selection.caret(3)


def test_unchanged_text_is_not_recorded() -> None:
    history = HistoryManager("same")

    assert history.execute_command("same") is False
    assert len(history) == 1


def test_oldest_entries_are_evicted() -> None:
    history = HistoryManager("", max_size=3)
    for text in ("a", "b", "c", "d"):
        history.execute_command(text)

    assert texts(history) == ["b", "c", "d"]
    assert history.undo().text == "c"
    assert history.undo().text == "b"
    assert history.undo() is None


def test_new_edit_discards_redo_tail() -> None:
    history = HistoryManager("")
    history.execute_command("a")
    history.execute_command("b")
    history.undo()
    history.execute_command("x")

    assert not history.can_redo()
    assert texts(history) == ["", "a", "x"]


def test_typing_run_is_one_undo_step() -> None:
    history = HistoryManager("")
    for text in ("h", "he", "hel"):
        history.handle_change(text)

    assert len(history) == 2
    assert history.undo().text == ""


def test_command_ends_typing_run() -> None:
    history = HistoryManager("")
    history.handle_change("a")
    history.execute_command("**a**")
    history.handle_change("**a**b")

    assert texts(history) == ["", "a", "**a**", "**a**b"]


def test_undo_ends_typing_run() -> None:
    history = HistoryManager("")
    history.apply(Keystroke("a"))
    history.apply(Keystroke("ab"))
    history.undo()
    history.apply(Keystroke("x"))

    assert texts(history) == ["", "x"]


def test_idle_gap_splits_typing_run() -> None:
    ticks = iter([0.0, 0.05, 0.5])
    history = HistoryManager("", coalesce_window_ms=100, clock=lambda: next(ticks))
    for text in ("a", "ab", "abc"):
        history.handle_change(text)

    assert texts(history) == ["", "ab", "abc"]


def test_reset_discards_history() -> None:
    history = HistoryManager("")
    history.execute_command("a")
    history.reset("loaded")

    assert history.text == "loaded"
    assert not history.can_undo()
    assert not history.can_redo()


def test_invalid_limits() -> None:
    with pytest.raises(ValueError):
        HistoryManager("", max_size=0)
    with pytest.raises(ValueError):
        HistoryManager("", coalesce_window_ms=0)
