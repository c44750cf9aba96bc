import pytest

from markdown_engine.keymaps import (
    ActionRef,
    Binding,
    KeyChord,
    KeymapConflictError,
    KeymapRegistry,
)
from markdown_engine.keymaps.defaults import DEFAULT_ACTIONS, load_default_keymaps


def make_action(action_id: str = "inline.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    chord: str = "mod+KeyK",
    action_id: str = "inline.test",
) -> Binding:
    return Binding(id=binding_id, chord=KeyChord.parse(chord), action_id=action_id)


def test_chord_modifiers_normalize_to_mod() -> None:
    assert KeyChord.parse("ctrl+shift+z").token == "mod+shift+KeyZ"
    assert KeyChord("KeyB", ("cmd",)) == KeyChord("b", ("control",))
    assert KeyChord.parse("shift+alt+meta+7").token == "mod+alt+shift+Digit7"


def test_unknown_modifier_is_rejected() -> None:
    with pytest.raises(ValueError):
        KeyChord("KeyB", ("hyper",))


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="test.k")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings("inline.test")) == [binding]
    match = registry.resolve("ctrl+k")
    assert match is not None
    assert match.binding == binding


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="test.k"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="test.k.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["test.k"]


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="first")
    second = make_binding(binding_id="second")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]
    assert registry.resolve(KeyChord.parse("mod+KeyK")).binding == second


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)
    before = registry.revision()

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.resolve("mod+KeyK") is None
    assert registry.revision() == before + 1
    assert registry.unregister_binding("binding") is None


def test_unknown_action_lookup() -> None:
    with pytest.raises(KeyError):
        KeymapRegistry().get_action("missing")


def test_default_shortcuts() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    expected = {
        "mod+KeyZ": "history.undo",
        "mod+KeyY": "history.redo",
        "mod+shift+KeyZ": "history.redo",
        "mod+KeyB": "inline.bold",
        "mod+KeyI": "inline.italic",
        "mod+KeyU": "inline.underline",
        "mod+shift+KeyS": "inline.strikethrough",
    }
    for chord, action_id in expected.items():
        match = registry.resolve(chord)
        assert match is not None
        assert match.action.id == action_id
    assert registry.stats().action_count == len(DEFAULT_ACTIONS)
    assert registry.has_action("list.ordered")
    assert not list(registry.iter_bindings("list.ordered"))


def test_load_default_keymaps_include_filters() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(
        registry,
        include_actions=("inline.bold",),
    )

    assert registry.stats().action_count == 1
    assert registry.stats().binding_count == 1
    assert registry.get_binding("inline.bold").action_id == "inline.bold"


def test_load_default_keymaps_extra_bindings() -> None:
    registry = KeymapRegistry()
    heading = Binding(
        id="block.heading",
        chord=KeyChord.parse("mod+alt+Digit1"),
        action_id="block.heading",
    )

    load_default_keymaps(registry, extra_bindings=(heading,))

    assert registry.resolve("ctrl+alt+1").action.id == "block.heading"
