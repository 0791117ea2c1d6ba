from versionview import keys
from versionview.key_action import (
    ActionOpts,
    KeyAction,
    KeyActions,
    action_nil,
    new_key_action,
    with_default,
    with_display_name,
)


def dummy_handler(event):
    return event


def test_new_key_action():
    action = new_key_action(
        "test", dummy_handler, True, with_display_name("Test Key"), with_default()
    )
    assert action.description == "test"
    assert action.opts.visible is True
    assert action.opts.display_name == "Test Key"
    assert action.opts.default is True
    assert action.action("evt") == "evt"


def test_new_key_action_without_options():
    action = new_key_action("plain", dummy_handler, False)
    assert action.opts == ActionOpts(visible=False)


def test_action_nil_passes_event_through():
    event = object()
    assert action_nil(event) is event


def test_add_and_get():
    ka = KeyActions()
    ka.add(keys.KEY_ENTER, new_key_action("action", dummy_handler, True))
    got = ka.get(keys.KEY_ENTER)
    assert got is not None
    assert got.description == "action"


def test_get_default_is_not_found():
    ka = KeyActions()
    ka.add(keys.KEY_CTRL_C, new_key_action("default", dummy_handler, True, with_default()))
    assert ka.get(keys.KEY_CTRL_C) is None
    assert len(ka) == 1


def test_get_missing_returns_none():
    assert KeyActions().get(keys.KEY_TAB) is None


def test_delete():
    ka = KeyActions()
    ka.add(keys.KEY_TAB, new_key_action("delete", dummy_handler, True))
    ka.delete(keys.KEY_TAB)
    assert ka.get(keys.KEY_TAB) is None
    assert len(ka) == 0


def test_delete_several_and_missing():
    ka = KeyActions()
    ka.add(keys.KEY_TAB, new_key_action("tab", dummy_handler, True))
    ka.add(keys.KEY_ENTER, new_key_action("enter", dummy_handler, True))
    ka.delete(keys.KEY_TAB, keys.KEY_ENTER, keys.KEY_ESC)
    assert len(ka) == 0


def test_len():
    ka = KeyActions()
    ka.add(keys.KEY_ENTER, new_key_action("enter", dummy_handler, True))
    ka.add(keys.KEY_TAB, new_key_action("tab", dummy_handler, True))
    assert len(ka) == 2


def test_clear():
    ka = KeyActions()
    ka.add(keys.KEY_ENTER, new_key_action("clear", dummy_handler, True))
    ka.clear()
    assert len(ka) == 0


def test_merge():
    a1 = KeyActions()
    a2 = KeyActions()
    a1.add(keys.KEY_ENTER, new_key_action("a1", dummy_handler, True))
    a2.add(keys.KEY_TAB, new_key_action("a2", dummy_handler, True))
    a1.merge(a2)
    assert a1.get(keys.KEY_ENTER).description == "a1"
    assert a1.get(keys.KEY_TAB).description == "a2"
    assert len(a2) == 1


def test_merge_replaces_existing_binding():
    a1 = KeyActions()
    a1.add(keys.KEY_ENTER, new_key_action("old", dummy_handler, True))
    a1.merge(KeyActions.from_map({keys.KEY_ENTER: new_key_action("new", dummy_handler, True)}))
    assert a1.get(keys.KEY_ENTER).description == "new"


def test_range_visits_all():
    ka = KeyActions()
    ka.add(keys.KEY_CTRL_A, new_key_action("a", dummy_handler, True, with_display_name("Alpha")))
    ka.add(keys.KEY_CTRL_B, new_key_action("b", dummy_handler, True))
    visited = [action.description for _, action in ka]
    assert "a" in visited
    assert "b" in visited


def test_iteration_order_letters_words_combos_symbols():
    ka = KeyActions()
    ka.add(keys.KEY_SLASH, new_key_action("slash", dummy_handler, True))
    ka.add(keys.KEY_CTRL_C, new_key_action("quit", dummy_handler, True))
    ka.add(keys.KEY_ENTER, new_key_action("enter", dummy_handler, True))
    ka.add(keys.KEY_I, new_key_action("installed", dummy_handler, True))
    assert [key for key, _ in ka] == [keys.KEY_I, keys.KEY_ENTER, keys.KEY_CTRL_C, keys.KEY_SLASH]


def test_display_name_affects_order_only_when_not_default():
    ka = KeyActions()
    ka.add(keys.KEY_CTRL_A, new_key_action("alpha", dummy_handler, True, with_display_name("Alpha")))
    ka.add(
        keys.KEY_SHIFT_G,
        new_key_action("bottom", dummy_handler, True, with_default(), with_display_name("G")),
    )
    ka.add(keys.KEY_G, new_key_action("top", dummy_handler, True, with_default()))
    order = [action.description for _, action in ka]
    assert order == ["top", "alpha", "bottom"]


def test_from_map_does_not_share_mapping():
    mapping = {keys.KEY_ENTER: KeyAction("enter", dummy_handler)}
    ka = KeyActions.from_map(mapping)
    ka.add(keys.KEY_TAB, KeyAction("tab", dummy_handler))
    assert len(ka) == 2
    assert list(mapping) == [keys.KEY_ENTER]