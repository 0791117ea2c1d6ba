"""Key bindings: actions attached to keys, with display options and ordering."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Optional

from versionview.keys import key_name

ActionHandler = Callable[[Any], Any]
ActionOptsFn = Callable[["ActionOpts"], None]


@dataclass
class ActionOpts:
    """Display options for a key action."""

    display_name: str = ""
    visible: bool = False
    shared: bool = False
    # Shown in the help only; the key is handled elsewhere.
    default: bool = False


@dataclass
class KeyAction:
    """A described handler bound to a key."""

    description: str
    action: ActionHandler
    opts: ActionOpts = field(default_factory=ActionOpts)


def action_nil(event: Any) -> Any:
    """Handler that passes the event through untouched."""
    return event


def new_key_action(
    description: str, action: ActionHandler, visible: bool, *args: ActionOptsFn
) -> KeyAction:
    """Create a key action, applying each option function in turn."""
    opts = ActionOpts(visible=visible)
    for apply in args:
        apply(opts)
    return KeyAction(description=description, action=action, opts=opts)


def with_display_name(display_name: str) -> ActionOptsFn:
    """Option that overrides the name shown for the key."""

    def apply(opts: ActionOpts) -> None:
        opts.display_name = display_name

    return apply


def with_default() -> ActionOptsFn:
    """Option that marks the action as display-only."""

    def apply(opts: ActionOpts) -> None:
        opts.default = True

    return apply


def _priority(name: str) -> int:
    if len(name) == 1 and "a" <= name <= "z":
        return 0
    if "-" in name:
        return 2
    if name and "a" <= name[0] <= "z":
        return 1
    return 3


class KeyActions:
    """A thread-safe set of key bindings."""

    def __init__(self) -> None:
        self._actions: dict[int, KeyAction] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_map(cls, mapping: Mapping[int, KeyAction]) -> "KeyActions":
        """Build a binding set from a key-to-action mapping."""
        actions = cls()
        actions._actions.update(mapping)
        return actions

    def get(self, key: int) -> Optional[KeyAction]:
        """Return the action bound to key, or None if absent or display-only."""
        with self._lock:
            action = self._actions.get(key)
        if action is None or action.opts.default:
            return None
        return action

    def __len__(self) -> int:
        with self._lock:
            return len(self._actions)

    def clear(self) -> None:
        with self._lock:
            self._actions.clear()

    def add(self, key: int, action: KeyAction) -> None:
        with self._lock:
            self._actions[key] = action

    def delete(self, *args: int) -> None:
        with self._lock:
            for key in args:
                self._actions.pop(key, None)

    def _sort_name(self, key: int) -> str:
        name = key_name(key).lower()
        action = self.get(key)
        if action is not None and action.opts.display_name:
            name = action.opts.display_name.lower()
        return name

    def __iter__(self) -> Iterator[tuple[int, KeyAction]]:
        """Yield (key, action) pairs: single letters, words, combinations, symbols."""
        with self._lock:
            snapshot = dict(self._actions)

            def order(key: int) -> tuple[int, str]:
                name = self._sort_name(key)
                return _priority(name), name

            ordered = sorted(snapshot, key=order)
        for key in ordered:
            yield key, snapshot[key]

    def merge(self, other: "KeyActions") -> None:
        """Copy every binding of other into this set, replacing clashes."""
        with other._lock:
            incoming = dict(other._actions)
        with self._lock:
            self._actions.update(incoming)