"""The application shell: global keys, pages, dialogs, header and help."""

from __future__ import annotations

import getpass
import platform
import socket
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol

from versionview.key_action import KeyAction, KeyActions, new_key_action
from versionview.keys import (
    ALERT_KEY,
    CONFIRM_KEY,
    ERROR_MSG,
    INFO_KEY,
    KEY_CTRL_C,
    KEY_RUNE,
    key_name,
)

# Modifier value of the Alt key as reported by the terminal layer.
MOD_ALT = 4

SPINNER_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

CONFIRM_LABEL = "Confirm"
CANCEL_LABEL = "Cancel"
DISMISS_LABEL = "Dismiss"

HELP_ROWS_PER_COLUMN = 6

_ARCH_ALIASES = {"x86_64": "amd64", "amd64": "amd64", "aarch64": "arm64", "arm64": "arm64"}


@dataclass(frozen=True)
class KeyEvent:
    """A key press as seen by key handlers."""

    key: int
    char: str = ""
    alt: bool = False


class Page(Protocol):
    """A full-screen page that contributes its own key bindings."""

    def key_actions(self) -> KeyActions: ...


@dataclass
class Dialog:
    """A modal box with a title, a message and buttons."""

    title: str
    text: str = ""
    buttons: list[str] = field(default_factory=list)
    on_done: Optional[Callable[[int, str], None]] = None
    frames: tuple[str, ...] = ()
    caption: str = ""
    frame: int = 0

    def tick(self) -> None:
        """Advance the spinner of a loading dialog by one frame."""
        if not self.frames:
            return
        self.frame += 1
        self.text = _loading_text(self.frames[self.frame % len(self.frames)], self.caption)


def _loading_text(spinner: str, caption: str) -> str:
    return f"[yellow]{spinner} {caption}[-:-:-]"


def _to_int16(value: int) -> int:
    return ((value + 0x8000) % 0x10000) - 0x8000


def _hostname() -> str:
    try:
        return socket.gethostname() or "unknown"
    except OSError:
        return "unknown"


def _username() -> str:
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        return "unknown"


def _system() -> str:
    machine = platform.machine().lower()
    return f"{platform.system().lower()}/{_ARCH_ALIASES.get(machine, machine)}"


class Application:
    """Holds the open pages and dialogs and dispatches key presses."""

    def __init__(
        self,
        version: str = "",
        log_level: str = "info",
        update_checker: Optional[Callable[[], tuple[bool, str]]] = None,
        page_factories: Optional[dict[str, Callable[["Application"], Any]]] = None,
    ) -> None:
        self.version = version
        self.log_level = log_level
        self.update_checker = update_checker
        self.page_factories: dict[str, Callable[[Application], Any]] = dict(page_factories or {})
        self.pages: dict[str, Any] = {}
        self.language: Any = None
        self.current_page: Optional[str] = None
        self.help: list[list[str]] = []
        self.running = True
        self._lock = threading.RLock()
        self.actions = KeyActions()
        self.actions.merge(
            KeyActions.from_map({KEY_CTRL_C: new_key_action("Quit", self._quit, False)})
        )

    def _quit(self, event: Any) -> None:
        self.stop()
        return None

    def stop(self) -> None:
        """Stop the application."""
        self.running = False

    def as_key(self, key: int, char: str = "", alt: bool = False) -> int:
        """Map a key press to the code used for bindings."""
        if key != KEY_RUNE:
            return key
        code = ord(char)
        if alt:
            code = _to_int16(code * MOD_ALT)
        return code

    def has_action(self, key: int) -> Optional[KeyAction]:
        """Return the global action bound to key, if any."""
        return self.actions.get(key)

    def is_top_dialog(self) -> bool:
        """Whether an alert or confirmation is open over everything else."""
        with self._lock:
            return ALERT_KEY in self.pages or CONFIRM_KEY in self.pages

    def handle_key(self, key: int, char: str = "", alt: bool = False) -> Any:
        """Run the global action for a key press, or pass the event on."""
        event = KeyEvent(key, char, alt)
        action = self.has_action(self.as_key(key, char, alt))
        if action is not None and not self.is_top_dialog():
            return action.action(event)
        return event

    def switch_page(self, name: str) -> Any:
        """Open the named page and show its key bindings in the help."""
        page = self.page_factories[name](self)
        with self._lock:
            self.pages[name] = page
            self.current_page = name
        self.help = self.help_rows(page.key_actions())
        return page

    def _open(self, name: str, dialog: Dialog) -> Dialog:
        with self._lock:
            self.pages[name] = dialog
        return dialog

    def _close(self, name: str) -> None:
        with self._lock:
            self.pages.pop(name, None)

    def confirm(
        self,
        message: str,
        on_confirm: Callable[[], None],
        on_cancel: Callable[[], None],
    ) -> Dialog:
        """Ask a yes/no question; the chosen callback runs before it closes."""

        def done(index: int, label: str) -> None:
            if label == CONFIRM_LABEL:
                on_confirm()
            else:
                on_cancel()
            self._close(CONFIRM_KEY)

        return self._open(
            CONFIRM_KEY,
            Dialog(
                title=f" [blue]< {CONFIRM_LABEL} >[-:-:-] ",
                text=message,
                buttons=[CONFIRM_LABEL, CANCEL_LABEL],
                on_done=done,
            ),
        )

    def info(self, message: str) -> Dialog:
        """Show an informational message."""
        return self._open(
            INFO_KEY,
            Dialog(
                title=" [blue]< Info >[-:-:-] ",
                text=message,
                buttons=[DISMISS_LABEL],
                on_done=lambda index, label: self._close(INFO_KEY),
            ),
        )

    def alert(self, message: str) -> Dialog:
        """Show an error message."""
        return self._open(
            ALERT_KEY,
            Dialog(
                title=" [red]< Alert >[-:-:-] ",
                text=f"< {message} >\n{ERROR_MSG}",
                buttons=[DISMISS_LABEL],
                on_done=lambda index, label: self._close(ALERT_KEY),
            ),
        )

    def show_loading(self, message: str, name: str) -> Dialog:
        """Show a loading box with a spinner under the given page name."""
        caption = f"Loading {message}..."
        return self._open(
            name,
            Dialog(
                title=" [blue] < Loading >[-] ",
                text=_loading_text(SPINNER_FRAMES[0], caption),
                frames=SPINNER_FRAMES,
                caption=caption,
            ),
        )

    def hide_loading(self, name: str) -> None:
        """Close the loading box opened under name."""
        self._close(name)

    def press(self, name: str, label: str) -> None:
        """Press the button with label on the dialog open under name."""
        with self._lock:
            dialog = self.pages[name]
        if not isinstance(dialog, Dialog):
            raise TypeError(f"page {name!r} is not a dialog")
        index = dialog.buttons.index(label)
        if dialog.on_done is not None:
            dialog.on_done(index, label)

    def header_rows(self) -> list[tuple[str, str]]:
        """The labelled facts shown in the header, with any newer release."""
        rows = [
            ("[yellow] Hostname[-:-:-]", _hostname()),
            ("[yellow] System[-:-:-]", _system()),
            ("[yellow] Revision[-:-:-]", self.version),
            ("[yellow] Username[-:-:-]", _username()),
            ("[yellow] Log Level[-:-:-]", self.log_level),
        ]
        if self.update_checker is not None:
            try:
                has_update, latest = self.update_checker()
            except Exception:
                # A failed update check only means nothing new is shown.
                has_update, latest = False, ""
            if has_update:
                rows.append(("[blue::b] New Version[-:-:-]", f"[blue::b]{latest}❗️[-:-:-]"))
        return rows

    def help_rows(self, actions: KeyActions) -> list[list[str]]:
        """Lay out visible bindings of actions and the global ones in columns."""
        combined = KeyActions()
        combined.merge(actions)
        combined.merge(self.actions)
        rows: list[list[str]] = [[] for _ in range(HELP_ROWS_PER_COLUMN)]
        visible = [(key, action) for key, action in combined if action.opts.visible]
        for position, (key, action) in enumerate(visible):
            name = action.opts.display_name or key_name(key).lower()
            rows[position % HELP_ROWS_PER_COLUMN].extend(
                [f"[skyblue]<{name}>[-:-:-]", f"[gray]{action.description}[-:-:-]"]
            )
        return [row for row in rows if row]