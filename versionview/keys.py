"""Key codes, key names and fixed layout strings used by the terminal views."""

from __future__ import annotations

import string
from dataclasses import dataclass

# Control keys share their codes with the ASCII control characters.
(
    KEY_CTRL_A,
    KEY_CTRL_B,
    KEY_CTRL_C,
    KEY_CTRL_D,
    KEY_CTRL_E,
    KEY_CTRL_F,
    KEY_CTRL_G,
    KEY_CTRL_H,
    KEY_CTRL_I,
    KEY_CTRL_J,
    KEY_CTRL_K,
    KEY_CTRL_L,
    KEY_CTRL_M,
    KEY_CTRL_N,
    KEY_CTRL_O,
    KEY_CTRL_P,
    KEY_CTRL_Q,
    KEY_CTRL_R,
    KEY_CTRL_S,
    KEY_CTRL_T,
    KEY_CTRL_U,
    KEY_CTRL_V,
    KEY_CTRL_W,
    KEY_CTRL_X,
    KEY_CTRL_Y,
    KEY_CTRL_Z,
) = range(1, 27)

KEY_CTRL_SPACE = 0
KEY_BACKSPACE = 8
KEY_TAB = 9
KEY_ENTER = 13
KEY_ESC = 27
KEY_BACKSPACE2 = 127

KEY_RUNE = 256
KEY_UP = 257
KEY_DOWN = 258
KEY_RIGHT = 259
KEY_LEFT = 260

KEY_HELP = 63
KEY_SPACE = 32
KEY_SLASH = 47
KEY_COLON = 58
KEY_COLON_Q = 59

(
    KEY_0,
    KEY_1,
    KEY_2,
    KEY_3,
    KEY_4,
    KEY_5,
    KEY_6,
    KEY_7,
    KEY_8,
    KEY_9,
) = range(48, 58)

(
    KEY_A,
    KEY_B,
    KEY_C,
    KEY_D,
    KEY_E,
    KEY_F,
    KEY_G,
    KEY_H,
    KEY_I,
    KEY_J,
    KEY_K,
    KEY_L,
    KEY_M,
    KEY_N,
    KEY_O,
    KEY_P,
    KEY_Q,
    KEY_R,
    KEY_S,
    KEY_T,
    KEY_U,
    KEY_V,
    KEY_W,
    KEY_X,
    KEY_Y,
    KEY_Z,
) = range(97, 123)

(
    KEY_SHIFT_A,
    KEY_SHIFT_B,
    KEY_SHIFT_C,
    KEY_SHIFT_D,
    KEY_SHIFT_E,
    KEY_SHIFT_F,
    KEY_SHIFT_G,
    KEY_SHIFT_H,
    KEY_SHIFT_I,
    KEY_SHIFT_J,
    KEY_SHIFT_K,
    KEY_SHIFT_L,
    KEY_SHIFT_M,
    KEY_SHIFT_N,
    KEY_SHIFT_O,
    KEY_SHIFT_P,
    KEY_SHIFT_Q,
    KEY_SHIFT_R,
    KEY_SHIFT_S,
    KEY_SHIFT_T,
    KEY_SHIFT_U,
    KEY_SHIFT_V,
    KEY_SHIFT_W,
    KEY_SHIFT_X,
    KEY_SHIFT_Y,
    KEY_SHIFT_Z,
) = range(65, 91)


def _build_key_names() -> dict[int, str]:
    names: dict[int, str] = {
        KEY_CTRL_SPACE: "Ctrl-Space",
        KEY_BACKSPACE: "Backspace",
        KEY_TAB: "Tab",
        KEY_ENTER: "Enter",
        KEY_ESC: "Esc",
        KEY_BACKSPACE2: "Backspace2",
        KEY_UP: "Up",
        KEY_DOWN: "Down",
        KEY_RIGHT: "Right",
        KEY_LEFT: "Left",
    }
    for offset, letter in enumerate(string.ascii_uppercase):
        code = KEY_CTRL_A + offset
        names.setdefault(code, f"Ctrl-{letter}")
    names.update({ord(ch): ch for ch in string.digits})
    names.update({ord(ch): ch for ch in string.ascii_lowercase})
    names.update({ord(ch): f"Shift-{ch}" for ch in string.ascii_uppercase})
    names.update(
        {
            KEY_HELP: "?",
            KEY_SLASH: "/",
            KEY_SPACE: "space",
            KEY_COLON: ":",
            KEY_COLON_Q: ":q",
        }
    )
    return names


KEY_NAMES: dict[int, str] = _build_key_names()


def key_name(key: int) -> str:
    """Return the display name of a key, or an empty string if it has none."""
    return KEY_NAMES.get(key, "")


def rune_key(char: str) -> int:
    """Return the key code for a single typed character."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


# The logo must have between two and six lines.
LOGO = "\n".join(
    [
        "____________    _______  ___",
        "__  ____/_ |  / /__   |/  /",
        "_  / __ __ | / /__  /|_/ / ",
        "/ /_/ / __ |/ / _  /  / /  ",
        "\\____/  _____/  /_/  /_/",
    ]
)

PAGE_LANGUAGES = "languages"
PAGE_LANGUAGE_VERSIONS = "languageVersions"
PAGE_INSTALLER = "installer"

ALERT_KEY = "alert"
INFO_KEY = "info"
CONFIRM_KEY = "confirm"
ERROR_MSG = "\n".join(
    [
        "",
        "  (\\_/)    ",
        "  ( \u2022_\u2022)   ",
        "  / >......",
    ]
)


@dataclass(frozen=True)
class BorderSet:
    """Characters used to draw box borders, focused and unfocused."""

    horizontal: str = "\u2500"
    vertical: str = "\u2502"
    top_left: str = "\u250c"
    top_right: str = "\u2510"
    bottom_left: str = "\u2514"
    bottom_right: str = "\u2518"
    left_t: str = "\u251c"
    right_t: str = "\u2524"
    top_t: str = "\u252c"
    bottom_t: str = "\u2534"
    cross: str = "\u253c"
    horizontal_focus: str = "\u2500"
    vertical_focus: str = "\u2502"
    top_left_focus: str = "\u250c"
    top_right_focus: str = "\u2510"
    bottom_left_focus: str = "\u2514"
    bottom_right_focus: str = "\u2518"


BORDERS = BorderSet()