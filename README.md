# versionview

`versionview` holds the screen logic of an interactive terminal browser:
which keys do what, which rows a table shows, what a search matches, which
dialog is on top and what the header and help areas contain. It draws
nothing itself, so it can sit behind any terminal toolkit and can be driven
entirely from tests.

It has no runtime dependencies.

## Modules

- `versionview.keys` – key codes (`KEY_ENTER`, `KEY_ESC`, `KEY_CTRL_C`,
  `KEY_A` … `KEY_Z`, `KEY_SHIFT_A` … `KEY_SHIFT_Z`, `KEY_0` … `KEY_9`,
  `KEY_SLASH`, `KEY_COLON`, …), `key_name` for a key's display name (empty
  string when it has none), `rune_key` for the code of a typed character
  (`ValueError` unless given exactly one character), the `LOGO` text, page
  and dialog names, and the `BORDERS` box-drawing set.
- `versionview.key_action` – key bindings. `new_key_action(description,
  action, visible, *options)` builds a `KeyAction` with `ActionOpts`; the
  options `with_display_name(name)` and `with_default()` change how it is
  shown, and `action_nil` is a handler that returns its event unchanged.
  `KeyActions` is a thread-safe collection with `add`, `get`, `delete`,
  `merge`, `clear`, `len()` and `KeyActions.from_map`. `get` returns `None`
  for a missing key and also for a display-only (`with_default`) binding.
  Iterating yields `(key, action)` pairs ordered by name: single letters
  first, then words, then combinations containing `-`, then symbols.
- `versionview.table` – `TableHeader`, the `Tabular` protocol a table model
  follows (`title`, `headers`, `rows`, `get_row`, `row_color`, `filter`),
  `Color`, `Cell`, `fixed_width` for clipping or space-padding text, and
  `SearchTable`, which renders a header row plus data rows, hides hidden
  columns, applies fixed widths and filters rows case-insensitively across
  all cells.
- `versionview.application` – `Application`, which maps key presses to
  binding codes (`as_key`), runs global bindings (`handle_key`; Ctrl-C
  stops the application unless an alert or confirmation is open), keeps open
  pages and `Dialog`s (`confirm`, `info`, `alert`, `show_loading`,
  `hide_loading`, `press`), opens pages built by the factories it was given
  (`switch_page`), and builds the header rows (host, system, revision, user,
  log level, and a newer release if the update checker reports one) and the
  help rows, six bindings per column.

## Example

```python
from versionview.key_action import KeyActions, action_nil, new_key_action, with_display_name
from versionview.keys import rune_key
from versionview.table import Color, SearchTable, TableHeader, fixed_width

actions = KeyActions()
actions.add(rune_key("i"), new_key_action("Toggle installed", action_nil, True))
actions.add(rune_key("/"), new_key_action("Search", action_nil, True, with_display_name("/")))
print(len(actions))                    # 2

print(repr(fixed_width("abc", 5)))     # 'abc  '
print(repr(fixed_width("abcdef", 3)))  # 'abc'


class People:
    def __init__(self):
        self._rows = [["Alice", "30"], ["Bob", "25"], ["Charlie", "40"]]

    def title(self):
        return "People"

    def headers(self):
        return [TableHeader("Name", expansion=1), TableHeader("Age", expansion=1)]

    def rows(self):
        return self._rows

    def get_row(self, row):
        return row

    def row_color(self, row):
        return Color.WHITE

    def filter(self, key, value):
        pass


table = SearchTable(People())
table.search("bob")
print(table.rows)             # [['Bob', '25']]
print(table.get_selection())  # ['Bob', '25']
print(table.title())          # ' [aqua::b]People[-:-:-] [skyblue][3][-] </bob> '
```

Dialogs are answered by pressing a button label:

```python
from versionview.application import Application

app = Application()
app.confirm("Delete it?", lambda: print("yes"), lambda: print("no"))
print(app.is_top_dialog())     # True
app.press("confirm", "Confirm")  # prints "yes" and closes the dialog
print(app.is_top_dialog())     # False
```

## What it does not do

- It draws nothing and reads no keyboard; a terminal toolkit must render the
  cells, dialogs and rows it produces and feed key presses to `handle_key`.
- It ships no table models or pages of its own: there is no list of
  languages or versions, no installer and no command to start. Pages are
  supplied to `Application` through its `page_factories` argument, and models
  through any object following `Tabular`.
- It installs, removes and switches nothing by itself.