"""Tabular models and a searchable table view over them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol

from versionview.key_action import KeyActions


class Color(str, Enum):
    """Text colours used for table cells."""

    WHITE = "white"
    GREEN = "green"
    SKYBLUE = "skyblue"


@dataclass(frozen=True)
class TableHeader:
    """A column heading with its layout options."""

    title: str
    fixed_width: int = 0
    # Share of the spare width the column takes.
    expansion: int = 0
    hide: bool = False


class Tabular(Protocol):
    """A data source that a search table can display."""

    def title(self) -> str: ...

    def headers(self) -> list[TableHeader]: ...

    def rows(self) -> list[list[str]]: ...

    def get_row(self, row: list[str]) -> Any: ...

    def row_color(self, row: list[str]) -> Color: ...

    def filter(self, key: str, value: str) -> None: ...


@dataclass(frozen=True)
class Cell:
    """One rendered table cell."""

    text: str
    color: Color = Color.WHITE
    expansion: int = 0
    selectable: bool = True


def fixed_width(text: str, width: int) -> str:
    """Cut text to width characters, or pad it with spaces to that width."""
    if len(text) > width:
        return text[:width]
    return text + " " * (width - len(text))


class SearchTable:
    """A table over a tabular model, with a header row and a search filter."""

    def __init__(self, model: Tabular) -> None:
        self.model = model
        self.rows: list[list[str]] = model.rows()
        self.condition = ""
        self.actions = KeyActions()
        self.cells: list[list[Cell]] = []
        self.selected: tuple[int, int] = (0, 0)
        self.offset: tuple[int, int] = (0, 0)
        self.render()

    def set_model(self, model: Tabular) -> None:
        """Replace the model, clear the search and redraw."""
        self.model = model
        self.rows = model.rows()
        self.condition = ""
        self.render()

    def get_selection(self) -> Optional[Any]:
        """Return the model's item for the selected data row, or None."""
        row, _ = self.selected
        if not self.rows or row <= 0 or row - 1 >= len(self.rows):
            return None
        return self.model.get_row(self.rows[row - 1])

    def select(self, row: int, column: int) -> None:
        self.selected = (row, column)

    def search(self, condition: str) -> None:
        """Keep only rows with a cell containing condition, ignoring case."""
        self.condition = condition
        if not condition:
            self.rows = self.model.rows()
        else:
            needle = condition.lower()
            self.rows = [
                row
                for row in self.model.rows()
                if any(needle in cell.lower() for cell in row)
            ]
        self.render()

    def title(self) -> str:
        """The table title: model title, total row count and any search."""
        base = f" [aqua::b]{self.model.title()}[-:-:-] [skyblue][{len(self.model.rows())}][-] "
        if self.condition:
            return f"{base}</{self.condition}> "
        return base

    def render(self) -> None:
        """Rebuild the cells from the model and the current rows."""
        headers = self.model.headers()
        header_cells = [
            Cell(
                fixed_width(h.title, h.fixed_width) if h.fixed_width > 0 else h.title,
                expansion=h.expansion,
                selectable=False,
            )
            for h in headers
            if not h.hide
        ]
        body = []
        for row in self.rows:
            color = self.model.row_color(row)
            body.append(
                [
                    Cell(
                        fixed_width(text, h.fixed_width) if h.fixed_width > 0 else text,
                        color=color,
                        expansion=h.expansion,
                    )
                    for h, text in zip(headers, row)
                    if not h.hide
                ]
            )
        self.cells = [header_cells, *body]
        self.select(1 if self.rows else 0, 0)
        self.offset = (0, 0)