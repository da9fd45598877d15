"""
Block elements of the structured document model.

Blocks are immutable and carry no reference to any rendering library; the
renderer decides how each one maps onto the output format.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .inline import Run
from .styles import Spacing

Cell = tuple[Run, ...]


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    spacing: Spacing = Spacing(200, 100)


@dataclass(frozen=True)
class TextBlock:
    runs: tuple[Run, ...]
    spacing: Spacing = Spacing(60, 60, 300)


@dataclass(frozen=True)
class ListItem:
    """
    One item of a list.

    ``numbering`` is the reference of the ordered list the item belongs to,
    None for bullet items. ``first`` marks the opening item of its list.
    """
    runs: tuple[Run, ...]
    ordered: bool
    numbering: Optional[str] = None
    level: int = 0
    first: bool = False
    spacing: Spacing = Spacing(40, 40, 300)


@dataclass(frozen=True)
class Quote:
    runs: tuple[Run, ...]
    spacing: Spacing = Spacing(60, 60, 300)


@dataclass(frozen=True)
class Code:
    runs: tuple[Run, ...]
    spacing: Spacing = Spacing(80, 80, 300)


@dataclass(frozen=True)
class Rule:
    spacing: Spacing = Spacing(120, 120)


@dataclass(frozen=True)
class Table:
    header: tuple[Cell, ...]
    rows: tuple[tuple[Cell, ...], ...]

    @property
    def column_count(self) -> int:
        return max([len(self.header)] + [len(row) for row in self.rows])


@dataclass(frozen=True)
class Spacer:
    """Empty paragraph for a collapsed blank-line run or a section gap."""
    spacing: Spacing = Spacing(80, 80)


Block = Union[Heading, TextBlock, ListItem, Quote, Code, Rule, Table, Spacer]
