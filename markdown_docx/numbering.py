"""
Numbering definitions for ordered lists.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class NumberingDefinition:
    """A single-level decimal numbering scheme bound to one ordered list."""
    reference: str
    format: str = "decimal"
    template: str = "%1."
    indent_left: int = 720
    indent_hanging: int = 360


class NumberingRegistry:
    """
    Hands out one numbering definition per ordered list in a document.

    Each list gets its own identity so numbering restarts at 1 for every
    list, even when two lists look identical. Definitions are created on
    demand; there is no upper bound on how many lists a document may hold.
    """

    def __init__(self, prefix: str = "list", indent_left: int = 720, indent_hanging: int = 360):
        self.prefix = prefix
        self.indent_left = indent_left
        self.indent_hanging = indent_hanging
        self._definitions: list[NumberingDefinition] = []

    def allocate(self) -> NumberingDefinition:
        definition = NumberingDefinition(
            reference=f"{self.prefix}-{len(self._definitions)}",
            indent_left=self.indent_left,
            indent_hanging=self.indent_hanging,
        )
        self._definitions.append(definition)
        return definition

    @property
    def definitions(self) -> tuple[NumberingDefinition, ...]:
        return tuple(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[NumberingDefinition]:
        return iter(tuple(self._definitions))
