"""
Typed block tokens consumed by the translator.

The tokenizer turns library-specific parse output into these frozen
dataclasses so the rest of the pipeline never depends on the markdown
parser's own data shapes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class TokenKind(Enum):
    """Block token kinds understood by the translator."""
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    BLOCKQUOTE = "blockquote"
    CODE = "code"
    TABLE = "table"
    RULE = "hr"
    SPACE = "space"
    OTHER = "other"


@dataclass(frozen=True)
class HeadingToken:
    depth: int
    text: str
    kind: ClassVar[TokenKind] = TokenKind.HEADING

    def __post_init__(self):
        if not 1 <= self.depth <= 6:
            raise ValueError(f"Heading depth must be between 1 and 6, got {self.depth}")

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class ParagraphToken:
    text: str
    kind: ClassVar[TokenKind] = TokenKind.PARAGRAPH

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class ListItemToken:
    """One list item; ``children`` holds sub-lists nested under it."""
    text: str
    children: tuple["ListToken", ...] = ()


@dataclass(frozen=True)
class ListToken:
    ordered: bool
    items: tuple[ListItemToken, ...]
    kind: ClassVar[TokenKind] = TokenKind.LIST

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class BlockquoteToken:
    tokens: tuple["Token", ...]
    kind: ClassVar[TokenKind] = TokenKind.BLOCKQUOTE

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class CodeToken:
    text: str
    lang: str = ""
    kind: ClassVar[TokenKind] = TokenKind.CODE

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class TableToken:
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    kind: ClassVar[TokenKind] = TokenKind.TABLE

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class RuleToken:
    kind: ClassVar[TokenKind] = TokenKind.RULE

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class SpaceToken:
    kind: ClassVar[TokenKind] = TokenKind.SPACE

    @property
    def type_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class OtherToken:
    """A token kind the translator has no rendering for (html, footnotes, ...)."""
    name: str
    raw: str = ""
    kind: ClassVar[TokenKind] = TokenKind.OTHER

    @property
    def type_name(self) -> str:
        return self.name


Token = Union[
    HeadingToken,
    ParagraphToken,
    ListToken,
    BlockquoteToken,
    CodeToken,
    TableToken,
    RuleToken,
    SpaceToken,
    OtherToken,
]
