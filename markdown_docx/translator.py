"""
Block translator: the state machine that turns one section's tokens into
document blocks.

Tokens are consumed strictly left to right in a single pass. The only state
carried between tokens is a TranslatorState value, which the translator
threads through explicitly so each transition can be checked on its own.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional

from .blocks import Block, Code, Heading, ListItem, Quote, Rule, Spacer, Table, TextBlock
from .inline import InlineFormatter
from .numbering import NumberingRegistry
from .styles import DocumentStyle
from .tokens import (
    BlockquoteToken,
    CodeToken,
    HeadingToken,
    ListToken,
    ParagraphToken,
    TableToken,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

LOG_SAMPLE_LENGTH = 80


@dataclass(frozen=True)
class TranslatorState:
    """
    State carried from one token to the next within a section.

    Attributes:
        last_type: Type name of the previous token, None at section start.
        blank_run: Length of the current run of blank-space tokens.
    """
    last_type: Optional[str] = None
    blank_run: int = 0

    def advance(self, token: Token) -> tuple["TranslatorState", bool]:
        """
        Step past a token.

        Returns:
            The successor state and whether a spacer block is due before the
            token. At most one spacer is due per run of blank-space tokens.
        """
        is_blank = token.kind is TokenKind.SPACE
        blank_run = self.blank_run
        spacer_due = False

        if self.last_type is not None and self.last_type != token.type_name and is_blank:
            blank_run += 1
            spacer_due = blank_run == 1
        if not is_blank:
            blank_run = 0

        return replace(self, last_type=token.type_name, blank_run=blank_run), spacer_due


@dataclass
class ListContext:
    """Lives for the duration of one list token."""
    numbering: Optional[str] = None
    index: int = 0


class BlockTranslator:
    """
    Translates the tokens of one section into blocks.

    The numbering registry is shared by every section of a document so that
    ordered lists in different sections never share a numbering identity.
    """

    def __init__(
        self,
        registry: NumberingRegistry,
        formatter: Optional[InlineFormatter] = None,
        style: Optional[DocumentStyle] = None,
    ):
        self.registry = registry
        self.style = style or DocumentStyle()
        self.formatter = formatter or InlineFormatter(self.style)
        self._handlers: dict[TokenKind, Callable[[Token, TranslatorState], tuple[list[Block], TranslatorState]]] = {
            TokenKind.HEADING: self._heading,
            TokenKind.PARAGRAPH: self._paragraph,
            TokenKind.LIST: self._list,
            TokenKind.BLOCKQUOTE: self._blockquote,
            TokenKind.CODE: self._code,
            TokenKind.RULE: self._rule,
            TokenKind.TABLE: self._table,
            TokenKind.SPACE: self._space,
        }

    def translate(self, tokens: Iterable[Token]) -> list[Block]:
        """
        Translate a section's tokens.

        Args:
            tokens: Tokens of one section, in source order.

        Returns:
            Blocks for the section, in order.
        """
        blocks: list[Block] = []
        state = TranslatorState()
        for token in tokens:
            blocks_for_token, state = self.step(state, token)
            blocks.extend(blocks_for_token)
        return blocks

    def step(self, state: TranslatorState, token: Token) -> tuple[list[Block], TranslatorState]:
        """Translate one token, returning its blocks and the next state."""
        state, spacer_due = state.advance(token)
        blocks: list[Block] = [Spacer(self.style.blank_spacing)] if spacer_due else []

        handler = self._handlers.get(token.kind, self._unhandled)
        emitted, state = handler(token, state)
        blocks.extend(emitted)
        return blocks, state

    # -- per-kind handlers -------------------------------------------------

    def _heading(self, token: HeadingToken, state):
        return [Heading(level=token.depth, text=token.text, spacing=self.style.heading_spacing)], state

    def _paragraph(self, token: ParagraphToken, state):
        runs = self.formatter.format(token.text)
        return [TextBlock(runs=runs, spacing=self.style.paragraph_spacing)], state

    def _list(self, token: ListToken, state):
        return self._list_items(token, level=0), state

    def _list_items(self, token: ListToken, level: int) -> list[Block]:
        context = ListContext()
        if token.ordered:
            context.numbering = self.registry.allocate().reference

        blocks: list[Block] = []
        for item in token.items:
            first = context.index == 0
            blocks.append(ListItem(
                runs=self.formatter.format(item.text),
                ordered=token.ordered,
                numbering=context.numbering,
                level=level,
                first=first,
                spacing=self.style.list_first_spacing if first else self.style.list_spacing,
            ))
            context.index += 1
            for sublist in item.children:
                blocks.extend(self._list_items(sublist, level + 1))
        return blocks

    def _blockquote(self, token: BlockquoteToken, state):
        blocks: list[Block] = []
        for nested in token.tokens:
            if nested.kind is TokenKind.PARAGRAPH:
                blocks.append(Quote(runs=self.formatter.format(nested.text), spacing=self.style.quote_spacing))
            elif nested.kind is not TokenKind.SPACE:
                logger.debug("Skipping %s token inside blockquote", nested.type_name)
        return blocks, state

    def _code(self, token: CodeToken, state):
        logger.debug("Code block, language %s", token.lang or "(none)")
        runs = tuple(
            run if run.line_break else replace(
                run, monospace=True, font=self.style.monospace_font, size=self.style.code_size
            )
            for run in self.formatter.format(token.text)
        )
        return [Code(runs=runs, spacing=self.style.code_spacing)], state

    def _rule(self, token, state):
        return [Rule(spacing=self.style.rule_spacing)], state

    def _table(self, token: TableToken, state):
        header = tuple(self.formatter.format(cell) for cell in token.header)
        rows = tuple(
            tuple(self.formatter.format(cell) for cell in row)
            for row in token.rows
        )
        return [Table(header=header, rows=rows)], state

    def _space(self, token, state):
        # the spacer itself is decided in TranslatorState.advance
        return [], state

    def _unhandled(self, token, state):
        logger.info("Unhandled token type: %s", token.type_name)
        if token.raw:
            logger.debug("Skipped content: %r", token.raw[:LOG_SAMPLE_LENGTH])
        return [], replace(state, blank_run=0)
