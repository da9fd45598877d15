"""
Markdown tokenizer backed by mistune's block parser.

mistune renders inline markup while it walks the block tree and drops each
block's raw text in the process. A before-render hook snapshots the raw
block tokens onto the parse state so the translator can run its own inline
formatting over the raw markdown.
"""

import copy
import logging
import re

import mistune
from mistune.plugins import import_plugin

from .tokens import (
    BlockquoteToken,
    CodeToken,
    HeadingToken,
    ListItemToken,
    ListToken,
    OtherToken,
    ParagraphToken,
    RuleToken,
    SpaceToken,
    TableToken,
    Token,
)

logger = logging.getLogger(__name__)

_RAW_TOKENS_KEY = "markdown_docx.raw_tokens"

_TRAILING_BLANK_LINE = re.compile(r"\n[ \t]*\n\Z")


def _capture_raw_tokens(md, state) -> None:
    state.env[_RAW_TOKENS_KEY] = copy.deepcopy(state.tokens)


class SpacedListBlockParser(mistune.BlockParser):
    """
    Block parser that keeps the blank line after a top-level list.

    mistune folds blank lines that end a list into the list itself, so no
    blank_line token follows it. Here a blank_line token is placed right
    after the list whenever the list's source ends with a blank line, the
    same as after any other block.
    """

    def parse_list(self, m, state):
        index = len(state.tokens)
        end_pos = super().parse_list(m, state)

        if state.depth() > 0 or len(state.tokens) <= index:
            return end_pos
        if state.tokens[index].get("type") != "list":
            return end_pos

        # cursor stops at the first line after the list, even when the list
        # was cut short by a block parsed on its behalf
        if _TRAILING_BLANK_LINE.search(state.src, m.start(), state.cursor):
            state.tokens.insert(index + 1, {"type": "blank_line"})
        return end_pos


class MarkdownTokenizer:
    """Turns one section of markdown text into a sequence of Tokens."""

    PLUGINS = ("table",)

    def __init__(self):
        self._markdown = mistune.Markdown(
            renderer=None,
            block=SpacedListBlockParser(),
            plugins=[import_plugin(name) for name in self.PLUGINS],
        )
        self._markdown.before_render_hooks.append(_capture_raw_tokens)

    def tokenize(self, text: str) -> list[Token]:
        """
        Tokenize markdown text.

        Args:
            text: Markdown source for a single section.

        Returns:
            Block tokens in source order.
        """
        _, state = self._markdown.parse(text)
        raw_tokens = state.env.get(_RAW_TOKENS_KEY, [])
        return [self._convert(raw) for raw in raw_tokens]

    def _convert(self, raw: dict) -> Token:
        token_type = raw.get("type", "")
        attrs = raw.get("attrs") or {}

        if token_type == "heading":
            return HeadingToken(depth=min(max(attrs.get("level", 1), 1), 6), text=_text_of(raw))
        elif token_type in ("paragraph", "block_text"):
            return ParagraphToken(text=_text_of(raw))
        elif token_type == "list":
            return self._convert_list(raw)
        elif token_type == "block_quote":
            children = tuple(self._convert(child) for child in raw.get("children", []))
            return BlockquoteToken(tokens=children)
        elif token_type == "block_code":
            code = raw.get("raw", raw.get("text", ""))
            return CodeToken(text=code.rstrip("\n"), lang=(attrs.get("info") or "").strip())
        elif token_type == "table":
            return self._convert_table(raw)
        elif token_type == "thematic_break":
            return RuleToken()
        elif token_type == "blank_line":
            return SpaceToken()
        else:
            return OtherToken(name=token_type or "unknown", raw=raw.get("raw", raw.get("text", "")))

    def _convert_list(self, raw: dict) -> ListToken:
        ordered = bool((raw.get("attrs") or {}).get("ordered", False))
        items = []
        for item in raw.get("children", []):
            if item.get("type") != "list_item":
                continue
            texts = []
            sublists = []
            for child in item.get("children", []):
                child_type = child.get("type", "")
                # mistune uses "block_text" for tight lists, "paragraph" for loose
                if child_type in ("paragraph", "block_text"):
                    texts.append(_text_of(child))
                elif child_type == "list":
                    sublists.append(self._convert_list(child))
            items.append(ListItemToken(text="\n".join(texts), children=tuple(sublists)))
        return ListToken(ordered=ordered, items=tuple(items))

    def _convert_table(self, raw: dict) -> TableToken:
        header = []
        rows = []
        for child in raw.get("children", []):
            child_type = child.get("type", "")
            if child_type == "table_head":
                # mistune puts header cells directly under table_head
                header = [_text_of(cell) for cell in child.get("children", [])]
            elif child_type == "table_body":
                for row in child.get("children", []):
                    rows.append(tuple(_text_of(cell) for cell in row.get("children", [])))
        return TableToken(header=tuple(header), rows=tuple(rows))


def _text_of(raw: dict) -> str:
    return raw.get("text", "").strip()
