"""
Document assembler: runs every section through the tokenizer and the
translator and joins the results into one block sequence.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .blocks import Block, Spacer
from .inline import InlineFormatter
from .numbering import NumberingDefinition, NumberingRegistry
from .sections import split_sections
from .styles import DocumentStyle
from .tokenizer import MarkdownTokenizer
from .translator import BlockTranslator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssembledDocument:
    """Ordered blocks plus every numbering definition they reference."""
    blocks: tuple[Block, ...]
    numbering: tuple[NumberingDefinition, ...]

    @property
    def paragraph_count(self) -> int:
        return len(self.blocks)


class DocumentAssembler:
    """
    Builds an AssembledDocument from markdown text.

    A fresh NumberingRegistry is created for every call to ``assemble``, so
    one assembler may be reused for any number of documents.
    """

    def __init__(self, tokenizer: Optional[MarkdownTokenizer] = None, style: Optional[DocumentStyle] = None):
        self.tokenizer = tokenizer or MarkdownTokenizer()
        self.style = style or DocumentStyle()
        self.formatter = InlineFormatter(self.style)

    def assemble(self, markdown: str) -> AssembledDocument:
        registry = NumberingRegistry(indent_left=self.style.list_indent, indent_hanging=self.style.list_hanging)
        translator = BlockTranslator(registry, self.formatter, self.style)
        sections = split_sections(markdown)
        last_index = len(sections) - 1
        blocks: list[Block] = []

        for section in sections:
            if section.is_blank:
                # a blank section stands for an explicit gap, except at the very start
                if section.index > 0:
                    blocks.append(self._section_spacer())
                continue

            tokens = self.tokenizer.tokenize(section.body)
            section_blocks = translator.translate(tokens)
            logger.debug("Section %d: %d tokens, %d blocks", section.index, len(tokens), len(section_blocks))
            blocks.extend(section_blocks)

            if section.index < last_index:
                blocks.append(self._section_spacer())

        return AssembledDocument(blocks=tuple(blocks), numbering=registry.definitions)

    def _section_spacer(self) -> Spacer:
        return Spacer(self.style.section_spacing)
