"""
markdown_docx - Markdown to Word Converter

Converts markdown text into a structured, styled document model (headings,
paragraphs, lists, tables, blockquotes, code blocks, rules) and renders it
into a .docx file. The literal marker ``\\p`` splits the input into
sections separated by an explicit paragraph gap.
"""

from .assembler import AssembledDocument, DocumentAssembler
from .core import MarkdownDocxConverter, convert_markdown_to_docx
from .styles import DocumentStyle

__version__ = "1.0.0"

__all__ = [
    "AssembledDocument",
    "DocumentAssembler",
    "DocumentStyle",
    "MarkdownDocxConverter",
    "convert_markdown_to_docx",
]
