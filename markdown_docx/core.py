"""
Markdown-to-DOCX Core Engine

The main orchestrator: splits markdown into sections, translates each one
into document blocks and hands the assembled result to the renderer.
Accepts a markdown string or a markdown file and produces .docx bytes.
"""

import logging
import os
from typing import Optional

from .assembler import AssembledDocument, DocumentAssembler
from .renderers.docx_renderer import DocxRenderer
from .styles import DocumentStyle
from .tokenizer import MarkdownTokenizer

logger = logging.getLogger(__name__)

LOG_SAMPLE_LENGTH = 200


class MarkdownDocxConverter:
    """
    Main conversion engine.

    Every call to ``build`` or ``convert`` works on its own numbering
    registry and translator state, so one converter may serve any number of
    independent documents.
    """

    SUPPORTED_EXTENSIONS = {".md", ".markdown", ".txt"}

    def __init__(
        self,
        style: Optional[DocumentStyle] = None,
        output_dir: Optional[str] = None,
        tokenizer: Optional[MarkdownTokenizer] = None,
        renderer: Optional[DocxRenderer] = None,
    ):
        self.style = style or DocumentStyle()
        self.output_dir = output_dir or os.path.join(os.getcwd(), "docx_output")
        self.assembler = DocumentAssembler(tokenizer=tokenizer, style=self.style)
        self.renderer = renderer or DocxRenderer(self.style)

    def build(self, markdown: str) -> AssembledDocument:
        """
        Translate markdown into the structured document model.

        Args:
            markdown: Markdown text, with ``\\p`` as explicit section break.

        Returns:
            Ordered blocks plus the numbering definitions they use.
        """
        _require_text(markdown)
        return self.assembler.assemble(markdown)

    def convert(self, markdown: str) -> bytes:
        """
        Convert markdown to a .docx document.

        Args:
            markdown: Markdown text, with ``\\p`` as explicit section break.

        Returns:
            The .docx file contents.
        """
        _require_text(markdown)
        try:
            logger.info("Input markdown sample: %r (length %d)", markdown[:LOG_SAMPLE_LENGTH], len(markdown))
            document = self.assembler.assemble(markdown)
            content = self.renderer.render(document)
        except Exception:
            logger.exception("Error converting markdown to docx")
            raise

        logger.info("Generated DOCX with %d paragraphs", document.paragraph_count)
        return content

    def convert_file(self, file_path: str, save: bool = True) -> bytes:
        """
        Convert a markdown file.

        Args:
            file_path: Path to a .md, .markdown or .txt file
            save: If True, write ``<name>.docx`` into the output directory

        Returns:
            The .docx file contents
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        _, ext = os.path.splitext(file_path.lower())
        if ext not in self.SUPPORTED_EXTENSIONS:
            raise ValueError(f"Unsupported input format: {ext or '(none)'}")

        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            markdown = f.read()

        content = self.convert(markdown)

        if save:
            os.makedirs(self.output_dir, exist_ok=True)
            out_path = self.output_path_for(file_path)
            with open(out_path, "wb") as f:
                f.write(content)
            logger.info("Saved %s", out_path)

        return content

    def output_path_for(self, file_path: str) -> str:
        """Where ``convert_file`` saves the result for a given source."""
        return os.path.join(self.output_dir, _file_to_docx_name(file_path))

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of all supported input formats."""
        return {
            "Markdown": [".md", ".markdown"],
            "Plain Text": [".txt"],
        }


def convert_markdown_to_docx(markdown: str, style: Optional[DocumentStyle] = None) -> bytes:
    """Convert a markdown string to .docx bytes with a one-off converter."""
    return MarkdownDocxConverter(style=style).convert(markdown)


def _require_text(markdown) -> None:
    if not isinstance(markdown, str):
        raise TypeError(f"Markdown content must be a string, got {type(markdown).__name__}")


def _file_to_docx_name(file_path: str) -> str:
    """Generate a .docx filename from the source file."""
    basename = os.path.basename(file_path)
    name, _ = os.path.splitext(basename)
    safe_name = "".join(c if c.isalnum() or c in "-_ " else "_" for c in name)
    return f"{safe_name}.docx"
