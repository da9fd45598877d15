"""
Unit tests for the .docx renderer.
"""

from io import BytesIO

import pytest
from docx import Document
from docx.oxml.ns import qn
from docx.shared import Pt

from markdown_docx.assembler import AssembledDocument
from markdown_docx.blocks import Code, Heading, ListItem, Quote, Rule, Spacer, Table, TextBlock
from markdown_docx.inline import Run
from markdown_docx.numbering import NumberingRegistry
from markdown_docx.renderers import DocxRenderer
from markdown_docx.styles import DocumentStyle


def _render(renderer, blocks, numbering=()):
    content = renderer.render(AssembledDocument(blocks=tuple(blocks), numbering=tuple(numbering)))
    return Document(BytesIO(content))


def _num_id(paragraph):
    num_pr = paragraph._p.pPr.find(qn("w:numPr"))
    return int(num_pr.find(qn("w:numId")).get(qn("w:val")))


class TestDocxRenderer:
    """Tests for DocxRenderer.render."""

    def test_returns_docx_bytes(self, renderer):
        """Test the output is a zip package."""
        content = renderer.render(AssembledDocument(blocks=(TextBlock(runs=(Run(text="x"),)),), numbering=()))

        assert isinstance(content, bytes)
        assert content[:2] == b"PK"

    def test_document_defaults(self, renderer):
        """Test the Normal style carries the document font and size."""
        doc = _render(renderer, [])

        normal = doc.styles["Normal"]
        assert normal.font.name == "Times New Roman"
        assert normal.font.size == Pt(12)

    def test_custom_style(self):
        """Test a custom style changes the document defaults."""
        doc = _render(DocxRenderer(DocumentStyle(font="Arial", font_size=11)), [])

        assert doc.styles["Normal"].font.name == "Arial"
        assert doc.styles["Normal"].font.size == Pt(11)

    def test_heading_styles(self, renderer):
        """Test headings use the built-in heading styles."""
        doc = _render(renderer, [Heading(level=1, text="Top"), Heading(level=4, text="Deep")])

        assert [p.style.name for p in doc.paragraphs] == ["Heading 1", "Heading 4"]
        assert doc.paragraphs[0].text == "Top"
        assert doc.styles["Heading 1"].font.size == Pt(22)

    def test_run_flags(self, renderer):
        """Test bold, italic and monospace runs keep their styling."""
        runs = (
            Run(text="plain "),
            Run(text="bold", bold=True),
            Run(text="italic", italic=True),
            Run(text="code", monospace=True, font="Courier New"),
        )

        doc = _render(renderer, [TextBlock(runs=runs)])

        rendered = doc.paragraphs[0].runs
        assert [r.text for r in rendered] == ["plain ", "bold", "italic", "code"]
        assert rendered[1].bold
        assert rendered[2].italic
        assert rendered[3].font.name == "Courier New"
        assert rendered[0].font.name is None

    def test_line_break_stays_in_paragraph(self, renderer):
        """Test a hard break does not start a new paragraph."""
        runs = (Run(text="one"), Run.hard_break(), Run(text="two"))

        doc = _render(renderer, [TextBlock(runs=runs)])

        assert len(doc.paragraphs) == 1
        assert doc.paragraphs[0]._p.xpath(".//w:br")

    def test_ordered_lists_numbered_separately(self, renderer):
        """Test each numbering definition becomes its own numbering instance."""
        registry = NumberingRegistry()
        first = registry.allocate().reference
        second = registry.allocate().reference
        blocks = [
            ListItem(runs=(Run(text="a"),), ordered=True, numbering=first, first=True),
            ListItem(runs=(Run(text="b"),), ordered=True, numbering=first),
            ListItem(runs=(Run(text="c"),), ordered=True, numbering=second, first=True),
        ]

        doc = _render(renderer, blocks, registry.definitions)

        ids = [_num_id(p) for p in doc.paragraphs]
        assert ids[0] == ids[1]
        assert ids[0] != ids[2]

    def test_numbering_definitions_are_decimal(self, renderer):
        """Test installed abstract numbering uses decimal %1. at level 0."""
        registry = NumberingRegistry()
        reference = registry.allocate().reference
        blocks = [ListItem(runs=(Run(text="a"),), ordered=True, numbering=reference, first=True)]

        doc = _render(renderer, blocks, registry.definitions)

        numbering = doc.part.numbering_part.element
        num = numbering.num_having_numId(_num_id(doc.paragraphs[0]))
        abstract_id = num.abstractNumId.val
        level = f'./w:abstractNum[@w:abstractNumId="{abstract_id}"]/w:lvl'
        assert numbering.xpath(f"{level}/w:numFmt/@w:val") == ["decimal"]
        assert numbering.xpath(f"{level}/w:lvlText/@w:val") == ["%1."]
        assert numbering.xpath(f"{level}/w:pPr/w:ind/@w:left") == ["720"]

    def test_bullet_items(self, renderer):
        """Test bullet items use the list bullet styles by level."""
        blocks = [
            ListItem(runs=(Run(text="a"),), ordered=False, first=True),
            ListItem(runs=(Run(text="b"),), ordered=False, level=1, first=True),
        ]

        doc = _render(renderer, blocks)

        assert [p.style.name for p in doc.paragraphs] == ["List Bullet", "List Bullet 2"]

    def test_quote_border(self, renderer):
        """Test quotes get a left border and indent."""
        doc = _render(renderer, [Quote(runs=(Run(text="q"),))])

        paragraph = doc.paragraphs[0]
        assert paragraph._p.xpath("./w:pPr/w:pBdr/w:left")
        assert paragraph.paragraph_format.left_indent is not None

    def test_code_shading(self, renderer):
        """Test code blocks are shaded and use the code style."""
        doc = _render(renderer, [Code(runs=(Run(text="x", monospace=True, font="Courier New", size=10.0),))])

        paragraph = doc.paragraphs[0]
        assert paragraph.style.name == "Code Style"
        assert paragraph._p.xpath("./w:pPr/w:shd/@w:fill") == ["F5F5F5"]
        assert paragraph.runs[0].font.size == Pt(10)

    def test_rule_bottom_border(self, renderer):
        """Test a rule is an empty paragraph with a bottom border."""
        doc = _render(renderer, [Rule()])

        assert doc.paragraphs[0].text == ""
        assert doc.paragraphs[0]._p.xpath("./w:pPr/w:pBdr/w:bottom")

    def test_spacer_is_empty_paragraph(self, renderer):
        """Test spacers render as empty paragraphs."""
        doc = _render(renderer, [Spacer()])

        assert len(doc.paragraphs) == 1
        assert doc.paragraphs[0].text == ""

    def test_table(self, renderer):
        """Test table shape, header shading and full width."""
        table_block = Table(
            header=((Run(text="A"),), (Run(text="B", bold=True),)),
            rows=(
                ((Run(text="1"),), (Run(text="2"),)),
                ((Run(text="3"),), (Run(text="4"),)),
            ),
        )

        doc = _render(renderer, [table_block])

        assert len(doc.tables) == 1
        table = doc.tables[0]
        assert len(table.rows) == 3
        assert len(table.columns) == 2
        assert table.cell(0, 1).text == "B"
        assert table.cell(2, 0).text == "3"
        assert table.cell(0, 0)._tc.xpath("./w:tcPr/w:shd/@w:fill") == ["EEEEEE"]
        assert not table.cell(1, 0)._tc.xpath("./w:tcPr/w:shd")
        assert table._tbl.xpath("./w:tblPr/w:tblW/@w:type") == ["pct"]

    def test_ragged_table_rows(self, renderer):
        """Test rows shorter than the header leave trailing cells empty."""
        table_block = Table(header=((Run(text="A"),), (Run(text="B"),)), rows=(((Run(text="1"),),),))

        doc = _render(renderer, [table_block])

        assert doc.tables[0].cell(1, 1).text == ""

    def test_unknown_block_rejected(self, renderer):
        """Test a non-block object cannot be rendered silently."""
        with pytest.raises(TypeError, match="Cannot render"):
            renderer.render(AssembledDocument(blocks=("not a block",), numbering=()))
