"""
Word (.docx) renderer.

Serializes an AssembledDocument into the bytes of a .docx package using
python-docx. Paragraph borders, shading and list numbering have no
high-level python-docx API and are written as WordprocessingML directly.
"""

import logging
from io import BytesIO
from typing import Optional

from docx import Document
from docx.enum.style import WD_STYLE_TYPE
from docx.oxml import parse_xml
from docx.oxml.ns import nsdecls, qn
from docx.shared import Pt, RGBColor, Twips

from ..assembler import AssembledDocument
from ..blocks import Code, Heading, ListItem, Quote, Rule, Spacer, Table, TextBlock
from ..inline import Run
from ..numbering import NumberingDefinition
from ..styles import DocumentStyle, Spacing

logger = logging.getLogger(__name__)

CODE_STYLE = "Code Style"
BULLET_STYLES = ("List Bullet", "List Bullet 2", "List Bullet 3")

# w:pPr children that must follow w:pBdr / w:shd, in schema order
_PPR_AFTER_BORDER = (
    "w:shd", "w:tabs", "w:suppressAutoHyphens", "w:kinsoku", "w:wordWrap",
    "w:overflowPunct", "w:topLinePunct", "w:autoSpaceDE", "w:autoSpaceDN",
    "w:bidi", "w:adjustRightInd", "w:snapToGrid", "w:spacing", "w:ind",
    "w:contextualSpacing", "w:mirrorIndents", "w:suppressOverlap", "w:jc",
    "w:textDirection", "w:textAlignment", "w:textboxTightWrap",
    "w:outlineLvl", "w:divId", "w:cnfStyle", "w:rPr", "w:sectPr", "w:pPrChange",
)
_PPR_AFTER_SHADING = _PPR_AFTER_BORDER[1:]


class DocxRenderer:
    """Renders blocks and numbering definitions into a .docx byte buffer."""

    def __init__(self, style: Optional[DocumentStyle] = None):
        self.style = style or DocumentStyle()

    def render(self, document: AssembledDocument) -> bytes:
        """
        Render a document.

        Args:
            document: Blocks and numbering definitions from the assembler.

        Returns:
            The serialized .docx package.
        """
        doc = Document()
        self._apply_styles(doc)
        num_ids = self._install_numbering(doc, document.numbering)

        for block in document.blocks:
            if isinstance(block, Heading):
                self._add_heading(doc, block)
            elif isinstance(block, TextBlock):
                paragraph = doc.add_paragraph()
                self._add_runs(paragraph, block.runs)
                self._set_spacing(paragraph, block.spacing)
            elif isinstance(block, ListItem):
                self._add_list_item(doc, block, num_ids)
            elif isinstance(block, Quote):
                self._add_quote(doc, block)
            elif isinstance(block, Code):
                self._add_code(doc, block)
            elif isinstance(block, Rule):
                self._add_rule(doc, block)
            elif isinstance(block, Table):
                self._add_table(doc, block)
            elif isinstance(block, Spacer):
                self._set_spacing(doc.add_paragraph(), block.spacing)
            else:
                raise TypeError(f"Cannot render block of type {type(block).__name__}")

        buffer = BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    # -- document setup ------------------------------------------------------

    def _apply_styles(self, doc) -> None:
        styles = doc.styles
        normal = styles["Normal"]
        normal.font.name = self.style.font
        normal.font.size = Pt(self.style.font_size)

        for level, size in self.style.heading_sizes.items():
            heading = styles[f"Heading {level}"]
            heading.font.name = self.style.font
            heading.font.size = Pt(size)
            heading.font.bold = True
            heading.font.color.rgb = RGBColor(0, 0, 0)
            spacing = self.style.heading_style_spacing.get(level)
            if spacing is not None:
                _apply_spacing(heading.paragraph_format, spacing)

        if CODE_STYLE not in [s.name for s in styles]:
            code = styles.add_style(CODE_STYLE, WD_STYLE_TYPE.PARAGRAPH)
            code.base_style = normal
            code.font.name = self.style.monospace_font
            code.font.size = Pt(self.style.code_size)
            _apply_spacing(code.paragraph_format, self.style.code_spacing)

    def _install_numbering(self, doc, definitions: tuple[NumberingDefinition, ...]) -> dict[str, int]:
        """Add one abstractNum/num pair per definition; map reference -> numId."""
        if not definitions:
            return {}

        numbering = doc.part.numbering_part.element
        abstract_ids = [int(value) for value in numbering.xpath("./w:abstractNum/@w:abstractNumId")]
        next_abstract_id = max(abstract_ids, default=-1) + 1

        num_ids = {}
        for offset, definition in enumerate(definitions):
            abstract_id = next_abstract_id + offset
            abstract = parse_xml(
                f'<w:abstractNum {nsdecls("w")} w:abstractNumId="{abstract_id}">'
                f'<w:multiLevelType w:val="singleLevel"/>'
                f'<w:lvl w:ilvl="0">'
                f'<w:start w:val="1"/>'
                f'<w:numFmt w:val="{definition.format}"/>'
                f'<w:lvlText w:val="{definition.template}"/>'
                f'<w:lvlJc w:val="left"/>'
                f'<w:pPr><w:ind w:left="{definition.indent_left}" w:hanging="{definition.indent_hanging}"/></w:pPr>'
                f'</w:lvl>'
                f'</w:abstractNum>'
            )
            # every abstractNum must precede the first num
            first_num = numbering.find(qn("w:num"))
            if first_num is not None:
                first_num.addprevious(abstract)
            else:
                numbering.append(abstract)
            num = numbering.add_num(abstract_id)
            num_ids[definition.reference] = num.numId

        logger.debug("Installed %d numbering definitions", len(num_ids))
        return num_ids

    # -- blocks --------------------------------------------------------------

    def _add_heading(self, doc, block: Heading) -> None:
        paragraph = doc.add_heading(block.text, level=block.level)
        self._set_spacing(paragraph, block.spacing)

    def _add_list_item(self, doc, block: ListItem, num_ids: dict[str, int]) -> None:
        if block.ordered:
            paragraph = doc.add_paragraph()
            num_pr = paragraph._p.get_or_add_pPr().get_or_add_numPr()
            num_pr.get_or_add_ilvl().val = 0
            num_pr.get_or_add_numId().val = num_ids[block.numbering]
        else:
            paragraph = doc.add_paragraph(style=BULLET_STYLES[min(block.level, len(BULLET_STYLES) - 1)])

        self._add_runs(paragraph, block.runs)
        self._set_spacing(paragraph, block.spacing)
        paragraph.paragraph_format.left_indent = Twips(self.style.list_indent * (block.level + 1))
        paragraph.paragraph_format.first_line_indent = Twips(-self.style.list_hanging)

    def _add_quote(self, doc, block: Quote) -> None:
        paragraph = doc.add_paragraph()
        self._add_runs(paragraph, block.runs)
        self._set_spacing(paragraph, block.spacing)
        paragraph.paragraph_format.left_indent = Twips(self.style.quote_indent)
        border = parse_xml(
            f'<w:pBdr {nsdecls("w")}>'
            f'<w:left w:val="single" w:sz="15" w:space="15" w:color="{self.style.border_color}"/>'
            f'</w:pBdr>'
        )
        paragraph._p.get_or_add_pPr().insert_element_before(border, *_PPR_AFTER_BORDER)

    def _add_code(self, doc, block: Code) -> None:
        paragraph = doc.add_paragraph(style=CODE_STYLE)
        self._add_runs(paragraph, block.runs)
        self._set_spacing(paragraph, block.spacing)
        shading = parse_xml(f'<w:shd {nsdecls("w")} w:val="clear" w:fill="{self.style.code_fill}"/>')
        paragraph._p.get_or_add_pPr().insert_element_before(shading, *_PPR_AFTER_SHADING)

    def _add_rule(self, doc, block: Rule) -> None:
        paragraph = doc.add_paragraph()
        self._set_spacing(paragraph, block.spacing)
        border = parse_xml(
            f'<w:pBdr {nsdecls("w")}>'
            f'<w:bottom w:val="single" w:sz="1" w:space="1" w:color="{self.style.border_color}"/>'
            f'</w:pBdr>'
        )
        paragraph._p.get_or_add_pPr().insert_element_before(border, *_PPR_AFTER_BORDER)

    def _add_table(self, doc, block: Table) -> None:
        columns = block.column_count
        if columns == 0:
            return

        table = doc.add_table(rows=1 + len(block.rows), cols=columns)
        table.style = doc.styles["Table Grid"]
        _set_full_width(table)

        for column, runs in enumerate(block.header):
            cell = table.cell(0, column)
            self._fill_cell(cell, runs)
            shading = parse_xml(f'<w:shd {nsdecls("w")} w:val="clear" w:fill="{self.style.header_fill}"/>')
            cell._tc.get_or_add_tcPr().append(shading)

        for row_index, row in enumerate(block.rows, start=1):
            for column, runs in enumerate(row[:columns]):
                self._fill_cell(table.cell(row_index, column), runs)

    def _fill_cell(self, cell, runs: tuple[Run, ...]) -> None:
        paragraph = cell.paragraphs[0]
        self._add_runs(paragraph, runs)
        self._set_spacing(paragraph, self.style.cell_spacing)

    # -- runs and paragraph formatting ---------------------------------------

    def _add_runs(self, paragraph, runs: tuple[Run, ...]) -> None:
        for run in runs:
            if run.line_break:
                paragraph.add_run().add_break()
                continue
            docx_run = paragraph.add_run(run.text)
            if run.bold:
                docx_run.bold = True
            if run.italic:
                docx_run.italic = True
            if run.font is not None:
                docx_run.font.name = run.font
            if run.size is not None:
                docx_run.font.size = Pt(run.size)

    @staticmethod
    def _set_spacing(paragraph, spacing: Spacing) -> None:
        _apply_spacing(paragraph.paragraph_format, spacing)


def _apply_spacing(paragraph_format, spacing: Spacing) -> None:
    paragraph_format.space_before = Twips(spacing.before)
    paragraph_format.space_after = Twips(spacing.after)
    if spacing.line is not None:
        paragraph_format.line_spacing = spacing.line / 240


def _set_full_width(table) -> None:
    tbl_pr = table._tbl.tblPr
    tbl_w = tbl_pr.find(qn("w:tblW"))
    if tbl_w is None:
        tbl_w = parse_xml(f'<w:tblW {nsdecls("w")}/>')
        tbl_pr.append(tbl_w)
    tbl_w.set(qn("w:type"), "pct")
    tbl_w.set(qn("w:w"), "5000")
