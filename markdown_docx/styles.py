"""
Document-wide style defaults.

All measurements for spacing and indentation are in twips (1/20th of a
point), font sizes are in points. A single DocumentStyle is configured per
document; blocks and runs only carry what differs from it.
"""

from dataclasses import dataclass, field
from typing import Optional


# Literal two-character marker separating sections of the input
SECTION_BREAK = "\\p"

DEFAULT_FONT = "Times New Roman"
DEFAULT_FONT_SIZE = 12.0
MONOSPACE_FONT = "Courier New"
CODE_FONT_SIZE = 10.0

HEADING_SIZES = {1: 22.0, 2: 18.0, 3: 14.0}

BORDER_COLOR = "AAAAAA"
CODE_FILL = "F5F5F5"
TABLE_HEADER_FILL = "EEEEEE"


@dataclass(frozen=True)
class Spacing:
    """Paragraph spacing profile, in twips."""
    before: int
    after: int
    line: Optional[int] = None  # auto line spacing, 240 == single


HEADING_SPACING = {
    1: Spacing(200, 100, 300),
    2: Spacing(160, 80, 300),
    3: Spacing(120, 60, 300),
}


@dataclass(frozen=True)
class DocumentStyle:
    """
    Style configuration shared by the translator and the renderer.

    Override any field to restyle a document, e.g.
    ``DocumentStyle(font="Arial", font_size=11)``.
    """
    font: str = DEFAULT_FONT
    font_size: float = DEFAULT_FONT_SIZE
    monospace_font: str = MONOSPACE_FONT
    code_size: float = CODE_FONT_SIZE
    heading_sizes: dict = field(default_factory=lambda: dict(HEADING_SIZES))
    heading_style_spacing: dict = field(default_factory=lambda: dict(HEADING_SPACING))

    heading_spacing: Spacing = Spacing(200, 100)
    paragraph_spacing: Spacing = Spacing(60, 60, 300)
    list_first_spacing: Spacing = Spacing(80, 40, 300)
    list_spacing: Spacing = Spacing(40, 40, 300)
    quote_spacing: Spacing = Spacing(60, 60, 300)
    code_spacing: Spacing = Spacing(80, 80, 300)
    rule_spacing: Spacing = Spacing(120, 120)
    blank_spacing: Spacing = Spacing(80, 80)
    section_spacing: Spacing = Spacing(120, 120)
    cell_spacing: Spacing = Spacing(40, 40)

    list_indent: int = 720
    list_hanging: int = 360
    quote_indent: int = 720

    border_color: str = BORDER_COLOR
    code_fill: str = CODE_FILL
    header_fill: str = TABLE_HEADER_FILL

    def __post_init__(self):
        if self.font_size <= 0:
            raise ValueError(f"Font size must be positive, got {self.font_size}")
        if self.code_size <= 0:
            raise ValueError(f"Code font size must be positive, got {self.code_size}")
