"""
Section splitting on the explicit ``\\p`` break marker.
"""

from dataclasses import dataclass

from .styles import SECTION_BREAK


@dataclass(frozen=True)
class Section:
    """A slice of the input between two break markers."""
    text: str
    index: int

    @property
    def is_blank(self) -> bool:
        return self.text.strip() == ""

    @property
    def body(self) -> str:
        """Trimmed text handed to the tokenizer."""
        return self.text.strip()


def split_sections(text: str, marker: str = SECTION_BREAK) -> list[Section]:
    """
    Split input on every occurrence of the break marker.

    Empty sections are kept where the marker touches the start or end of
    the input or another marker, so k markers always give k + 1 sections.
    """
    return [Section(text=part, index=index) for index, part in enumerate(text.split(marker))]
