"""
Inline formatting: raw block text to styled runs.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .styles import DocumentStyle


@dataclass(frozen=True)
class Run:
    """
    A styled fragment of text inside a block.

    ``font`` and ``size`` are None when the run inherits the document
    defaults. A run with ``line_break`` set carries no text and stands for a
    manual line break between two lines of the same paragraph.
    """
    text: str
    bold: bool = False
    italic: bool = False
    monospace: bool = False
    font: Optional[str] = None
    size: Optional[float] = None
    line_break: bool = False

    @classmethod
    def hard_break(cls) -> "Run":
        return cls(text="", line_break=True)


class InlineFormatter:
    """
    Splits block text into runs on **bold**, *italic* and `code` spans.

    Only well-formed spans match; anything else (an unterminated ``**``, a
    stray backtick) falls through as plain text.
    """

    PATTERN = re.compile(
        r"\*\*(?P<bold>.+?)\*\*"
        r"|\*(?P<italic>[^*\s](?:[^*]*[^*\s])?)\*"
        r"|`(?P<code>.+?)`"
    )

    def __init__(self, style: Optional[DocumentStyle] = None):
        self.style = style or DocumentStyle()

    def format(self, text: str) -> tuple[Run, ...]:
        """
        Format block text into runs.

        Args:
            text: Raw block text, possibly spanning several lines.

        Returns:
            Runs in source order, with a hard break run between lines.
        """
        runs = []
        lines = text.split("\n")
        for index, line in enumerate(lines):
            runs.extend(self._format_line(line))
            if index < len(lines) - 1:
                runs.append(Run.hard_break())
        return tuple(runs)

    def _format_line(self, line: str) -> list[Run]:
        runs = []
        position = 0
        for match in self.PATTERN.finditer(line):
            if match.start() > position:
                runs.append(Run(text=line[position:match.start()]))
            if match.group("bold") is not None:
                runs.append(Run(text=match.group("bold"), bold=True))
            elif match.group("italic") is not None:
                runs.append(Run(text=match.group("italic"), italic=True))
            else:
                runs.append(Run(text=match.group("code"), monospace=True, font=self.style.monospace_font))
            position = match.end()
        if position < len(line):
            runs.append(Run(text=line[position:]))
        return runs
