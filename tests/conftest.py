"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from markdown_docx.assembler import DocumentAssembler
from markdown_docx.core import MarkdownDocxConverter
from markdown_docx.inline import InlineFormatter
from markdown_docx.numbering import NumberingRegistry
from markdown_docx.renderers.docx_renderer import DocxRenderer
from markdown_docx.styles import DocumentStyle
from markdown_docx.tokenizer import MarkdownTokenizer
from markdown_docx.translator import BlockTranslator


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Component Fixtures
# ============================================================================


@pytest.fixture
def style():
    """Default document style."""
    return DocumentStyle()


@pytest.fixture
def formatter(style):
    """Create an inline formatter."""
    return InlineFormatter(style)


@pytest.fixture
def registry():
    """Create an empty numbering registry."""
    return NumberingRegistry()


@pytest.fixture
def translator(registry, formatter, style):
    """Create a block translator bound to a fresh registry."""
    return BlockTranslator(registry, formatter, style)


@pytest.fixture
def tokenizer():
    """Create a mistune-backed tokenizer."""
    return MarkdownTokenizer()


@pytest.fixture
def assembler(tokenizer, style):
    """Create a document assembler."""
    return DocumentAssembler(tokenizer=tokenizer, style=style)


@pytest.fixture
def renderer(style):
    """Create a .docx renderer."""
    return DocxRenderer(style)


@pytest.fixture
def converter(tmp_path, style):
    """Create a converter writing into a temporary directory."""
    return MarkdownDocxConverter(style=style, output_dir=str(tmp_path / "out"))


# ============================================================================
# Content Fixtures
# ============================================================================


@pytest.fixture
def report_markdown():
    """A document exercising every block kind."""
    return """# Quarterly Report

Revenue grew **12%** over the *previous* quarter.
Figures are in `USD`.

## Highlights

1. New customers
2. Lower churn

- Faster onboarding
- Better support

> Growth was driven by the enterprise segment.

```
total = sum(values)
```

---

| Region | Revenue |
| --- | --- |
| North | **120** |
| South | 80 |
"""


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def temp_markdown_file(tmp_path, report_markdown):
    """Create a temporary markdown file."""
    file_path = tmp_path / "quarterly report.md"
    file_path.write_text(report_markdown, encoding="utf-8")
    return file_path
