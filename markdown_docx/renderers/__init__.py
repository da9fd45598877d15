from .docx_renderer import DocxRenderer

__all__ = ["DocxRenderer"]
