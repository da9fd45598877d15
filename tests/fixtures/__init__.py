# Test fixtures
from .sample_documents import (
    SAMPLE_SECTIONED_MD,
    SAMPLE_LETTER_MD,
    SAMPLE_TWO_ORDERED_LISTS_MD,
    make_item,
    make_list,
    get_mixed_tokens,
)

__all__ = [
    "SAMPLE_SECTIONED_MD",
    "SAMPLE_LETTER_MD",
    "SAMPLE_TWO_ORDERED_LISTS_MD",
    "make_item",
    "make_list",
    "get_mixed_tokens",
]
