# Test fixtures
from .sample_texts import (
    SAMPLE_WORDS,
    PASSTHROUGH_TEXTS,
    UNICODE_TEXTS,
    SAMPLE_PARAGRAPH,
    SAMPLE_PARAGRAPH_UNICODE,
)

__all__ = [
    "SAMPLE_WORDS",
    "PASSTHROUGH_TEXTS",
    "UNICODE_TEXTS",
    "SAMPLE_PARAGRAPH",
    "SAMPLE_PARAGRAPH_UNICODE",
]
