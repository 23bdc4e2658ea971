"""Detect whether a document already carries a frontmatter header."""

from .models import Document, DocumentFormat

HEADER_MARKER = "---"


def detect_first_line(line: bytes) -> DocumentFormat:
    """Classify by the raw first line, before any decoding."""
    if line.removesuffix(b"\n").removesuffix(b"\r") == HEADER_MARKER.encode():
        return DocumentFormat.PASS_THROUGH
    return DocumentFormat.NEEDS_TRANSFORM


def detect_format(document: Document) -> DocumentFormat:
    """Inspect only the first line of the document."""
    first_line = document.text.split("\n", 1)[0]
    return detect_first_line(first_line.encode())
