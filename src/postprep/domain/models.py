"""Domain models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DocumentFormat(str, Enum):
    """How a raw document is handled."""

    PASS_THROUGH = "pass-through"
    NEEDS_TRANSFORM = "transform"


@dataclass(frozen=True)
class Document:
    """Raw markdown document as read from disk."""

    name: str  # File stem, used as fallback title and output slug
    text: str
    source_path: Path | None = None

    @property
    def lines(self) -> list[str]:
        """Lines without their terminating newline."""
        lines = self.text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines


@dataclass(frozen=True)
class FieldMatch:
    """A metadata value found in the raw text."""

    value: str | list[str]
    line_index: int


@dataclass
class Metadata:
    """Frontmatter fields for one document."""

    title: str
    date: str
    tags: list[str] = field(default_factory=list)
    draft: bool = False


@dataclass
class ProcessingResult:
    """Result of processing one document."""

    source_path: Path
    format: DocumentFormat | None = None
    metadata: Metadata | None = None
    output_path: Path | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0 and self.output_path is not None
