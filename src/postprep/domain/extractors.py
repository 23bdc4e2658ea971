"""Metadata extraction from Obsidian-style markdown conventions.

Recognized lines:
    # Title of the post
    **Date:** 2026-02-21
    **Tags:** #java #best-practices #ddd

Each field takes the first matching line. A line that matches the marker but
carries no usable value counts as not found and is left in the body.
"""

import re
from dataclasses import dataclass

from .models import FieldMatch

TITLE_PATTERN = re.compile(r"^# (.*)$")
DATE_PATTERN = re.compile(r"^\*\*Date:\*\*\s*(.*)$")
TAGS_PATTERN = re.compile(r"^\*\*Tags:\*\*(?:\s+(.*))?$")

DEFAULT_TITLE = "Untitled"


@dataclass(frozen=True)
class ExtractedFields:
    """Fields found in one pass over the raw lines."""

    title: FieldMatch | None = None
    date: FieldMatch | None = None
    tags: FieldMatch | None = None

    @property
    def consumed(self) -> set[int]:
        """Line indices the body cleaner must drop."""
        return {
            match.line_index
            for match in (self.title, self.date, self.tags)
            if match is not None
        }


def _parse_title(line: str) -> str | None:
    m = TITLE_PATTERN.match(line)
    if not m:
        return None
    return m.group(1).strip() or None


def _parse_date(line: str) -> str | None:
    m = DATE_PATTERN.match(line)
    if not m:
        return None
    return m.group(1).strip() or None


def _parse_tags(line: str) -> list[str] | None:
    m = TAGS_PATTERN.match(line)
    if not m or not m.group(1):
        return None
    tags = []
    for token in m.group(1).split():
        # Tokens without a leading "#" pass through unchanged
        tag = token[1:] if token.startswith("#") else token
        if tag:
            tags.append(tag)
    return tags or None


def extract_fields(lines: list[str]) -> ExtractedFields:
    """Scan lines once, keeping the first match for every field."""
    title = date = tags = None

    for index, line in enumerate(lines):
        if title is None and (value := _parse_title(line)) is not None:
            title = FieldMatch(value, index)
        elif date is None and (value := _parse_date(line)) is not None:
            date = FieldMatch(value, index)
        elif tags is None and (found := _parse_tags(line)) is not None:
            tags = FieldMatch(found, index)

        if title and date and tags:
            break

    return ExtractedFields(title=title, date=date, tags=tags)


def title_from_name(name: str) -> str:
    """Build a title from a file stem: "my-post_name" -> "My Post Name".

    Only the first letter of each word is changed; the rest is kept as-is.
    """
    words = re.sub(r"[-_]", " ", name).split()
    title = " ".join(word[0].upper() + word[1:] for word in words)
    return title or DEFAULT_TITLE
