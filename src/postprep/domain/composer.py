"""Hugo frontmatter serialization."""

from .models import Metadata

HEADER_MARKER = "---"


def quote(value: str) -> str:
    """Double-quote a value, escaping backslashes and quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def compose_header(metadata: Metadata) -> list[str]:
    """Header lines in fixed order: title, date, draft, then optional tags."""
    lines = [
        HEADER_MARKER,
        f"title: {quote(metadata.title)}",
        f"date: {metadata.date}",
        f"draft: {str(metadata.draft).lower()}",
    ]
    if metadata.tags:
        lines.append(f"tags: [{', '.join(metadata.tags)}]")
    lines.append(HEADER_MARKER)
    return lines


def compose_document(metadata: Metadata, body: list[str]) -> str:
    """Header, one blank line, then the body; every line ends with a newline."""
    lines = [*compose_header(metadata), "", *body]
    return "".join(f"{line}\n" for line in lines)
