"""Body cleanup after metadata extraction."""

from collections.abc import Iterable

DIVIDER = "---"


def _is_leading_noise(line: str) -> bool:
    stripped = line.strip()
    return stripped == "" or line.rstrip("\r") == DIVIDER


def clean_body(lines: list[str], consumed: Iterable[int] = ()) -> list[str]:
    """Drop consumed metadata lines plus blank lines and dividers before content.

    Once the first content line is seen, every following line is kept
    verbatim, including blank lines and "---" section breaks.
    """
    skip = set(consumed)
    body: list[str] = []
    in_content = False

    for index, line in enumerate(lines):
        if index in skip:
            continue
        if not in_content:
            if _is_leading_noise(line):
                continue
            in_content = True
        body.append(line)

    return body
