"""Line and token readers for the flat paper-size text formats.

Both the paper specification file and the system configuration file are
plain text where blank lines and lines starting with ``#`` carry no data,
and the remaining lines are split on runs of whitespace.
"""
from __future__ import annotations

from typing import Iterator, TextIO


def _is_significant(line: str) -> bool:
    stripped = line.lstrip()
    return bool(stripped) and not stripped.startswith("#")


def iter_significant_lines(stream: TextIO) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, raw_line)`` for every non-blank, non-comment line.

    Line numbers are 1-based and count every physical line of the stream, so
    they can be reported back in error messages.
    """
    for line_number, line in enumerate(stream, start=1):
        if _is_significant(line):
            yield line_number, line


def read_significant_line(stream: TextIO) -> str | None:
    """Return the next significant line, trailing newline included, or None at EOF."""
    for _, line in iter_significant_lines(stream):
        return line
    return None


def next_token(remainder: str) -> tuple[str, str] | None:
    """Split the first whitespace-delimited token off ``remainder``.

    Returns ``(token, rest)`` where ``rest`` is the unconsumed suffix, or None
    when only whitespace is left.
    """
    length = len(remainder)
    start = 0
    while start < length and remainder[start].isspace():
        start += 1
    if start == length:
        return None

    end = start
    while end < length and not remainder[end].isspace():
        end += 1
    return remainder[start:end], remainder[end:]


def iter_tokens(line: str) -> Iterator[str]:
    remainder = line
    while (split := next_token(remainder)) is not None:
        token, remainder = split
        yield token
