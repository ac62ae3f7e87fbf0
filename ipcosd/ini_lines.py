"""Line-level parsing of INI text into ``section:key`` entries."""

from __future__ import annotations

import string
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterable, Optional

LINE_SIZE = 1024

_WHITESPACE = " \t\n\v\f\r"
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class IniError(ValueError):
    """Raised when INI text cannot be read."""


class LineStatus(Enum):
    UNPROCESSED = auto()
    ERROR = auto()
    EMPTY = auto()
    COMMENT = auto()
    SECTION = auto()
    VALUE = auto()


@dataclass(frozen=True)
class ParsedLine:
    """Outcome of parsing one logical line.

    For a section line, ``section`` is ``None`` when the brackets hold no name,
    in which case the current section stays in effect.
    """

    status: LineStatus
    section: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None


def _lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _strip(text: str) -> str:
    return text.strip(_WHITESPACE)


def _take_until(text: str, stops: str) -> str:
    for position, char in enumerate(text):
        if char in stops:
            return text[:position]
    return text


def _parse_value(key_part: str, rest: str) -> ParsedLine:
    key = _lower(_strip(key_part))
    rest = rest.lstrip(_WHITESPACE)
    for quote in ('"', "'"):
        if rest.startswith(quote):
            inner = _take_until(rest[1:], quote)
            if inner:
                return ParsedLine(LineStatus.VALUE, key=key, value=inner)
    bare = _take_until(rest, ";#")
    if bare:
        value = _strip(bare)
        if value in ('""', "''"):
            value = ""
        return ParsedLine(LineStatus.VALUE, key=key, value=value)
    return ParsedLine(LineStatus.VALUE, key=key, value="")


def parse_line(line: str) -> ParsedLine:
    """Classify one logical INI line and extract its section, key and value."""
    text = _strip(line)
    if not text:
        return ParsedLine(LineStatus.EMPTY)
    if text[0] in "#;":
        return ParsedLine(LineStatus.COMMENT)
    if text[0] == "[" and text[-1] == "]":
        name = _take_until(text[1:], "]")
        section = _lower(_strip(name)) if name else None
        return ParsedLine(LineStatus.SECTION, section=section)
    equals = text.find("=")
    if equals <= 0:
        return ParsedLine(LineStatus.ERROR)
    return _parse_value(text[:equals], text[equals + 1:])


def _report_to_stderr(message: str) -> None:
    sys.stderr.write(message)


def read_entries(
    lines: Iterable[str],
    name: str = "<string>",
    on_error: Optional[Callable[[str], object]] = None,
) -> list[tuple[str, Optional[str]]]:
    """Read INI lines into ``(entry, value)`` pairs in file order.

    Sections appear as ``(section, None)``; values as ``("section:key", value)``.
    Lines ending in a backslash continue on the next line. Every syntax error is
    reported through ``on_error`` and then :class:`IniError` is raised; an
    over-long line raises at once.
    """
    report = on_error if on_error is not None else _report_to_stderr
    entries: list[tuple[str, Optional[str]]] = []
    section = ""
    buffer = ""
    last = 0
    errors = 0

    for lineno, raw in enumerate(lines, start=1):
        if len(raw) > LINE_SIZE - 1 - last:
            report(f"iniparser: input line too long in {name} ({lineno})\n")
            raise IniError(f"input line too long in {name} ({lineno})")
        buffer = buffer[:last] + raw
        if len(buffer) - 1 <= 0:
            continue
        stripped = buffer.rstrip(_WHITESPACE)
        if stripped.endswith("\\"):
            last = len(stripped) - 1
            buffer = stripped
            continue
        last = 0
        buffer = ""

        parsed = parse_line(stripped)
        if parsed.status is LineStatus.SECTION:
            if parsed.section is not None:
                section = parsed.section
            entries.append((section, None))
        elif parsed.status is LineStatus.VALUE:
            entries.append((f"{section}:{parsed.key}", parsed.value))
        elif parsed.status is LineStatus.ERROR:
            report(f"iniparser: syntax error in {name} ({lineno}):\n-> {stripped}\n")
            errors += 1

    if errors:
        raise IniError(f"{errors} syntax error(s) in {name}")
    return entries