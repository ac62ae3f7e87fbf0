"""INI files held as ``section:key`` entries with typed lookups and INI output."""

from __future__ import annotations

import io
import re
import string
import sys
from os import PathLike
from typing import IO, Callable, Optional, Union

from ipcosd.dictionary import Dictionary
from ipcosd.ini_lines import LINE_SIZE, IniError, read_entries

_WHITESPACE = " \t\n\v\f\r"
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_MISSING = object()
_LONG_MIN = -(2**31)
_LONG_MAX = 2**31 - 1
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_TRUE_STARTS = "yY1tT"
_FALSE_STARTS = "nN0fF"


def _lower(text: str) -> str:
    return text[: LINE_SIZE].translate(_ASCII_LOWER)


def _parse_long(text: str) -> int:
    """Read a leading C-style integer (decimal, 0-octal or 0x-hex), clamped to 32 bits."""
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest and rest[0] in "+-":
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest[:2].lower() == "0x" and len(rest) > 2 and rest[2] in string.hexdigits:
        base, digits, allowed = 16, rest[2:], string.hexdigits
    elif rest.startswith("0"):
        base, digits, allowed = 8, rest, string.octdigits
    else:
        base, digits, allowed = 10, rest, string.digits
    end = 0
    while end < len(digits) and digits[end] in allowed:
        end += 1
    if end == 0:
        return 0
    value = int(digits[:end], base)
    if negative:
        value = -value
    return max(_LONG_MIN, min(_LONG_MAX, value))


def _parse_double(text: str) -> float:
    """Read a leading floating-point number, or 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text.lstrip(_WHITESPACE))
    return float(match.group()) if match else 0.0


def _report_to_stderr(message: str) -> None:
    sys.stderr.write(message)


class IniFile:
    """Parsed INI content; keys are ``section:key`` and lookups ignore case."""

    def __init__(self, dictionary: Optional[Dictionary] = None) -> None:
        self.dictionary = dictionary if dictionary is not None else Dictionary()

    def sections(self) -> list[str]:
        """Return section names in storage order."""
        return [key for key in self.dictionary if ":" not in key]

    def section_keys(self, section: str) -> list[str]:
        """Return the full ``section:key`` names of the keys in ``section``."""
        if not self.has_entry(section):
            return []
        prefix = _lower(section) + ":"
        return [key for key in self.dictionary if key.startswith(prefix)]

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of ``key``, or ``default`` when it is absent."""
        if key is None:
            return default
        return self.dictionary.get(_lower(key), default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Return ``key`` read as a C-notation integer, or ``default`` when absent."""
        value = self.get_string(key, _MISSING)
        if value is _MISSING or value is None:
            return default
        return _parse_long(value)

    def get_double(self, key: str, default: float = 0.0) -> float:
        """Return ``key`` read as a floating-point number, or ``default`` when absent."""
        value = self.get_string(key, _MISSING)
        if value is _MISSING or value is None:
            return default
        return _parse_double(value)

    def get_boolean(self, key: str, default=None):
        """Return ``key`` as a boolean from its first character, else ``default``."""
        value = self.get_string(key, _MISSING)
        if value is _MISSING or not value:
            return default
        if value[0] in _TRUE_STARTS:
            return True
        if value[0] in _FALSE_STARTS:
            return False
        return default

    def has_entry(self, entry: str) -> bool:
        """Tell whether ``entry`` (a section or a ``section:key``) exists."""
        return self.get_string(entry, _MISSING) is not _MISSING

    def set(self, entry: str, value: Optional[str]) -> None:
        """Create or replace ``entry`` with ``value``."""
        if entry is None:
            raise ValueError("entry must not be None")
        self.dictionary.set(_lower(entry), value)

    def unset(self, entry: str) -> None:
        """Remove ``entry`` if it exists."""
        if entry is None:
            return
        self.dictionary.unset(_lower(entry))

    def dump(self, out: IO[str]) -> None:
        """Write every entry as ``[key]=[value]`` lines, for debugging."""
        if out is None:
            return
        for key, value in self.dictionary.items():
            if value is not None:
                out.write(f"[{key}]=[{value}]\n")
            else:
                out.write(f"[{key}]=UNDEF\n")

    def dump_ini(self, out: IO[str]) -> None:
        """Write the content as loadable INI text."""
        if out is None:
            return
        sections = self.sections()
        if not sections:
            for key, value in self.dictionary.items():
                out.write(f"{key} = {value if value is not None else ''}\n")
            return
        for section in sections:
            self.dump_section_ini(section, out)
        out.write("\n")

    def dump_section_ini(self, section: str, out: IO[str]) -> None:
        """Write one section as loadable INI text; unknown sections write nothing."""
        if out is None or not self.has_entry(section):
            return
        prefix = f"{section}:"
        out.write(f"\n[{section}]\n")
        for key, value in self.dictionary.items():
            if key.startswith(prefix):
                name = key[len(prefix):]
                out.write(f"{name:<30} = {value if value is not None else ''}\n")
        out.write("\n")


def _build(entries: list[tuple[str, Optional[str]]]) -> IniFile:
    ini = IniFile()
    for entry, value in entries:
        ini.dictionary.set(entry, value)
    return ini


def loads(
    text: str,
    name: str = "<string>",
    on_error: Optional[Callable[[str], object]] = None,
) -> IniFile:
    """Parse INI ``text``; raise :class:`IniError` on syntax errors."""
    return _build(read_entries(io.StringIO(text), name, on_error))


def load(
    path: Union[str, PathLike],
    on_error: Optional[Callable[[str], object]] = None,
) -> IniFile:
    """Parse the INI file at ``path``; raise :class:`IniError` if it cannot be read."""
    report = on_error if on_error is not None else _report_to_stderr
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        report(f"iniparser: cannot open {path}\n")
        raise IniError(f"cannot open {path}") from exc
    with handle:
        return _build(read_entries(handle, str(path), on_error))