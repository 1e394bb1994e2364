"""
Reader for line-oriented `key=value` property files, the text format Gradle and
java.util.Properties use for build configuration.
"""

import os
from typing import Dict, Iterator, List, Optional, Tuple

from plugin_properties.plugin_properties_exceptions import (
    PropertyParseError,
    PropertySourceNotFoundError,
    PropertySourceReadError,
)

COMMENT_PREFIXES = ("#", "!")
SEPARATORS = ("=", ":")
WHITESPACE = " \t\f"

_ESCAPES = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "f": "\f",
}


def _ends_with_continuation(line: str) -> bool:
    """An odd number of trailing backslashes joins the line with the next one."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, logical_line) pairs with comments, blank lines and
    continuations handled. Line numbers are 1-based and point at the first
    physical line of each logical line.
    """
    parts: List[str] = []
    start = 0
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.lstrip()
        if not parts:
            if not line or line.startswith(COMMENT_PREFIXES):
                continue
            start = number
        if _ends_with_continuation(line):
            parts.append(line[:-1])
            continue
        parts.append(line)
        yield start, "".join(parts)
        parts = []

    # A continuation on the last line of the file
    if parts:
        yield start, "".join(parts)


def _unescape(value: str) -> str:
    out = []
    i = 0
    while i < len(value):
        char = value[i]
        if char != "\\":
            out.append(char)
            i += 1
            continue
        if i + 1 >= len(value):
            break
        escaped = value[i + 1]
        if escaped == "u" and i + 6 <= len(value):
            try:
                out.append(chr(int(value[i + 2:i + 6], 16)))
                i += 6
                continue
            except ValueError:
                pass
        out.append(_ESCAPES.get(escaped, escaped))
        i += 2
    return "".join(out)


def _strip_unescaped(raw: str) -> str:
    """Strip surrounding whitespace, keeping trailing whitespace escaped with a backslash."""
    raw = raw.lstrip()
    while raw and raw[-1] in WHITESPACE:
        backslashes = len(raw[:-1]) - len(raw[:-1].rstrip("\\"))
        if backslashes % 2 == 1:
            break
        raw = raw[:-1]
    return raw


def _split_entry(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a logical line at its first unescaped separator.

    Returns:
        (raw_key, raw_value), or None if the line has no separator
    """
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in SEPARATORS:
            return line[:i], line[i + 1:]
        i += 1
    return None


def parse_properties(text: str, path: str = "<string>", strict: bool = False) -> Dict[str, str]:
    """
    Parse property text into a dictionary. Later occurrences of a key win.

    Args:
        text: The property file contents
        path: Name used in error messages
        strict: Raise on lines without a `=` or `:` separator instead of
            reading them as a key with an empty value

    Returns:
        Dictionary mapping keys to values

    Raises:
        PropertyParseError: If strict is set and a line has no separator
    """
    properties: Dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        entry = _split_entry(line)
        if entry is None:
            if strict:
                raise PropertyParseError(path, line_number, line)
            entry = (line, "")
        raw_key, raw_value = entry
        key = _unescape(_strip_unescaped(raw_key))
        if not key:
            if strict:
                raise PropertyParseError(path, line_number, line)
            continue
        properties[key] = _unescape(_strip_unescaped(raw_value))
    return properties


def load_properties(
    path: str, encoding: Optional[str] = None, strict: bool = False
) -> Dict[str, str]:
    """
    Read and parse a property file.

    Args:
        path: Path to the property file
        encoding: Text encoding, the platform default when None
        strict: See parse_properties

    Raises:
        PropertySourceNotFoundError: If the file does not exist
        PropertySourceReadError: If the file cannot be read or decoded
        PropertyParseError: If strict is set and a line is malformed
    """
    path = str(path)
    if not os.path.isfile(path):
        raise PropertySourceNotFoundError(path)

    try:
        with open(path, "r", encoding=encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise PropertySourceReadError(path, str(e)) from e

    return parse_properties(text, path=path, strict=strict)
