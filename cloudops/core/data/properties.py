#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Reader for Java-style ``.properties`` parameter files.

Supported syntax: ``key=value``, ``key: value`` and ``key value`` entries,
``#`` / ``!`` comment lines, backslash line continuation and the usual
escapes (``\\=``, ``\\:``, ``\\ ``, ``\\t``, ``\\n``, ``\\uXXXX``).
"""

from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

from ..utils.exceptions import PropertiesFormatError

_SEPARATORS = "=:"
_WHITESPACE = " \t\f"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    pending: List[str] = []
    start_line = 0
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.lstrip(_WHITESPACE) if pending else raw
        if not pending:
            stripped = line.lstrip(_WHITESPACE)
            if not stripped or stripped[0] in "#!":
                continue
            start_line = number
            line = stripped

        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending.append(line[:-1])
            continue

        pending.append(line)
        yield start_line, "".join(pending)
        pending = []

    if pending:
        yield start_line, "".join(pending)


def _unescape(value: str, line_number: int) -> str:
    out: List[str] = []
    index = 0
    while index < len(value):
        char = value[index]
        if char != "\\":
            out.append(char)
            index += 1
            continue

        index += 1
        if index >= len(value):
            break
        escaped = value[index]
        if escaped == "u":
            code = value[index + 1:index + 5]
            if len(code) != 4:
                raise PropertiesFormatError(
                    message=f"Malformed \\u escape on line {line_number}",
                    line_number=line_number,
                )
            try:
                out.append(chr(int(code, 16)))
            except ValueError as e:
                raise PropertiesFormatError(
                    message=f"Malformed \\u escape on line {line_number}",
                    line_number=line_number,
                    cause=e,
                ) from e
            index += 5
            continue

        out.append(_ESCAPES.get(escaped, escaped))
        index += 1
    return "".join(out)


def _split_entry(line: str) -> Tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(_WHITESPACE)
    if rest[:1] and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def load_properties(text: str) -> Dict[str, str]:
    """
    Parse properties text into a dict; later keys win.
    """
    result: Dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = _unescape(raw_key, line_number)
        if not key:
            raise PropertiesFormatError(
                message=f"Missing key on line {line_number}",
                line_number=line_number,
            )
        result[key] = _unescape(raw_value, line_number)
    return result


def read_properties_file(path: Union[str, Path], encoding: str = "latin-1") -> Dict[str, str]:
    """
    Read a properties file. Latin-1 is the default, as for ``java.util.Properties``;
    other characters are written as ``\\uXXXX`` escapes.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise PropertiesFormatError(
            message=f"Cannot read properties file {file_path}: {e}",
            source=str(file_path),
            cause=e,
        ) from e

    try:
        return load_properties(text)
    except PropertiesFormatError as e:
        raise PropertiesFormatError(
            message=f"{file_path}: {e.message}",
            source=str(file_path),
            line_number=e.line_number,
            cause=e,
        ) from e
