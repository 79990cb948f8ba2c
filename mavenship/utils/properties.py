#
# Copyright 2026 mavenship Project Authors. All rights reserved.
# Use of this source code is governed by a MIT-style
# license that can be found at
#
# https://opensource.org/license/MIT
#
# The above copyright notice and this permission
# notice shall be included in all copies or
# substantial portions of the Software.

"""
Reader and writer for Java-style .properties files.

Handles the subset used by Gradle projects:
- key=value, key: value and key value separators
- '#' and '!' comment lines, blank lines
- backslash line continuations
- escapes (\\t, \\n, \\r, \\f, \\uXXXX, escaped separators)

Updating a key only rewrites that key's line; comments, ordering and
every other key are preserved on store().
"""

import os
from typing import Dict, List, Optional

_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
_KEY_SEPARATORS = '=:'
_WHITESPACE = ' \t\f'


def _unescape(text: str) -> str:
    result = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != '\\':
            result.append(ch)
            i += 1
            continue
        i += 1
        if i >= len(text):
            break
        ch = text[i]
        if ch == 'u':
            hex_digits = text[i + 1:i + 5]
            if len(hex_digits) != 4:
                raise ValueError(f"Malformed \\uXXXX escape: \\u{hex_digits}")
            result.append(chr(int(hex_digits, 16)))
            i += 5
            continue
        result.append(_ESCAPES.get(ch, ch))
        i += 1
    return ''.join(result)


def _escape(text: str, is_key: bool) -> str:
    result = []
    for index, ch in enumerate(text):
        if ch == '\\':
            result.append('\\\\')
        elif ch == '\t':
            result.append('\\t')
        elif ch == '\n':
            result.append('\\n')
        elif ch == '\r':
            result.append('\\r')
        elif ch == '\f':
            result.append('\\f')
        elif ch == ' ' and (is_key or index == 0):
            result.append('\\ ')
        elif is_key and ch in '=:#!':
            result.append('\\' + ch)
        elif ord(ch) > 0x7e:
            result.append(f'\\u{ord(ch):04x}')
        else:
            result.append(ch)
    return ''.join(result)


def _ends_with_continuation(line: str) -> bool:
    count = len(line) - len(line.rstrip('\\'))
    return count % 2 == 1


def _split_entry(logical_line: str):
    """Split a logical line into its raw key and raw value parts."""
    i = 0
    length = len(logical_line)
    while i < length:
        ch = logical_line[i]
        if ch == '\\':
            i += 2
            continue
        if ch in _KEY_SEPARATORS or ch in _WHITESPACE:
            break
        i += 1
    key = logical_line[:i]
    # skip whitespace, at most one separator, then whitespace again
    while i < length and logical_line[i] in _WHITESPACE:
        i += 1
    if i < length and logical_line[i] in _KEY_SEPARATORS:
        i += 1
    while i < length and logical_line[i] in _WHITESPACE:
        i += 1
    return key, logical_line[i:]


class _Entry:
    def __init__(self, raw_lines: List[str], key: Optional[str] = None, value: Optional[str] = None):
        self.raw_lines = raw_lines
        self.key = key
        self.value = value


class PropertiesFile:
    """A .properties file loaded into memory."""

    def __init__(self, path: str):
        self.path = path
        self._entries: List[_Entry] = []

    @classmethod
    def load(cls, path: str) -> 'PropertiesFile':
        """
        Load a properties file.

        Raises:
            FileNotFoundError: if the file does not exist
        """
        props = cls(path)
        with open(path, 'r', encoding='utf-8') as f:
            props.parse(f.read())
        return props

    def parse(self, content: str):
        self._entries = []
        physical_lines = content.splitlines()
        i = 0
        while i < len(physical_lines):
            line = physical_lines[i]
            stripped = line.lstrip(_WHITESPACE)
            if not stripped or stripped[0] in '#!':
                self._entries.append(_Entry([line]))
                i += 1
                continue

            raw_lines = [line]
            logical = stripped
            while _ends_with_continuation(logical) and i + 1 < len(physical_lines):
                i += 1
                raw_lines.append(physical_lines[i])
                logical = logical[:-1] + physical_lines[i].lstrip(_WHITESPACE)
            if _ends_with_continuation(logical):
                logical = logical[:-1]

            raw_key, raw_value = _split_entry(logical)
            self._entries.append(_Entry(raw_lines, _unescape(raw_key), _unescape(raw_value)))
            i += 1

    def keys(self) -> List[str]:
        return [e.key for e in self._entries if e.key is not None]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        # later duplicates win, as with java.util.Properties
        value = default
        for entry in self._entries:
            if entry.key == key:
                value = entry.value
        return value

    def set(self, key: str, value: str):
        line = f"{_escape(key, True)}={_escape(value, False)}"
        matches = [e for e in self._entries if e.key == key]
        if matches:
            for entry in matches[:-1]:
                self._entries.remove(entry)
            matches[-1].raw_lines = [line]
            matches[-1].value = value
        else:
            self._entries.append(_Entry([line], key, value))

    def update(self, values: Dict[str, str]):
        for key, value in values.items():
            self.set(key, value)

    def as_dict(self) -> Dict[str, str]:
        result = {}
        for entry in self._entries:
            if entry.key is not None:
                result[entry.key] = entry.value
        return result

    def dumps(self) -> str:
        lines = []
        for entry in self._entries:
            lines.extend(entry.raw_lines)
        return '\n'.join(lines) + '\n' if lines else ''

    def store(self, path: Optional[str] = None):
        target = path or self.path
        parent = os.path.dirname(target)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(target, 'w', encoding='utf-8') as f:
            f.write(self.dumps())


def load_properties(path: str) -> Dict[str, str]:
    """Load a properties file into a plain dict; missing file gives {}."""
    if not os.path.isfile(path):
        return {}
    return PropertiesFile.load(path).as_dict()
