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

import re
from typing import NamedTuple

BUMP_PARTS = ("major", "minor", "patch")

_VERSION_PATTERN = re.compile(r'^(\d+)\.(\d+)\.(\d+)$')


class SemanticVersion(NamedTuple):
    major: int
    minor: int
    patch: int

    def bump(self, part: str) -> 'SemanticVersion':
        """
        Increment one component and reset the lower ones to zero.

        Args:
            part: One of "major", "minor" or "patch"

        Raises:
            ValueError: for any other part name
        """
        if part == "major":
            return SemanticVersion(self.major + 1, 0, 0)
        elif part == "minor":
            return SemanticVersion(self.major, self.minor + 1, 0)
        elif part == "patch":
            return SemanticVersion(self.major, self.minor, self.patch + 1)
        raise ValueError(f"Unknown version part: {part}. Must be one of {list(BUMP_PARTS)}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(version_str: str) -> SemanticVersion:
    """
    Parse a 'major.minor.patch' string into a SemanticVersion.

    Surrounding whitespace is ignored, nothing else is: prefixes like 'v',
    pre-release suffixes and negative numbers are rejected.

    Raises:
        ValueError: if the string is not three dot-separated non-negative integers
    """
    if not isinstance(version_str, str):
        raise ValueError(f"Invalid version: {version_str!r}")
    match = _VERSION_PATTERN.match(version_str.strip())
    if not match:
        raise ValueError(
            f"Invalid version '{version_str}', expected major.minor.patch (e.g. 1.2.3)"
        )
    return SemanticVersion(int(match.group(1)), int(match.group(2)), int(match.group(3)))
