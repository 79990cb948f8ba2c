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

"""Semantic version stored in a properties file."""

from .semver import BUMP_PARTS, SemanticVersion, parse_version
from .version_file import VersionFile

__all__ = ['BUMP_PARTS', 'SemanticVersion', 'VersionFile', 'parse_version']
