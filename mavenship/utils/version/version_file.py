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

import os

from mavenship.utils.properties import PropertiesFile
from mavenship.utils.version.semver import SemanticVersion, parse_version

VERSION_KEY = "version"


class VersionFile:
    """The properties file holding the project's 'version' key."""

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> PropertiesFile:
        if not os.path.isfile(self.path):
            raise FileNotFoundError(f"Version file not found: {self.path}")
        return PropertiesFile.load(self.path)

    @staticmethod
    def _parse(props: PropertiesFile) -> SemanticVersion:
        value = props.get(VERSION_KEY)
        if value is None:
            raise ValueError(f"No '{VERSION_KEY}' property in {props.path}")
        return parse_version(value)

    def read(self) -> SemanticVersion:
        """
        Read the current version.

        Raises:
            FileNotFoundError: if the version file does not exist
            ValueError: if the key is missing or the value is malformed
        """
        return self._parse(self._load())

    def bump(self, part: str) -> SemanticVersion:
        """
        Bump one component of the stored version and write it back.

        Only the version line of the file changes.

        Returns:
            The new version
        """
        props = self._load()
        new_version = self._parse(props).bump(part)
        props.set(VERSION_KEY, str(new_version))
        props.store()
        return new_version
