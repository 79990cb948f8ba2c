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
Gradle-style project property lookup.

Resolution order (first match wins), mirroring Gradle's findProperty:
1. -P key=value given on the command line
2. gradle.properties in the Gradle user home ($GRADLE_USER_HOME or ~/.gradle)
3. gradle.properties in the project directory
4. ORG_GRADLE_PROJECT_<key> environment variables
"""

import os
from typing import Dict, List, Mapping, Optional

from mavenship.utils.properties import load_properties

ENV_PREFIX = "ORG_GRADLE_PROJECT_"

# never put on the Gradle command line, see BuildProperties.gradle_environment()
SECRET_PROPERTIES = frozenset([
    "signing.password",
    "signingInMemoryKey",
    "signingInMemoryKeyPassword",
    "centralPortalUsername",
    "centralPortalPassword",
])


def parse_property_args(values: Optional[List[str]]) -> Dict[str, str]:
    """
    Parse repeated -P key=value arguments.

    Raises:
        ValueError: if an argument has no '='
    """
    result = {}
    for item in values or []:
        if "=" not in item:
            raise ValueError(f"Invalid property '{item}', expected key=value")
        key, value = item.split("=", 1)
        result[key.strip()] = value
    return result


def get_gradle_user_home(environ: Optional[Mapping[str, str]] = None) -> str:
    environ = os.environ if environ is None else environ
    home = environ.get("GRADLE_USER_HOME")
    if home:
        return os.path.expanduser(home)
    return os.path.join(os.path.expanduser("~"), ".gradle")


class BuildProperties:
    """Look up build properties the way the Gradle build would see them."""

    def __init__(self, project_dir: str, overrides: Optional[Dict[str, str]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.project_dir = project_dir
        self.overrides = dict(overrides or {})
        self.environ = os.environ if environ is None else environ

        user_home = get_gradle_user_home(self.environ)
        self._layers = [
            self.overrides,
            load_properties(os.path.join(user_home, "gradle.properties")),
            load_properties(os.path.join(project_dir, "gradle.properties")),
        ]

    def find(self, name: str, env_fallback: Optional[str] = None) -> Optional[str]:
        """
        Find a property value.

        Args:
            name: Property name, e.g. "signing.keyFile"
            env_fallback: Plain environment variable consulted last

        Returns:
            The value, or None when no source defines it
        """
        for layer in self._layers:
            if name in layer:
                return layer[name]
        value = self.environ.get(ENV_PREFIX + name)
        if value is not None:
            return value
        if env_fallback:
            return self.environ.get(env_fallback)
        return None

    def gradle_args(self) -> List[str]:
        """Non-secret -P overrides to forward to Gradle on its command line."""
        return [f"-P{key}={value}" for key, value in self.overrides.items()
                if key not in SECRET_PROPERTIES]

    def gradle_environment(self) -> Dict[str, str]:
        """Secret -P overrides, as ORG_GRADLE_PROJECT_* variables for the Gradle process."""
        return {ENV_PREFIX + key: value for key, value in self.overrides.items()
                if key in SECRET_PROPERTIES}
