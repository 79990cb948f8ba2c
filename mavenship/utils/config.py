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
Project configuration loaded from MAVENSHIP.toml.

A missing MAVENSHIP.toml is not an error; defaults derived from the
project directory are used instead.
"""

import os
import re
import sys
from typing import Any, Dict

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILE_NAME = "MAVENSHIP.toml"
DEFAULT_GROUP_ID = "com.example"
DEFAULT_VERSION_FILE = "version.properties"
DEFAULT_LOCAL_REPOSITORY = "~/.m2/repository"
DEFAULT_BUNDLE_OUTPUT = "build/distributions/bundle.zip"

_BRACED_VAR = re.compile(r'\$\{([^}]+)\}')
_PLAIN_VAR = re.compile(r'\$([A-Za-z_][A-Za-z0-9_]*)')


def expand_env(value, environ=None):
    """
    Expand environment variables in configuration values.

    Supports ${VAR_NAME} and $VAR_NAME syntax. Unknown variables are
    left as they are. Non-string values are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    environ = os.environ if environ is None else environ

    value = _BRACED_VAR.sub(lambda m: environ.get(m.group(1), m.group(0)), value)
    value = _PLAIN_VAR.sub(lambda m: environ.get(m.group(1), m.group(0)), value)
    return value


def get_config_path(project_dir: str) -> str:
    return os.path.join(project_dir, CONFIG_FILE_NAME)


def load_project_config(project_dir: str) -> Dict[str, Any]:
    """
    Load MAVENSHIP.toml from the project directory.

    Args:
        project_dir: Path to project root directory

    Returns:
        The parsed TOML document, or {} if the file does not exist

    Raises:
        ValueError: if the file exists but is not valid TOML
    """
    config_file = get_config_path(project_dir)
    if not os.path.isfile(config_file):
        return {}

    # Must open in rb mode for tomllib
    with open(config_file, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Failed to parse {config_file}: {e}") from e


class ProjectConfig:
    """Project-level settings shared by all commands."""

    def __init__(self, project_dir: str, config: Dict[str, Any]):
        self.project_dir = os.path.abspath(project_dir)
        self.raw_config = config

        project = config.get("project", {})
        self.group_id = expand_env(project.get("group_id", DEFAULT_GROUP_ID))
        self.artifact_id = expand_env(
            project.get("artifact_id", os.path.basename(self.project_dir))
        )
        self.version_file = os.path.join(
            self.project_dir, project.get("version_file", DEFAULT_VERSION_FILE)
        )

        bundle = config.get("bundle", {})
        self.local_repository = os.path.expanduser(
            expand_env(bundle.get("local_repository", DEFAULT_LOCAL_REPOSITORY))
        )
        self.bundle_output = os.path.join(
            self.project_dir, expand_env(bundle.get("output", DEFAULT_BUNDLE_OUTPUT))
        )

    @classmethod
    def load(cls, project_dir: str) -> 'ProjectConfig':
        return cls(project_dir, load_project_config(project_dir))

    @property
    def group_path(self) -> str:
        return self.group_id.replace(".", "/")
