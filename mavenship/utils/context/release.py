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
from typing import Dict, Mapping, Optional

from mavenship.utils.build_properties import BuildProperties
from mavenship.utils.config import ProjectConfig
from mavenship.utils.maven.config import MavenConfig
from mavenship.utils.maven.signing import SigningConfig
from mavenship.utils.version import SemanticVersion, VersionFile


class ReleaseContext:
    """Everything a release command reads: config, build properties, version."""

    def __init__(self, project_dir: str, overrides: Optional[Dict[str, str]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        if not os.path.isdir(project_dir):
            raise FileNotFoundError(f"Project directory not found: {project_dir}")
        self.project = ProjectConfig.load(project_dir)
        self.properties = BuildProperties(self.project.project_dir, overrides, environ)
        self.version_file = VersionFile(self.project.version_file)

    @property
    def project_dir(self) -> str:
        return self.project.project_dir

    def read_version(self) -> SemanticVersion:
        return self.version_file.read()

    def maven_config(self) -> MavenConfig:
        return MavenConfig(self.project, self.properties, str(self.read_version()))

    def signing_config(self) -> SigningConfig:
        return SigningConfig.from_properties(self.properties, self.project_dir)
