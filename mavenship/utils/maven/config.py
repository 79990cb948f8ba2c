"""
Maven configuration handler for mavenship.

Handles Maven repository configuration from MAVENSHIP.toml, build
properties and environment variables.
"""

import os
import re
from typing import Dict, Tuple

from mavenship.utils.build_properties import BuildProperties, ENV_PREFIX
from mavenship.utils.config import ProjectConfig, expand_env

CENTRAL_STAGING_URL = 'https://ossrh-staging-api.central.sonatype.com/service/local/staging/deploy/maven2/'

USERNAME_PROPERTY = 'centralPortalUsername'
PASSWORD_PROPERTY = 'centralPortalPassword'
USERNAME_ENV = 'CENTRAL_PORTAL_USERNAME'
PASSWORD_ENV = 'CENTRAL_PORTAL_PASSWORD'

# Gradle project property the build must read for a custom repository url
REPOSITORY_URL_PROPERTY = 'RELEASE_REPOSITORY_URL'

_UNRESOLVED_VAR = re.compile(r'^\$(\{[^}]+\}|[A-Za-z_][A-Za-z0-9_]*)$')


class MavenConfig:
    """Handle Maven repository configuration."""

    REPO_TYPES = ['local', 'central', 'custom']

    def __init__(self, project: ProjectConfig, properties: BuildProperties, version: str):
        """
        Initialize Maven configuration.

        Args:
            project: Loaded project configuration
            properties: Build property lookup (-P, gradle.properties, env)
            version: Version string read from the version file
        """
        self.project = project
        self.properties = properties

        self.maven_config = project.raw_config.get('publish', {}).get('maven', {})

        self.repo_type = str(self.maven_config.get('repository', 'central')).lower()
        self.repo_url = expand_env(self.maven_config.get('url', ''))

        # Maven coordinates
        self.group_id = project.group_id
        self.artifact_id = project.artifact_id
        self.version = version

        # Authentication
        self.auth_config = self.maven_config.get('auth', {})
        self.credentials = self._parse_credentials()

        # Publishing options
        self.publish_sources = self.maven_config.get('sources', True)
        self.publish_javadoc = self.maven_config.get('javadoc', True)

    def _parse_credentials(self) -> Dict[str, str]:
        """Parse authentication credentials from config, build properties and environment."""
        config_creds = self.auth_config.get('credentials', {})

        username = expand_env(str(config_creds.get('username', '')))
        password = expand_env(str(config_creds.get('password', '')))

        # an unexpanded ${VAR} means the variable is not set
        if _UNRESOLVED_VAR.match(username):
            username = ''
        if _UNRESOLVED_VAR.match(password):
            password = ''

        if not username:
            username = self.properties.find(USERNAME_PROPERTY, USERNAME_ENV) or ''
        if not password:
            password = self.properties.find(PASSWORD_PROPERTY, PASSWORD_ENV) or ''

        return {'username': username, 'password': password}

    @property
    def group_path(self) -> str:
        return self.group_id.replace('.', '/')

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def get_repository_url(self) -> str:
        """Get the repository URL based on configuration."""
        if self.repo_type == 'local':
            return 'mavenLocal()'
        elif self.repo_type == 'central':
            return self.repo_url or CENTRAL_STAGING_URL
        else:  # custom
            if not self.repo_url:
                raise ValueError("Custom repository requires 'url' to be specified")
            return self.repo_url

    def local_repository_path(self) -> str:
        """Directory of this version inside the local Maven repository."""
        return os.path.join(
            self.project.local_repository, self.group_path, self.artifact_id, self.version
        )

    def generate_gradle_properties(self) -> Dict[str, str]:
        """
        Non-secret properties for the Gradle build.

        Coordinates, repository location and POM metadata. Credentials are
        never part of this, see gradle_environment().
        """
        props = {}

        props['GROUP'] = self.group_id
        props['POM_ARTIFACT_ID'] = self.artifact_id
        props['VERSION_NAME'] = self.version

        if self.repo_type != 'local':
            props[REPOSITORY_URL_PROPERTY] = self.get_repository_url()
            snapshot_url = self.maven_config.get('snapshot_url', '')
            if snapshot_url:
                props['SNAPSHOT_REPOSITORY_URL'] = expand_env(snapshot_url)

        props['POM_PUBLISH_SOURCES'] = str(bool(self.publish_sources)).lower()
        props['POM_PUBLISH_JAVADOC'] = str(bool(self.publish_javadoc)).lower()

        # POM metadata
        pom_url = expand_env(self.maven_config.get('pom_url', ''))
        props['POM_NAME'] = self.maven_config.get('pom_name', self.artifact_id)
        props['POM_DESCRIPTION'] = self.maven_config.get('pom_description', f"{self.artifact_id} library")
        if pom_url:
            props['POM_URL'] = pom_url

        # License information
        props['POM_LICENCE_NAME'] = self.maven_config.get('license_name', 'Apache License, Version 2.0')
        props['POM_LICENCE_URL'] = self.maven_config.get('license_url', 'https://www.apache.org/licenses/LICENSE-2.0')
        props['POM_LICENCE_DIST'] = 'repo'

        # SCM information
        scm_url = expand_env(self.maven_config.get('scm_url', pom_url))
        if scm_url:
            props['POM_SCM_URL'] = scm_url
            scm_connection = self.maven_config.get('scm_connection', '')
            scm_dev_connection = self.maven_config.get('scm_dev_connection', '')
            if scm_connection:
                props['POM_SCM_CONNECTION'] = expand_env(scm_connection)
            if scm_dev_connection:
                props['POM_SCM_DEV_CONNECTION'] = expand_env(scm_dev_connection)

        # Developer information
        props['POM_DEVELOPER_ID'] = self.maven_config.get('developer_id', 'developer')
        props['POM_DEVELOPER_NAME'] = self.maven_config.get('developer_name', 'Developer Name')
        developer_email = self.maven_config.get('developer_email', '')
        if developer_email:
            props['POM_DEVELOPER_EMAIL'] = expand_env(developer_email)

        return props

    def gradle_environment(self) -> Dict[str, str]:
        """Repository credentials as ORG_GRADLE_PROJECT_* environment variables."""
        env = {}
        if self.credentials.get('username'):
            env[ENV_PREFIX + USERNAME_PROPERTY] = self.credentials['username']
        if self.credentials.get('password'):
            env[ENV_PREFIX + PASSWORD_PROPERTY] = self.credentials['password']
        return env

    def get_gradle_task(self) -> str:
        """Get the appropriate Gradle task for publishing."""
        if self.repo_type == 'local':
            return 'publishToMavenLocal'
        return 'publish'

    def validate(self) -> Tuple[bool, str]:
        """
        Validate the configuration.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.repo_type not in self.REPO_TYPES:
            return False, f"Invalid repository type: {self.repo_type}. Must be one of {self.REPO_TYPES}"

        if self.repo_type == 'custom' and not self.repo_url:
            return False, "Custom repository requires 'url' to be specified"

        if self.repo_type != 'local':
            if not self.credentials.get('username') or not self.credentials.get('password'):
                return False, (
                    f"Repository type '{self.repo_type}' requires username and password "
                    f"({USERNAME_PROPERTY}/{PASSWORD_PROPERTY} or {USERNAME_ENV}/{PASSWORD_ENV})"
                )

        return True, ""

    def get_config_summary(self) -> str:
        """Get a summary of the configuration for display."""
        lines = []
        lines.append(f"  Repository Type: {self.repo_type}")

        if self.repo_type == 'local':
            lines.append(f"  Location: {self.project.local_repository}")
        elif self.repo_type == 'central':
            lines.append("  Repository: Maven Central")
            lines.append(f"  URL: {self.get_repository_url()}")
        else:
            lines.append(f"  Repository URL: {self.repo_url}")

        lines.append(f"  Group ID: {self.group_id}")
        lines.append(f"  Artifact ID: {self.artifact_id}")
        lines.append(f"  Version: {self.version}")

        if self.repo_type != 'local':
            lines.append(f"  Username: {'***' if self.credentials.get('username') else 'Not configured'}")
            lines.append(f"  Password: {'***' if self.credentials.get('password') else 'Not configured'}")

        return '\n'.join(lines)
