"""
Signing configuration for Maven Central publishing.

Artifacts are signed by the Gradle signing plugin; this module decides
whether signing is possible and hands the key over to Gradle.
"""

import os
from typing import Dict, Optional

from mavenship.utils.build_properties import BuildProperties
from mavenship.utils.errors import SigningError

KEY_FILE_PROPERTY = 'signing.keyFile'
PASSWORD_PROPERTY = 'signing.password'
KEY_FILE_ENV = 'SIGNING_KEY_FILE'
PASSWORD_ENV = 'SIGNING_PASSWORD'


class SigningConfig:
    """Handle PGP signing credentials."""

    def __init__(self, key_file: Optional[str], password: Optional[str],
                 base_dir: Optional[str] = None):
        """
        Args:
            key_file: Path of the ASCII-armored private key
            password: Key passphrase
            base_dir: Directory a relative key_file is resolved against,
                the Gradle project directory. Defaults to the working directory.
        """
        self.key_file = key_file.strip() if key_file else key_file
        self.password = password
        self.base_dir = base_dir

    @classmethod
    def from_properties(cls, properties: BuildProperties,
                        project_dir: Optional[str] = None) -> 'SigningConfig':
        """Resolve signing.keyFile and signing.password like the Gradle build does."""
        return cls(
            properties.find(KEY_FILE_PROPERTY, KEY_FILE_ENV),
            properties.find(PASSWORD_PROPERTY, PASSWORD_ENV),
            project_dir or properties.project_dir,
        )

    @property
    def key_path(self) -> Optional[str]:
        """key_file as Gradle sees it, relative paths taken from the project directory."""
        if not self.key_file:
            return None
        path = os.path.expanduser(self.key_file)
        if self.base_dir and not os.path.isabs(path):
            path = os.path.join(self.base_dir, path)
        return path

    @property
    def enabled(self) -> bool:
        # blank counts as missing
        return bool(self.key_file and self.key_file.strip()) and bool(
            self.password and self.password.strip()
        )

    def missing(self) -> list:
        names = []
        if not (self.key_file and self.key_file.strip()):
            names.append(KEY_FILE_PROPERTY)
        if not (self.password and self.password.strip()):
            names.append(PASSWORD_PROPERTY)
        return names

    def require(self):
        """
        Refuse to proceed without complete signing credentials.

        Raises:
            SigningError: if the key file path or the password is blank or missing
        """
        if not self.enabled:
            raise SigningError(
                "Maven Central bundle requires signing credentials.\n"
                f"Please set {KEY_FILE_PROPERTY} and {PASSWORD_PROPERTY} properties "
                f"(missing: {', '.join(self.missing())})."
            )

    def load_key(self) -> str:
        """
        Read the ASCII-armored private key.

        Raises:
            SigningError: if signing is not configured or the key file is unreadable
        """
        self.require()
        key_path = self.key_path
        if not os.path.isfile(key_path):
            raise SigningError(f"Signing key file not found: {key_path}")
        try:
            with open(key_path, 'r', encoding='utf-8') as f:
                key_data = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SigningError(f"Failed to read signing key {key_path}: {e}") from e
        if not key_data.strip():
            raise SigningError(f"Signing key file is empty: {key_path}")
        return key_data

    def gradle_properties(self) -> Dict[str, str]:
        """
        Project properties that enable in-memory signing in the Gradle build.

        Empty when signing is disabled. Values are secrets and must only be
        passed through the environment.
        """
        if not self.enabled:
            return {}
        return {
            KEY_FILE_PROPERTY: self.key_path,
            PASSWORD_PROPERTY: self.password,
            'signingInMemoryKey': self.load_key(),
            'signingInMemoryKeyPassword': self.password,
        }

    def get_summary(self) -> str:
        if self.enabled:
            return f"  Signing: Enabled\n  Signing Key: {self.key_file}"
        return "  Signing: Disabled"
