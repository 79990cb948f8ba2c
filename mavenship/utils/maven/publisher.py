"""
Maven publisher for JVM artifacts.

Handles the actual publishing process by driving the project's Gradle build.
"""

import os
import shutil
from typing import Dict, Optional

from mavenship.utils.console import print_success, print_warning
from mavenship.utils.errors import PublishError
from mavenship.utils.maven.config import REPOSITORY_URL_PROPERTY
from mavenship.utils.maven.gradle import GradleRunner, build_reads_property, build_script_path
from mavenship.utils.properties import PropertiesFile


class MavenPublisher:
    """Handle publishing artifacts to Maven repositories."""

    def __init__(self, config: 'MavenConfig', signing: 'SigningConfig', project_dir: str,
                 verbose: bool = False, runner: Optional[GradleRunner] = None):
        """
        Initialize Maven publisher.

        Args:
            config: MavenConfig instance
            signing: SigningConfig instance
            project_dir: Root directory of the project
            verbose: Enable verbose output
            runner: GradleRunner to use, one for project_dir by default
        """
        self.config = config
        self.signing = signing
        self.project_dir = project_dir
        self.verbose = verbose
        self.runner = runner or GradleRunner(
            project_dir, verbose, config.properties.gradle_args()
        )

        self.gradle_props_path = os.path.join(project_dir, "gradle.properties")
        self.gradle_props_backup = self.gradle_props_path + ".backup"
        self._created_props = False

    def prepare_gradle_files(self):
        """
        Merge the generated properties into the project's gradle.properties.

        The original file is backed up and put back by restore_gradle_files().
        """
        if os.path.exists(self.gradle_props_path):
            shutil.copyfile(self.gradle_props_path, self.gradle_props_backup)
            if self.verbose:
                print(f"Backed up existing gradle.properties to {self.gradle_props_backup}")
            props = PropertiesFile.load(self.gradle_props_path)
        else:
            props = PropertiesFile(self.gradle_props_path)
            self._created_props = True

        props.update(self.config.generate_gradle_properties())
        props.store()

        if self.verbose:
            print(f"Generated gradle.properties at {self.gradle_props_path}")

    def restore_gradle_files(self):
        """Restore original Gradle configuration files if backed up."""
        if os.path.exists(self.gradle_props_backup):
            try:
                os.replace(self.gradle_props_backup, self.gradle_props_path)
                if self.verbose:
                    print("Restored original gradle.properties")
            except OSError as e:
                print_warning(f"Failed to restore gradle.properties: {e}")
        elif self._created_props and os.path.exists(self.gradle_props_path):
            os.remove(self.gradle_props_path)
        self._created_props = False

    def require_repository_url_support(self):
        """
        Refuse a custom repository the build would not publish to.

        The url reaches Gradle only as the RELEASE_REPOSITORY_URL project
        property, so the build script has to read it.
        """
        if build_reads_property(self.project_dir, REPOSITORY_URL_PROPERTY) is False:
            raise PublishError(
                f"Custom repository url {self.config.repo_url} would be ignored: "
                f"{os.path.basename(build_script_path(self.project_dir))} does not read the "
                f"'{REPOSITORY_URL_PROPERTY}' property.\n"
                f"Declare a repository with url = uri(findProperty(\"{REPOSITORY_URL_PROPERTY}\")) "
                "in the publishing block."
            )

    def gradle_environment(self) -> Dict[str, str]:
        """Secrets for the Gradle run, passed as ORG_GRADLE_PROJECT_* variables."""
        env = self.config.properties.gradle_environment()
        env.update(self.config.gradle_environment())
        for key, value in self.signing.gradle_properties().items():
            env[f"ORG_GRADLE_PROJECT_{key}"] = value
        return env

    def run_task(self, task: str):
        """Run one publishing task with generated properties in place."""
        self.prepare_gradle_files()
        try:
            self.runner.run([task], env=self.gradle_environment())
        finally:
            self.restore_gradle_files()

    def publish_to_maven_local(self):
        """Publish signed artifacts into the local Maven repository."""
        print("\nPublishing to local Maven repository...")
        self.run_task('publishToMavenLocal')
        print_success(f"Artifacts available at: {self.config.local_repository_path()}")

    def publish(self):
        """
        Publish the artifact to the configured Maven repository.

        Raises:
            PublishError: on invalid configuration or a failed Gradle run
            SigningError: if a signing key is configured but unreadable
        """
        is_valid, error_msg = self.config.validate()
        if not is_valid:
            raise PublishError(f"Configuration validation failed: {error_msg}")

        if self.config.repo_type == 'custom':
            self.require_repository_url_support()

        if self.config.repo_type == 'central':
            # Central rejects unsigned artifacts
            self.signing.require()
        elif not self.signing.enabled:
            print_warning("Signing is disabled. Set signing.keyFile and signing.password "
                          "to enable artifact signing.")

        print(f"\nPublishing to {self.config.repo_type} repository...")
        print(self.config.get_config_summary())
        print(self.signing.get_summary())
        print()

        self.run_task(self.config.get_gradle_task())

        print_success(f"Successfully published to {self.config.repo_type} repository")
        if self.config.repo_type == 'local':
            print(f"  Artifacts available at: {self.config.local_repository_path()}")
        elif self.config.repo_type == 'central':
            print(f"  Coordinates: {self.config.coordinates}")
            print("\n  Note: the deployment still has to be released from the Central Portal")
        else:
            print(f"  Published to: {self.config.repo_url}")
            print(f"  Coordinates: {self.config.coordinates}")

    def verify_publication(self) -> bool:
        """
        Verify that the artifact was published successfully.

        Returns:
            True if verification successful
        """
        if self.config.repo_type != 'local':
            print("  Note: Verification for remote repositories requires manual checking")
            return True

        local_path = self.config.local_repository_path()
        expected_files = [
            f"{self.config.artifact_id}-{self.config.version}.jar",
            f"{self.config.artifact_id}-{self.config.version}.pom",
        ]

        all_exist = True
        for filename in expected_files:
            if os.path.exists(os.path.join(local_path, filename)):
                if self.verbose:
                    print(f"  ✓ Found: {filename}")
            else:
                print(f"  ✗ Missing: {filename}")
                all_exist = False

        return all_exist
