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

import argparse
import os
import sys

from mavenship.commands._common import add_common_arguments, fatal_errors, load_release
from mavenship.utils.config import get_config_path
from mavenship.utils.console import print_error, print_success, print_warning
from mavenship.utils.context.command import CliCommand
from mavenship.utils.context.context import CliContext
from mavenship.utils.context.namespace import CliNameSpace
from mavenship.utils.errors import SigningError
from mavenship.utils.maven.bundle import ARTIFACT_PATTERNS, list_matching_files
from mavenship.utils.maven.checksum import CHECKSUM_ALGORITHMS, verify_checksum
from mavenship.utils.maven.config import REPOSITORY_URL_PROPERTY
from mavenship.utils.maven.gradle import build_reads_property


class Check(CliCommand):
    def description(self) -> str:
        return """
        Check release readiness without building anything.

        Verifies the version file, the publishing configuration, the signing
        credentials and, when present, the artifacts in the local Maven
        repository (signatures and checksums).

        Examples:
            mavenship check
            mavenship check --verbose
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="mavenship check",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed information",
        )
        add_common_arguments(parser)
        args, unknown = parser.parse_known_args(
            self.command_argv("check", argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        print("🔍 Checking release configuration...\n")
        with fatal_errors():
            release = load_release(context, args)
            checker = ReleaseChecker(release, verbose=args.verbose)
            checker.check_all()
        checker.print_summary()
        if checker.errors:
            sys.exit(1)


class ReleaseChecker:
    def __init__(self, release, verbose=False):
        self.release = release
        self.verbose = verbose
        self.warnings = []
        self.errors = []

    def ok(self, message):
        print_success(message)

    def warn(self, message):
        print_warning(message)
        self.warnings.append(message)

    def fail(self, message):
        print_error(message)
        self.errors.append(message)

    def check_all(self):
        if os.path.isfile(get_config_path(self.release.project_dir)):
            self.ok(f"Configuration: {get_config_path(self.release.project_dir)}")
        else:
            self.warn("MAVENSHIP.toml not found, using default configuration")

        if not self.check_version():
            return
        config = self.release.maven_config()
        self.check_publishing(config)
        self.check_signing()
        self.check_local_artifacts(config)

    def check_version(self) -> bool:
        try:
            version = self.release.read_version()
        except (OSError, ValueError) as e:
            self.fail(f"Version: {e}")
            return False
        self.ok(f"Version: {version} ({self.release.version_file.path})")
        return True

    def check_publishing(self, config):
        is_valid, error_msg = config.validate()
        if is_valid:
            self.ok(f"Publishing: {config.repo_type} repository")
        elif config.repo_type == 'central':
            # credentials only matter when publishing, not when bundling
            self.warn(f"Publishing: {error_msg}")
        else:
            self.fail(f"Publishing: {error_msg}")
        if config.repo_type == 'custom' and \
                build_reads_property(self.release.project_dir, REPOSITORY_URL_PROPERTY) is False:
            self.fail(f"Publishing: the build script does not read {REPOSITORY_URL_PROPERTY}, "
                      f"{config.repo_url} would be ignored")
        if self.verbose:
            print(config.get_config_summary())

    def check_signing(self):
        signing = self.release.signing_config()
        if not signing.enabled:
            self.warn("Signing is disabled. Set signing.keyFile and signing.password "
                      "to enable artifact signing.")
            return
        try:
            signing.load_key()
        except SigningError as e:
            self.fail(f"Signing: {e}")
            return
        self.ok(f"Signing: key file {signing.key_file}")

    def check_local_artifacts(self, config):
        repo_dir = config.local_repository_path()
        if not os.path.isdir(repo_dir):
            self.warn(f"Local artifacts not found at: {repo_dir} (run 'mavenship bundle')")
            return

        artifacts = list_matching_files(repo_dir, ARTIFACT_PATTERNS)
        if not artifacts:
            self.warn(f"No artifacts in: {repo_dir}")
            return

        for name in artifacts:
            path = os.path.join(repo_dir, name)
            if not os.path.isfile(path + '.asc'):
                self.warn(f"{name}: missing .asc signature")
            for algorithm in CHECKSUM_ALGORITHMS:
                if not os.path.isfile(f"{path}.{algorithm}"):
                    if self.verbose:
                        print(f"  {name}: no .{algorithm} yet")
                elif not verify_checksum(path, algorithm):
                    self.fail(f"{name}: .{algorithm} does not match file contents")
        self.ok(f"Local artifacts: {len(artifacts)} in {repo_dir}")

    def print_summary(self):
        print()
        print("=" * 60)
        if self.errors:
            print(f"❌ {len(self.errors)} error(s), {len(self.warnings)} warning(s)")
        elif self.warnings:
            print(f"⚠️  Ready with {len(self.warnings)} warning(s)")
        else:
            print("✅ Ready to release")
        print("=" * 60)
