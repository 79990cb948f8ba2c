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

from mavenship.utils.context.command import CliCommand
from mavenship.utils.context.context import CliContext
from mavenship.utils.context.namespace import CliNameSpace


class Help(CliCommand):
    def description(self) -> str:
        return """Show detailed help information for mavenship commands.

Use 'mavenship <command> --help' for command-specific help.
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="mavenship help",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        args, unknown = parser.parse_known_args(
            self.command_argv("help", argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        print("\n" + "=" * 70)
        print("mavenship - Maven Central release helper for Gradle projects")
        print("=" * 70)

        print("\n1. Initialize a project")
        print("\n  mavenship init [options]")
        print("\n  Options:")
        print("    --group-id <id>         Maven group id")
        print("    --artifact-id <id>      Maven artifact id")
        print("    --data <key>=<value>    Template variables (can be used multiple times)")
        print("    --interact              Prompt for every value")
        print("    --force                 Overwrite existing files")

        print("\n2. Show and bump the version")
        print("\n  mavenship version")
        print("  mavenship bump <major|minor|patch>")
        print("\n  Examples:")
        print("    mavenship bump patch     # 1.2.3 -> 1.2.4")
        print("    mavenship bump minor     # 1.2.3 -> 1.3.0")
        print("    mavenship bump major     # 1.2.3 -> 2.0.0")

        print("\n3. Check release readiness")
        print("\n  mavenship check [--verbose]")

        print("\n4. Build the Maven Central bundle")
        print("\n  mavenship info")
        print("  mavenship bundle [options]")
        print("\n  Options:")
        print("    --skip-build            Use artifacts already in ~/.m2/repository")
        print("    --output <path>         Bundle path (default: build/distributions/bundle.zip)")
        print("    --verbose               Show Gradle output")

        print("\n5. Publish through Gradle")
        print("\n  mavenship publish [--registry local|central|custom] [--verbose]")

        print("\nCommon options:")
        print("    --project-dir <dir>     Project root (default: current directory)")
        print("    -P <key>=<value>        Build property, as with gradle -P")

        print("\nBuild properties / environment variables:")
        print("    signing.keyFile           SIGNING_KEY_FILE          ASCII-armored PGP private key")
        print("    signing.password          SIGNING_PASSWORD          Key passphrase")
        print("    centralPortalUsername     CENTRAL_PORTAL_USERNAME   Central Portal user token name")
        print("    centralPortalPassword     CENTRAL_PORTAL_PASSWORD   Central Portal user token")
        print("\n  Properties are read from -P, ~/.gradle/gradle.properties,")
        print("  <project>/gradle.properties and ORG_GRADLE_PROJECT_<key>.")
        print()
