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

from mavenship.commands._common import add_common_arguments, fatal_errors, load_release
from mavenship.utils.context.command import CliCommand
from mavenship.utils.context.context import CliContext
from mavenship.utils.context.namespace import CliNameSpace
from mavenship.utils.maven.config import MavenConfig
from mavenship.utils.maven.publisher import MavenPublisher


class Publish(CliCommand):
    def description(self) -> str:
        return """
        Publish the library through the project's Gradle build.

        Examples:
            mavenship publish                      # Repository from MAVENSHIP.toml
            mavenship publish --registry local     # Publish to Maven Local (~/.m2/repository/)
            mavenship publish --registry central   # Publish to the Central Portal staging API
            mavenship publish --registry custom    # Publish to publish.maven.url

        Credentials:
            centralPortalUsername / centralPortalPassword build properties,
            or CENTRAL_PORTAL_USERNAME / CENTRAL_PORTAL_PASSWORD.
            Signing uses signing.keyFile / signing.password.
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="mavenship publish",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "--registry",
            type=str,
            choices=MavenConfig.REPO_TYPES,
            default=None,
            help="Repository type: local, central or custom (default: from MAVENSHIP.toml)",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show Gradle output",
        )
        add_common_arguments(parser)
        args, unknown = parser.parse_known_args(
            self.command_argv("publish", argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        with fatal_errors():
            release = load_release(context, args)
            config = release.maven_config()

            # Override repository type if specified
            if args.registry:
                config.repo_type = args.registry

            publisher = MavenPublisher(
                config, release.signing_config(), release.project_dir, verbose=args.verbose
            )
            publisher.publish()

            if args.verbose:
                publisher.verify_publication()
