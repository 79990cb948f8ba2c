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

from mavenship.commands._common import add_common_arguments, fatal_errors, load_release
from mavenship.utils.console import print_step, print_success, print_warning
from mavenship.utils.context.command import CliCommand
from mavenship.utils.context.context import CliContext
from mavenship.utils.context.namespace import CliNameSpace
from mavenship.utils.maven.bundle import BundleAssembler
from mavenship.utils.maven.publisher import MavenPublisher


class Bundle(CliCommand):
    def description(self) -> str:
        return """
        Create a bundle.zip suitable for uploading to Maven Central.

        Requires signing credentials (signing.keyFile and signing.password).
        Runs 'publishToMavenLocal' first, then collects the jar/pom/module
        files and their .asc signatures from the local Maven repository,
        writes .md5/.sha1 checksums and zips everything under
        <group-path>/<artifactId>/<version>/.

        Examples:
            mavenship bundle
            mavenship bundle --skip-build
            mavenship bundle -P signing.keyFile=key.asc -P signing.password=secret
            mavenship bundle --output dist/bundle.zip
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="mavenship bundle",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "--skip-build",
            action="store_true",
            help="Skip publishToMavenLocal, bundle the artifacts already in the local repository",
        )
        parser.add_argument(
            "--output",
            type=str,
            default=None,
            help="Bundle path (default: build/distributions/bundle.zip)",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show Gradle output and every generated file",
        )
        add_common_arguments(parser)
        args, unknown = parser.parse_known_args(
            self.command_argv("bundle", argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        with fatal_errors():
            release = load_release(context, args)
            config = release.maven_config()
            signing = release.signing_config()
            output = os.path.abspath(args.output) if args.output else release.project.bundle_output

            assembler = BundleAssembler(config, signing, output, verbose=args.verbose)

            # fail on missing credentials before spending time on a build
            signing.require()

            if not args.skip_build:
                print_step(f"Publishing {config.coordinates} to the local Maven repository")
                MavenPublisher(
                    config, signing, release.project_dir, verbose=args.verbose
                ).publish_to_maven_local()

            print_step("Assembling Maven Central bundle")
            result = assembler.assemble()

            print()
            print_success("Maven Central bundle created successfully!")
            print(f"Location: {result.output_path}")
            print(f"\nBundle contains {len(result.files)} files:")
            for name in result.files:
                print(f"  ✓ {name}")

            if result.unsigned:
                print()
                for name in result.unsigned:
                    print_warning(f"{name} has no .asc signature, Maven Central will reject it")

            print("\nYou can now upload this bundle to Maven Central.")
