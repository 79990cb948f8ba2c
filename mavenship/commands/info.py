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
from mavenship.utils.context.command import CliCommand
from mavenship.utils.context.context import CliContext
from mavenship.utils.context.namespace import CliNameSpace
from mavenship.utils.maven.bundle import BundleAssembler


class Info(CliCommand):
    def description(self) -> str:
        return """
        Print information about the Maven Central bundle of the current version.

        Examples:
            mavenship info
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="mavenship info",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        add_common_arguments(parser)
        args, unknown = parser.parse_known_args(
            self.command_argv("info", argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        with fatal_errors():
            release = load_release(context, args)
            config = release.maven_config()
            assembler = BundleAssembler(
                config, release.signing_config(), release.project.bundle_output
            )
            output = os.path.relpath(release.project.bundle_output, release.project_dir)

            print()
            print("Maven Central Bundle Information:")
            print("=================================")
            print(f"Group ID:    {config.group_id}")
            print(f"Artifact ID: {config.artifact_id}")
            print(f"Version:     {config.version}")
            print()
            print("To create the bundle:")
            print("  mavenship bundle")
            print()
            print("The bundle will include:")
            for name in assembler.expected_files():
                print(f"  - {name}")
            print()
            print("Output location:")
            print(f"  {output}")
            print()
