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
from mavenship.utils.version import BUMP_PARTS


class Bump(CliCommand):
    def description(self) -> str:
        return """
        Bump the semantic version stored in the version file.

        Lower components are reset to zero:
            patch   1.2.3 -> 1.2.4
            minor   1.2.3 -> 1.3.0
            major   1.2.3 -> 2.0.0

        Only the version line of the file is rewritten.

        Examples:
            mavenship bump patch
            mavenship bump minor
            mavenship bump major
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="mavenship bump",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "part",
            metavar=f"{list(BUMP_PARTS)}",
            type=str,
            choices=BUMP_PARTS,
            help="Version component to increment",
        )
        add_common_arguments(parser)
        args, unknown = parser.parse_known_args(
            self.command_argv("bump", argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        with fatal_errors():
            release = load_release(context, args)
            new_version = release.version_file.bump(args.part)
            print(f"Bumped version: {new_version}")
