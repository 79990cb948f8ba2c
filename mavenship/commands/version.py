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


class Version(CliCommand):
    def description(self) -> str:
        return """
        Print the current project version from the version file.

        Examples:
            mavenship version
            mavenship version --project-dir ../my-sdk
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="mavenship version",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        add_common_arguments(parser)
        args, unknown = parser.parse_known_args(
            self.command_argv("version", argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        with fatal_errors():
            release = load_release(context, args)
            print(release.read_version())
