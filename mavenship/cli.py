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

import os
import sys
import importlib
import argparse

from mavenship import __version__
from mavenship.utils.context.command import CliCommand
from mavenship.utils.context.context import CliContext
from mavenship.utils.context.namespace import CliNameSpace

SCRIPT_PATH = os.path.split(os.path.realpath(__file__))[0]


# Root Class for Command Line Interface
class Cli(CliCommand):
    def description(self) -> str:
        return """mavenship - Maven Central release helper for Gradle projects

USAGE:
    mavenship <command> [options]

COMMANDS:
    init        Create version.properties and MAVENSHIP.toml
    version     Print the current version
    bump        Bump the major, minor or patch version
    check       Check release configuration and local artifacts
    info        Show Maven Central bundle information
    bundle      Create bundle.zip for Maven Central
    publish     Publish through the Gradle build
    help        Show detailed help information

EXAMPLES:
    mavenship bump patch                 # 1.2.3 -> 1.2.4
    mavenship bundle                     # build/distributions/bundle.zip
    mavenship publish --registry local   # publishToMavenLocal

For more information on a specific command:
    mavenship <command> --help
        """

    def get_command_list(self) -> list:
        arr = []
        for command in os.listdir(os.path.join(SCRIPT_PATH, "commands")):
            if not command.startswith("_") and not command.startswith("test_") \
                    and command.endswith(".py"):
                arr.append(os.path.splitext(os.path.basename(command))[0])
        return sorted(arr)

    def _help_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="mavenship",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "subcommand",
            metavar=f"{self.get_command_list()}",
            type=str,
            choices=self.get_command_list(),
        )
        return parser

    def cli(self, argv=None) -> CliNameSpace:
        argv = sys.argv[1:] if argv is None else list(argv)

        # Help for main command only (mavenship --help),
        # NOT for subcommands (mavenship bundle --help)
        if len(argv) == 1 and argv[0] in ['--help', '-h']:
            self._help_parser().print_help()
            sys.exit(0)

        if len(argv) == 1 and argv[0] in ["--version", "-V"]:
            print(f"mavenship {__version__}")
            sys.exit(0)

        # Parse subcommand without automatic help handling
        parser = argparse.ArgumentParser(
            prog="mavenship",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
            add_help=False,
        )
        parser.add_argument(
            "subcommand",
            metavar=f"{self.get_command_list()}",
            type=str,
            nargs='?',  # Make subcommand optional
            choices=self.get_command_list(),
        )
        # parse only known args - this will NOT consume --help if present
        args, unknown = parser.parse_known_args(argv[:1], namespace=CliNameSpace())
        args.command_argv = argv[1:]
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        # Check if subcommand is provided
        if not args.subcommand:
            print("ERROR: No command specified\n")
            self._help_parser().print_help()
            sys.exit(1)

        # get module name
        module_name = f"mavenship.commands.{args.subcommand}"
        # get class name
        class_name = args.subcommand.capitalize()
        # import module
        module = importlib.import_module(module_name)
        # get class of module
        klass = getattr(module, class_name)
        # instance class
        sub_cmd = klass()
        # now execute the subcommand
        sub_cmd.exec(context, sub_cmd.cli(args.command_argv))


def main(argv=None):
    cmd = Cli()
    cmd.exec(CliContext(), cmd.cli(argv))


if __name__ == "__main__":
    main()
