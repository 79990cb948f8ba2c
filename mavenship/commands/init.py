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

from copier import run_copy
from copier.errors import CopierError

from mavenship.utils.config import CONFIG_FILE_NAME, DEFAULT_VERSION_FILE
from mavenship.utils.console import print_error, print_success
from mavenship.utils.context.command import CliCommand
from mavenship.utils.context.context import CliContext
from mavenship.utils.context.namespace import CliNameSpace

TEMPLATE_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.realpath(__file__))), "templates", "project"
)
GENERATED_FILES = [DEFAULT_VERSION_FILE, CONFIG_FILE_NAME]


def parse_template_data(items):
    """Parse --data KEY=VALUE arguments into template answers."""
    data = {}
    for item in items or []:
        if "=" not in item:
            raise ValueError(f"Invalid --data '{item}', expected KEY=VALUE")
        key, value = item.split("=", 1)
        data[key] = value
    return data


class Init(CliCommand):
    def description(self) -> str:
        return """
        Initialize mavenship in an existing Gradle project.

        Creates version.properties and MAVENSHIP.toml in the project
        directory. Existing files are kept unless --force is given.

        By default, the command runs in non-interactive mode using default values.
        Use --interact to enable interactive mode with prompts.

        Examples:
            mavenship init --group-id com.pdfdancer.client --artifact-id pdfdancer-client-java
            mavenship init --interact
            mavenship init --data version=1.0.0 --data repository=local
            mavenship init --force
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="mavenship init",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "--project-dir",
            type=str,
            default=None,
            help="Project root directory (default: current directory)",
        )
        parser.add_argument(
            "--group-id",
            type=str,
            default=None,
            help="Maven group id (default: com.example)",
        )
        parser.add_argument(
            "--artifact-id",
            type=str,
            default=None,
            help="Maven artifact id (default: project directory name)",
        )
        parser.add_argument(
            "--data",
            action="append",
            help="Template data in KEY=VALUE format (can be used multiple times)",
        )
        parser.add_argument(
            "--interact",
            action="store_true",
            help="Enable interactive mode with prompts (default is non-interactive)",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite existing version.properties and MAVENSHIP.toml",
        )
        args, unknown = parser.parse_known_args(
            self.command_argv("init", argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        project_dir = os.path.abspath(args.project_dir or context.project_dir)

        print(f"Initializing mavenship in: '{project_dir}'")

        existing = [name for name in GENERATED_FILES
                    if os.path.exists(os.path.join(project_dir, name))]
        if existing and not args.force:
            print_error(f"ERROR: Already initialized, found: {', '.join(existing)}")
            print("Use --force to overwrite them.")
            sys.exit(1)

        try:
            # Provide default value for artifact id question
            data = {"artifact_id": os.path.basename(project_dir)}
            if args.group_id:
                data["group_id"] = args.group_id
            if args.artifact_id:
                data["artifact_id"] = args.artifact_id
            data.update(parse_template_data(args.data))

            run_copy(
                TEMPLATE_PATH,
                project_dir,
                data=data,
                unsafe=True,
                defaults=not args.interact,
                overwrite=True,
                quiet=not args.interact,
            )
        except CopierError as e:
            print_error(f"ERROR: Template rendering failed: {e}")
            sys.exit(1)
        except ValueError as e:
            print_error(f"ERROR: {e}")
            sys.exit(1)

        print()
        print_success("Successfully initialized mavenship!")
        print("\nNext steps:")
        print("  # Review MAVENSHIP.toml")
        print("  mavenship check")
        print("  mavenship bundle")
