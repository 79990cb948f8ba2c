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
import sys
from contextlib import contextmanager

from mavenship.utils.build_properties import parse_property_args
from mavenship.utils.console import print_error
from mavenship.utils.context.context import CliContext
from mavenship.utils.context.release import ReleaseContext
from mavenship.utils.errors import MavenshipError


def add_common_arguments(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--project-dir",
        type=str,
        default=None,
        help="Project root directory (default: current directory)",
    )
    parser.add_argument(
        "-P",
        dest="properties",
        action="append",
        metavar="KEY=VALUE",
        help="Build property, as with gradle -P (can be used multiple times)",
    )


def load_release(context: CliContext, args) -> ReleaseContext:
    project_dir = getattr(args, "project_dir", None) or context.project_dir
    return ReleaseContext(project_dir, parse_property_args(getattr(args, "properties", None)))


@contextmanager
def fatal_errors():
    """Turn release failures into an error message and exit status 1."""
    try:
        yield
    except (MavenshipError, ValueError, OSError) as e:
        print_error(f"ERROR: {e}")
        sys.exit(1)
