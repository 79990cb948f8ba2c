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

"""Terminal output helpers shared by all commands."""

import os
import sys


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


def _colorize(color, text):
    # NO_COLOR convention, and plain text when piped
    if os.environ.get("NO_COLOR") or not sys.stdout.isatty():
        return text
    return f"{color}{text}{Colors.ENDC}"


def print_step(message):
    """Print a step message."""
    print()
    print(_colorize(Colors.OKBLUE, '=' * 70))
    print(_colorize(Colors.OKBLUE + Colors.BOLD, f">>> {message}"))
    print(_colorize(Colors.OKBLUE, '=' * 70))
    print()


def print_success(message):
    """Print a success message."""
    print(_colorize(Colors.OKGREEN, f"✓ {message}"))


def print_warning(message):
    """Print a warning message."""
    print(_colorize(Colors.WARNING, f"⚠ {message}"))


def print_error(message):
    """Print an error message."""
    print(_colorize(Colors.FAIL, f"✗ {message}"))


def print_command(cmd):
    print(_colorize(Colors.OKCYAN, f"$ {cmd}"))
