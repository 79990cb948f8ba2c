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

import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from mavenship.utils.context.context import CliContext
from mavenship.utils.context.namespace import CliNameSpace


class CliCommand(ABC):
    """Base class of every subcommand."""

    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def cli(self, argv: Optional[List[str]] = None) -> CliNameSpace:
        pass

    @abstractmethod
    def exec(self, context: CliContext, args: CliNameSpace):
        pass

    def command_argv(self, name: str, argv: Optional[List[str]] = None) -> List[str]:
        if argv is not None:
            return list(argv)
        # drop the subcommand name itself from the process arguments
        input_argv = sys.argv[1:]
        if name in input_argv:
            input_argv.remove(name)
        return input_argv
