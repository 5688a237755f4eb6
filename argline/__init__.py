"""
Argline CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .argument import (
    AT_CURSOR,
    Argument,
    ArrayArgument,
    BooleanNamedArgument,
    MergedArgument,
    NamedArgument,
    merge_arguments,
)
from .command import Command
from .command_line import CommandLine
from .command_registry import CommandRegistry
from .dispatcher import Dispatcher
from .parameter import Parameter
from .request import Request
from .shell import Shell
from .status import Status

logger = logging.getLogger("argline")


__all__ = [
    "AT_CURSOR",
    "Argument",
    "ArrayArgument",
    "BooleanNamedArgument",
    "Command",
    "CommandLine",
    "CommandRegistry",
    "Dispatcher",
    "MergedArgument",
    "NamedArgument",
    "Parameter",
    "Request",
    "Shell",
    "Status",
    "merge_arguments",
]
