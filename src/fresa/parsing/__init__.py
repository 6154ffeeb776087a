"""Parsing mixins for the Fresa parser.

Modules:
    token_nav: One-token lookahead over a lazy token stream
    commands: Command grammar productions

"""

from fresa.parsing.commands import ARGUMENT_KINDS, COMMAND_TYPES, CommandParsingMixin
from fresa.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "ARGUMENT_KINDS",
    "COMMAND_TYPES",
    "CommandParsingMixin",
    "TokenNavigationMixin",
]
