"""
Fresa: G-code tokenizer and line parser

Turns machine-control text (the numeric command language driving CNC mills
and 3D printers) into typed, immutable lines. O(n), one token of lookahead,
lazy from characters to lines, and zero runtime dependencies.

Quick Start:
    >>> from fresa import parse
    >>> lines = parse("O1000\\nN10 G91 X1.0 Y3.1415 Z-20")
    >>> lines[1].command
    (<CommandType.G: 'G'>, 91)
    >>> str(lines[1])
    'N10 G91 X1.0 Y3.1415 Z-20.0'

Streaming:
    >>> from fresa import Parser
    >>> with open("part.nc") as f:          # doctest: +SKIP
    ...     for line in Parser.from_source(f, source_file="part.nc"):
    ...         handle(line)

Error-tolerant iteration:
    >>> for result in Parser.from_source("G1 X1 ?").results():
    ...     print(type(result).__name__)
    Command
    LexError
"""

from fresa.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from fresa.errors import (
    ArgumentOverflowError,
    FresaError,
    GCodeSyntaxError,
    LexError,
    ParseError,
    UnexpectedEOF,
)
from fresa.lexer import Lexer, tokenize
from fresa.location import Span
from fresa.nodes import (
    MAX_ARGS,
    ArgBuffer,
    Argument,
    ArgumentKind,
    Command,
    CommandType,
    Line,
    ProgramNumber,
)
from fresa.parser import Parser, iter_lines, parse
from fresa.renderers import GCodeRenderer, render
from fresa.serialization import from_dict, from_json, to_dict, to_json
from fresa.tokens import Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    # Config
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "ArgumentOverflowError",
    "FresaError",
    "GCodeSyntaxError",
    "LexError",
    "ParseError",
    "UnexpectedEOF",
    # Lexing
    "Lexer",
    "Span",
    "Token",
    "TokenKind",
    "tokenize",
    # Lines
    "MAX_ARGS",
    "ArgBuffer",
    "Argument",
    "ArgumentKind",
    "Command",
    "CommandType",
    "Line",
    "ProgramNumber",
    # Parsing
    "Parser",
    "iter_lines",
    "parse",
    # Output
    "GCodeRenderer",
    "from_dict",
    "from_json",
    "render",
    "to_dict",
    "to_json",
    "__version__",
]
