"""Single-pass lexer for Fresa.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (navigation, dispatch, locations)
└── scanners.py          # Number and comment scanner mixins

Usage:
    >>> from fresa.lexer import Lexer
    >>> [t.kind.name for t in Lexer("O1000").tokenize()]
    ['O', 'NUMBER']

"""

from fresa.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
