"""Lexer package for marcas.

Tokenizes markup source in one left-to-right pass with a single composite
pattern.

Usage:
    >>> from marcas.lexer import Lexer
    >>> tokens = Lexer("**bold**").tokenize()

"""

from marcas.lexer.core import Lexer, tokenize
from marcas.lexer.patterns import token_pattern

__all__ = [
    "Lexer",
    "token_pattern",
    "tokenize",
]
