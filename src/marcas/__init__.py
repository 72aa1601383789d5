"""
marcas: inline markup to span-annotated entity trees

Parses a lightweight inline markup dialect (bold, italic, underline,
strikethrough, spoilers, code, code blocks, blockquotes, custom bracket
expressions, emoji, links and color directives) into a typed tree of
immutable entities. Entities carry spans into the source instead of text;
rendering is left to the caller.

Quick Start:
    >>> from marcas import parse, densify
    >>> root = parse("hello **world**")
    >>> root.children[0].tag
    'bold'

    >>> # Fill the gaps with text leaves so every character is covered
    >>> from marcas.text import leaf_texts
    >>> leaf_texts("hello **world**", densify(root))
    ['hello ', 'world']

    >>> # Or use the high-level Markup class
    >>> from marcas import Markup
    >>> markup = Markup(densify=True)
    >>> root = markup("[#f00] red")

Installation:
    pip install marcas
"""

from collections.abc import Iterable

from marcas.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from marcas.densify import densify
from marcas.errors import MarcasError, ParseError, UnreachableTokenError
from marcas.lexer import Lexer, tokenize
from marcas.nodes import (
    BlockQuote,
    Bold,
    Code,
    CodeBlock,
    Color,
    Custom,
    Emoji,
    EmojiName,
    Entity,
    Italic,
    Link,
    Spoiler,
    Strikethrough,
    Text,
    Underline,
)
from marcas.parser import Parser
from marcas.serialization import from_dict, from_json, to_dict, to_json
from marcas.span import Span
from marcas.text import extract_text, leaf_texts, outline
from marcas.tokens import Token, TokenType
from marcas.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(text: str) -> Entity:
    """Parse markup into an entity tree.

    Args:
        text: Markup source text

    Returns:
        Root Text entity with ``inner_span == outer_span == [0, len(text))``.
        The tree is sparse unless the active ParseConfig sets ``densify``.

    Example:
        >>> root = parse("_hello world!*")
        >>> root.children
        ()
    """
    config = get_parse_config()
    root = Parser(text).parse()
    if config.densify:
        return densify(root)
    return root


class Markup:
    """High-level markup parser with its own configuration.

    Usage:
        >>> markup = Markup(densify=True)
        >>> root = markup("**bold** text")
        >>> [child.tag for child in root.children]
        ['bold', 'text']

        >>> roots = markup.parse_many(["one", "**two**"])

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markup instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, densify: bool = False, eggs_enabled: bool = True) -> None:
        """Initialize markup parser.

        Args:
            densify: Fill every gap in parsed trees with Text leaves
            eggs_enabled: Recognize the legacy ``§`` color shorthand
        """
        self._config = ParseConfig(densify=densify, eggs_enabled=eggs_enabled)

    @property
    def config(self) -> ParseConfig:
        """The configuration used for every parse."""
        return self._config

    def __call__(self, text: str) -> Entity:
        """Parse markup (alias for parse())."""
        return self.parse(text)

    def parse(self, text: str) -> Entity:
        """Parse markup into an entity tree under this instance's config.

        Args:
            text: Markup source text

        Returns:
            Root Text entity
        """
        with parse_config_context(self._config):
            return parse(text)

    def parse_many(self, texts: Iterable[str]) -> list[Entity]:
        """Parse several sources, setting the config once for the batch.

        Args:
            texts: Markup source strings

        Returns:
            One root entity per source, in order
        """
        with parse_config_context(self._config):
            return [parse(text) for text in texts]


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "densify",
    "tokenize",
    "Markup",
    # Entities
    "Entity",
    "Text",
    "Link",
    "Bold",
    "Italic",
    "Spoiler",
    "Underline",
    "Strikethrough",
    "Code",
    "Emoji",
    "EmojiName",
    "CodeBlock",
    "BlockQuote",
    "Color",
    "Custom",
    "Span",
    # Parser components
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    # Text helpers
    "extract_text",
    "leaf_texts",
    "outline",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "MarcasError",
    "ParseError",
    "UnreachableTokenError",
]
