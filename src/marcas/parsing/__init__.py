"""Tree-building mixins for the marcas parser.

Each mixin handles one family of constructs. They share the marker stack
and the resolved-entity list held by the Parser.

- MarkerStackMixin: marker lookup, stack unwinding, containment partition
- ColorScopeMixin: color directives and lazy color closing
- LineMixin: line boundaries and blockquotes
- DelimiterMixin: bold, italic, underline, strikethrough, spoiler
- RawContentMixin: code, code blocks, custom expressions

"""

from marcas.parsing.color import EGG_COLORS, ColorScopeMixin
from marcas.parsing.delimiters import DelimiterMixin
from marcas.parsing.lines import LineMixin
from marcas.parsing.markers import Marker, MarkerKind, MarkerStackMixin, partition
from marcas.parsing.raw import RawContentMixin

__all__ = [
    "EGG_COLORS",
    "ColorScopeMixin",
    "DelimiterMixin",
    "LineMixin",
    "Marker",
    "MarkerKind",
    "MarkerStackMixin",
    "RawContentMixin",
    "partition",
]
