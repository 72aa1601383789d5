"""Source spans for entities, tokens and markers.

Provides the Span dataclass: a half-open ``[start, end)`` range of string
indices into the parsed source. Spans never hold text themselves; slice the
original source on demand.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range of indices into the source string.

    Indices are Python ``str`` indices (code points), so spans over the same
    source always compose.

    Attributes:
        start: First index covered by the span
        end: First index after the span

    Examples:
            >>> span = Span(6, 11)
            >>> span.slice("hello world")
            'world'
            >>> Span(0, 11).contains(span)
            True

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            msg = f"Span start {self.start} is after end {self.end}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"

    @property
    def is_empty(self) -> bool:
        """True if the span covers no characters."""
        return self.start == self.end

    def contains(self, other: Span) -> bool:
        """Check whether ``other`` lies entirely within this span.

        Args:
            other: Span to test

        Returns:
            True if ``self.start <= other.start`` and ``other.end <= self.end``
        """
        return self.start <= other.start and other.end <= self.end

    def slice(self, source: str) -> str:
        """Return the substring of ``source`` covered by this span."""
        return source[self.start : self.end]

    @classmethod
    def empty(cls, offset: int) -> Span:
        """Create a zero-width span at ``offset``.

        Used for the synthetic start-of-input and end-of-input line boundaries.
        """
        return cls(offset, offset)
