"""Property-based tests for tree invariants using Hypothesis.

These hold for every input string: the parser never fails, children are
ordered and contained in their parent, and a densified tree covers the
source exactly.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from marcas import densify, parse
from marcas.lexer import tokenize
from marcas.nodes import Entity, Text

# Characters that drive every construct, plus filler
MARKUP_ALPHABET = "*_/~`|[]#:>\\\n\r §0fr abc<>.htps✨"

markup_text = st.text(alphabet=MARKUP_ALPHABET, max_size=200)
any_text = st.text(max_size=300)


def _walk(entity: Entity):  # type: ignore[no-untyped-def]
    yield entity
    for child in entity.children:
        yield from _walk(child)


def _reconstruct(source: str, entity: Entity) -> str:
    """Rebuild the source from a densified tree.

    Text leaves contribute their outer span; other entities contribute
    their delimiters around the reconstructed children.
    """
    if isinstance(entity, Text) and not entity.children:
        return entity.outer_span.slice(source)
    inner = "".join(_reconstruct(source, child) for child in entity.children)
    return (
        source[entity.outer_span.start : entity.inner_span.start]
        + inner
        + source[entity.inner_span.end : entity.outer_span.end]
    )


class TestNeverFails:
    """Unmatched markup degrades to text; nothing raises."""

    @given(any_text)
    @settings(max_examples=200)
    def test_any_text(self, source: str) -> None:
        parse(source)

    @given(markup_text)
    @settings(max_examples=300)
    def test_markup_heavy_text(self, source: str) -> None:
        parse(source)


class TestRoot:
    """The root always spans the whole source."""

    @given(markup_text)
    @settings(max_examples=100)
    def test_root_span(self, source: str) -> None:
        root = parse(source)
        assert isinstance(root, Text)
        assert root.inner_span.start == root.outer_span.start == 0
        assert root.inner_span.end == root.outer_span.end == len(source)


class TestContainment:
    """Spans nest and siblings never overlap."""

    @given(markup_text)
    @settings(max_examples=300)
    def test_inner_within_outer(self, source: str) -> None:
        for entity in _walk(parse(source)):
            assert entity.outer_span.contains(entity.inner_span)

    @given(markup_text)
    @settings(max_examples=300)
    def test_children_within_parent_inner(self, source: str) -> None:
        for entity in _walk(parse(source)):
            for child in entity.children:
                assert entity.inner_span.contains(child.outer_span)

    @given(markup_text)
    @settings(max_examples=300)
    def test_siblings_ordered_and_disjoint(self, source: str) -> None:
        for entity in _walk(parse(source)):
            for before, after in zip(entity.children, entity.children[1:], strict=False):
                assert before.outer_span.end <= after.outer_span.start


class TestCoverage:
    """A densified tree reproduces the source."""

    @given(markup_text)
    @settings(max_examples=300)
    def test_reconstructs_source(self, source: str) -> None:
        assert _reconstruct(source, densify(parse(source))) == source

    @given(any_text)
    @settings(max_examples=100)
    def test_reconstructs_any_text(self, source: str) -> None:
        assert _reconstruct(source, densify(parse(source))) == source

    @given(markup_text)
    @settings(max_examples=100)
    def test_densify_idempotent(self, source: str) -> None:
        once = densify(parse(source))
        assert densify(once) == once


class TestDeterminism:
    """Same input, same tree."""

    @given(markup_text)
    @settings(max_examples=100)
    def test_parse_deterministic(self, source: str) -> None:
        assert parse(source) == parse(source)

    @given(markup_text)
    @settings(max_examples=100)
    def test_tokens_disjoint(self, source: str) -> None:
        tokens = tokenize(source)
        for before, after in zip(tokens, tokens[1:], strict=False):
            assert before.end <= after.start
