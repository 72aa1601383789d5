"""Entity visitor and transformer for marcas.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen entity trees.

Example: collect all custom expressions:

    class CustomCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.kinds: list[str] = []

        def visit_custom(self, node: Custom) -> None:
            self.kinds.append(node.kind)

    collector = CustomCollector()
    collector.visit(parse("[user: 1] and [role: 2]"))

Example: drop every spoiler:

    def drop_spoilers(node: Entity) -> Entity | None:
        return None if isinstance(node, Spoiler) else node

    new_root = transform(root, drop_spoilers)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

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


class BaseVisitor[T]:
    """Base entity visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for entity types you care
    about. Unhandled types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Entity) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        for child in node.children:
            self.visit(child)
        return result

    def visit_default(self, node: Entity) -> T:
        """Called for entity types without a specific ``visit_*`` method.

        Default returns None (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_italic(self, node: Italic) -> T:
        return self.visit_default(node)

    def visit_spoiler(self, node: Spoiler) -> T:
        return self.visit_default(node)

    def visit_underline(self, node: Underline) -> T:
        return self.visit_default(node)

    def visit_strikethrough(self, node: Strikethrough) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        return self.visit_default(node)

    def visit_emoji(self, node: Emoji) -> T:
        return self.visit_default(node)

    def visit_emoji_name(self, node: EmojiName) -> T:
        return self.visit_default(node)

    def visit_codeblock(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_blockquote(self, node: BlockQuote) -> T:
        return self.visit_default(node)

    def visit_color(self, node: Color) -> T:
        return self.visit_default(node)

    def visit_custom(self, node: Custom) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Entity) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Text():
                return self.visit_text(node)
            case Link():
                return self.visit_link(node)
            case Bold():
                return self.visit_bold(node)
            case Italic():
                return self.visit_italic(node)
            case Spoiler():
                return self.visit_spoiler(node)
            case Underline():
                return self.visit_underline(node)
            case Strikethrough():
                return self.visit_strikethrough(node)
            case Code():
                return self.visit_code(node)
            case Emoji():
                return self.visit_emoji(node)
            case EmojiName():
                return self.visit_emoji_name(node)
            case CodeBlock():
                return self.visit_codeblock(node)
            case BlockQuote():
                return self.visit_blockquote(node)
            case Color():
                return self.visit_color(node)
            case Custom():
                return self.visit_custom(node)
            case _:
                return self.visit_default(node)


def transform(root: Entity, fn: Callable[[Entity], Entity | None]) -> Entity:
    """Apply a function to every entity in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove an entity from the tree. The root
    cannot be removed; returning None for it raises TypeError.

    Args:
        root: The tree to transform.
        fn: Function that receives an entity and returns a (possibly new)
            entity, or None to remove it.

    Returns:
        A new tree with the transformation applied. The original is untouched.

    """
    result = _transform_node(root, fn)
    if result is None:
        msg = "transform fn must return an entity for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Entity, fn: Callable[[Entity], Entity | None]) -> Entity | None:
    """Transform a single entity bottom-up: children first, then self."""
    children = node.children
    new_children = tuple(
        result for child in children if (result := _transform_node(child, fn)) is not None
    )
    if new_children != children:
        node = dataclasses.replace(node, children=new_children)
    return fn(node)
