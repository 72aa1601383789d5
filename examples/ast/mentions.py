"""Typed tree walk: collect custom expressions and strip spoilers."""

from marcas import Markup
from marcas.nodes import Custom, Entity, Spoiler
from marcas.text import extract_text
from marcas.visitor import BaseVisitor, transform


class MentionCollector(BaseVisitor[None]):
    """Collect the content of every ``[user: ...]`` expression."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.users: list[str] = []

    def visit_custom(self, node: Custom) -> None:
        if node.kind == "user":
            self.users.append(node.inner_span.slice(self.source).strip())


source = "ping [user: ana] and **[user: bo]**, the answer is ||42||"
root = Markup(densify=True)(source)

collector = MentionCollector(source)
collector.visit(root)
print("Mentioned:", collector.users)


def hide_spoilers(node: Entity) -> Entity | None:
    return None if isinstance(node, Spoiler) else node


print("Safe text:", extract_text(source, transform(root, hide_spoilers)))
