"""AST Visitor for kagscript.

Example, collect every tag, standalone or inline:

    class TagCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.tags: list[Tag] = []

        def visit_tag(self, node: Tag) -> None:
            self.tags.append(node)

    collector = TagCollector()
    collector.visit(script)

Thread Safety:
    Visitors may accumulate mutable state. Create a new visitor per thread.

"""

from typing import Generic, TypeVar

from kagscript.nodes import Label, Node, Script, Tag, Text

T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children (the
    statements of a Script, the inline tags of a Text) are walked
    automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        return None  # type: ignore[return-value]

    def visit_script(self, node: Script) -> T:
        return self.visit_default(node)

    def visit_label(self, node: Label) -> T:
        return self.visit_default(node)

    def visit_tag(self, node: Tag) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Script():
                return self.visit_script(node)
            case Label():
                return self.visit_label(node)
            case Tag():
                return self.visit_tag(node)
            case Text():
                return self.visit_text(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Script(children=children):
                for child in children:
                    self.visit(child)
            case Text(tags=tags):
                for tag in tags:
                    self.visit(tag)
            case _:
                pass  # Leaf nodes: no children
