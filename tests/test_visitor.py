"""Tests for the AST visitor and the typed token observer."""

from kagscript import (
    BaseVisitor,
    Label,
    Script,
    SourceLocation,
    Tag,
    Text,
    TokenEvent,
    TokenKind,
    TokenObserver,
    new_cursor,
    parse,
    start_parse,
)
from kagscript.nodes import Node

LOC = SourceLocation(lineno=1, col_offset=1)


def _tag(text: str) -> Tag:
    return Tag(location=LOC, text=text)


# =============================================================================
# BaseVisitor
# =============================================================================


class TagCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.tags: list[str] = []

    def visit_tag(self, node: Tag) -> None:
        self.tags.append(node.text)


class NodeCounter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.names: list[str] = []

    def visit_default(self, node: Node) -> None:
        self.names.append(type(node).__name__)


class TestBaseVisitor:
    """Dispatch and child walking."""

    def test_collects_standalone_and_inline_tags(self) -> None:
        collector = TagCollector()
        collector.visit(parse("@a\nx[b]y\n@c\n"))
        assert collector.tags == ["a", "b", "c"]

    def test_default_sees_every_node_in_order(self) -> None:
        script = Script(
            location=LOC,
            children=(
                Label(location=LOC, names=("p",)),
                Text(location=LOC, text="hi", tags=(_tag("lr"),)),
            ),
        )
        counter = NodeCounter()
        counter.visit(script)
        assert counter.names == ["Script", "Label", "Text", "Tag"]

    def test_return_value(self) -> None:
        class LabelNames(BaseVisitor[tuple[str, ...]]):
            def visit_label(self, node: Label) -> tuple[str, ...]:
                return node.names

        assert LabelNames().visit(Label(location=LOC, names=("a", "b"))) == ("a", "b")

    def test_unknown_node_falls_back(self) -> None:
        counter = NodeCounter()
        counter.visit(Node(location=LOC))
        assert counter.names == ["Node"]


# =============================================================================
# TokenObserver
# =============================================================================


class Recorder(TokenObserver):
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def on_text(self, event: TokenEvent) -> None:
        self.calls.append(("text", event.value))

    def on_tag(self, event: TokenEvent) -> None:
        self.calls.append(("tag", event.value))

    def on_label(self, event: TokenEvent) -> None:
        self.calls.append(("label", event.value))

    def on_end_of_input(self, event: TokenEvent) -> None:
        self.calls.append(("end", event.value))


class TestTokenObserver:
    """Per-kind dispatch through the listener registry."""

    def test_dispatch_per_kind(self) -> None:
        cursor = new_cursor("*p|\nhi[lr]\n")
        recorder = Recorder()
        recorder.attach(cursor)
        start_parse(cursor)
        assert recorder.calls == [
            ("label", "p"),
            ("text", "hi"),
            ("tag", "lr"),
            ("text", "\n"),
            ("end", ""),
        ]

    def test_accepts_guard(self) -> None:
        class LabelsOnly(Recorder):
            def accepts(self, event: TokenEvent) -> bool:
                return event.kind is TokenKind.LABEL

        cursor = new_cursor("*a|b|\n@x\n")
        observer = LabelsOnly()
        observer.attach(cursor)
        start_parse(cursor)
        assert observer.calls == [("label", "a"), ("label", "b")]

    def test_default_handler(self) -> None:
        class Counter(TokenObserver):
            def __init__(self) -> None:
                self.count = 0

            def on_default(self, event: TokenEvent) -> None:
                self.count += 1

        cursor = new_cursor("@a\n@b\n")
        counter = Counter()
        counter.attach(cursor)
        start_parse(cursor)
        assert counter.count == 3

    def test_detach(self) -> None:
        cursor = new_cursor("@a\n")
        recorder = Recorder()
        handle = recorder.attach(cursor)
        cursor.unregister(handle)
        start_parse(cursor)
        assert recorder.calls == []
