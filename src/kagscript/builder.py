"""AstBuilder: fold token events into a Script tree.

Grouping rules:
- TEXT tokens open a text run. Inline tags (``[tag]`` scanned from inside
  a run) and the TEXT tokens that follow them extend the same run.
- Directives, line-initial ``[tag]`` lines and labels close the open run
  and become standalone nodes.
- LABEL tokens that directly continue one another through ``|`` form one
  Label node with several names.

Usage:
    >>> cursor = Cursor("hello[lr]world\\n@pg\\n")
    >>> builder = AstBuilder()
    >>> builder.attach(cursor)
    >>> start_parse(cursor)
    >>> builder.script.children[0].tags[0].text
    'lr'

"""

from __future__ import annotations

from kagscript.location import SourceLocation
from kagscript.nodes import Label, Script, Statement, Tag, Text
from kagscript.observer import TokenObserver
from kagscript.stringbuilder import StringBuilder
from kagscript.tokens import TokenEvent, TokenKind


class AstBuilder(TokenObserver):
    """Listener that builds the AST of one parse pass."""

    __slots__ = (
        "_children",
        "_run_text",
        "_run_tags",
        "_run_start",
        "_run_end",
        "_last_label",
        "_script",
    )

    def __init__(self) -> None:
        self._children: list[Statement] = []
        self._run_text = StringBuilder()
        self._run_tags: list[Tag] = []
        self._run_start: SourceLocation | None = None
        self._run_end: SourceLocation | None = None
        self._last_label: TokenEvent | None = None
        self._script: Script | None = None

    @property
    def script(self) -> Script | None:
        """The finished tree, or None until END_OF_INPUT has been seen."""
        return self._script

    def on_text(self, event: TokenEvent) -> None:
        self._last_label = None
        if self._run_start is None:
            self._run_start = event.location
        self._run_text.append(event.value)
        self._run_end = event.location

    def on_tag(self, event: TokenEvent) -> None:
        self._last_label = None
        tag = Tag(location=event.location, text=event.value)
        if event.inline and self._run_start is not None:
            self._run_tags.append(tag)
            self._run_end = event.location
            return
        self._close_run()
        self._children.append(tag)

    def on_label(self, event: TokenEvent) -> None:
        self._close_run()
        previous = self._last_label
        self._last_label = event
        # A continuation segment starts one character (the "|") after the last
        if previous is not None and event.location.offset == previous.location.end_offset + 1:
            label = self._children.pop()
            assert isinstance(label, Label)
            self._children.append(
                Label(
                    location=label.location.span_to(event.location),
                    names=(*label.names, event.value),
                )
            )
            return
        self._children.append(Label(location=event.location, names=(event.value,)))

    def on_end_of_input(self, event: TokenEvent) -> None:
        self._close_run()
        self._last_label = None
        location = SourceLocation(
            lineno=1,
            col_offset=1,
            offset=0,
            end_offset=event.location.end_offset,
            end_lineno=event.lineno,
            end_col_offset=event.col,
            source_file=event.location.source_file,
        )
        self._script = Script(location=location, children=tuple(self._children))

    def _close_run(self) -> None:
        if self._run_start is None:
            return
        end = self._run_end or self._run_start
        self._children.append(
            Text(
                location=self._run_start.span_to(end),
                text=self._run_text.build(),
                tags=tuple(self._run_tags),
            )
        )
        self._run_text.clear()
        self._run_tags = []
        self._run_start = None
        self._run_end = None
