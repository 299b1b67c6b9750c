"""WebGAL script output.

Streams WebGAL statements while the scanner runs:

    *page0|title     ->  label:page0;
    prose            ->  :prose;

Each TEXT token becomes one statement per non-blank line it spans, stripped
of surrounding whitespace, so an inline tag splits a source line in two.
Only the first segment of a label names it; the rest (page titles) are
dropped. Tags are not translated.

Example:
    >>> print(to_webgal("*start|\\nhello[lr]\\nworld\\n"), end="")
    label:start;
    :hello;
    :world;

"""

from __future__ import annotations

import io
import sys
from typing import TextIO

from kagscript.config import ParseConfig
from kagscript.lexer import Cursor, start_parse
from kagscript.observer import TokenObserver
from kagscript.stringbuilder import StringBuilder
from kagscript.tokens import TokenEvent, TokenKind


class WebGalPrinter(TokenObserver):
    """Observer writing WebGAL statements to a text stream."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._line = StringBuilder()
        self._label_end: int | None = None

    def accepts(self, event: TokenEvent) -> bool:
        return event.kind in (TokenKind.TEXT, TokenKind.LABEL)

    def on_text(self, event: TokenEvent) -> None:
        self._label_end = None
        for line in event.value.splitlines():
            line = line.strip()
            if line:
                self._emit(":", line)

    def on_label(self, event: TokenEvent) -> None:
        continuation = (
            self._label_end is not None and event.location.offset == self._label_end + 1
        )
        self._label_end = event.location.end_offset
        if not continuation:
            self._emit("label:", event.value)

    def _emit(self, command: str, value: str) -> None:
        self._out.write(self._line.clear().append(command).append(value).append(";\n").build())


def to_webgal(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> str:
    """Translate a whole script and return the WebGAL text."""
    out = io.StringIO()
    cursor = Cursor(source, source_file=source_file, config=config)
    WebGalPrinter(out).attach(cursor)
    start_parse(cursor)
    return out.getvalue()
