"""Top-level parse loop."""

from __future__ import annotations

from kagscript.config import ParseConfig
from kagscript.lexer.cursor import Cursor
from kagscript.lexer.rules import dispatch_line
from kagscript.tokens import TokenEvent, TokenKind
from kagscript.utils.logger import get_logger

logger = get_logger(__name__)


def start_parse(cursor: Cursor) -> None:
    """Drive ``cursor`` until END_OF_INPUT has been finalized.

    Listeners registered on the cursor see every token as it is finalized.
    The first parse error, or any exception raised by a listener, aborts
    the pass and propagates unchanged.

    A cursor that already reached END_OF_INPUT is left as is.
    """
    logger.debug(
        "Parsing %s (%d chars, %d listeners)",
        cursor.source_file or "<string>",
        len(cursor.text),
        len(cursor.listeners),
    )
    while cursor.current_kind is not TokenKind.END_OF_INPUT:
        dispatch_line(cursor)
    logger.debug(
        "Finished %s: %d tokens", cursor.source_file or "<string>", cursor.token_count
    )


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> list[TokenEvent]:
    """Scan ``source`` and return every finalized event, END_OF_INPUT last.

    Example:
        >>> [(e.kind.name, e.value) for e in tokenize("hello[tag]world")]
        [('TEXT', 'hello'), ('TAG', 'tag'), ('TEXT', 'world'), ('END_OF_INPUT', '')]
    """
    cursor = Cursor(source, source_file=source_file, config=config)
    events: list[TokenEvent] = []
    cursor.register(events.append, full_event=True)
    start_parse(cursor)
    return events
