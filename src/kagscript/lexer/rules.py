"""Line dispatcher and grammar rules.

Each rule takes the one Cursor of the parse pass, consumes characters
forward, finalizes exactly the tokens it recognizes and returns. Rules
commit once they start; there is no backtracking.

Routing on the first character of a line:

    @   directive    ->  TAG, up to the newline (newline consumed)
    *   label        ->  LABEL per ``|``-separated segment
    [   inline tag   ->  TAG, up to ``]``
    *   anything else -> TEXT, interleaved with inline tags

"""

from __future__ import annotations

from kagscript.errors import InvalidLabelError, InvalidTagError
from kagscript.lexer.charsets import (
    DIRECTIVE_OPEN,
    DIRECTIVE_STOP,
    LABEL_OPEN,
    LABEL_SEPARATOR,
    LABEL_STOP,
    TAG_CLOSE,
    TAG_OPEN,
    TAG_STOP,
    TEXT_STOP,
    is_newline,
)
from kagscript.lexer.cursor import Cursor
from kagscript.tokens import TokenKind
from kagscript.utils.logger import get_logger

logger = get_logger(__name__)


def dispatch_line(cursor: Cursor) -> None:
    """Route the current position to one grammar rule.

    Finalizes END_OF_INPUT when nothing is left to scan.
    """
    if cursor.config.skip_leading_whitespace and not cursor.skip_whitespace():
        cursor.finalize_token(TokenKind.END_OF_INPUT)
        return
    if cursor.at_end:
        cursor.finalize_token(TokenKind.END_OF_INPUT)
        return

    char = cursor.peek()
    if char == DIRECTIVE_OPEN:
        parse_directive(cursor)
    elif char == LABEL_OPEN:
        parse_label(cursor)
    elif char == TAG_OPEN and cursor.peek(1) != TAG_OPEN:
        parse_inline_tag(cursor)
    else:
        # "[[" opens a text run, not a tag
        parse_text(cursor)


def parse_directive(cursor: Cursor) -> None:
    """``@name args`` up to the end of the line.

    Raises:
        InvalidTagError: End of input before a newline
    """
    start = cursor.location()
    cursor.skip_one()
    if not cursor.scan_until_any(DIRECTIVE_STOP):
        raise InvalidTagError(
            "directive is not terminated by a newline",
            start.lineno,
            start.col_offset,
            cursor.source_file,
        )
    cursor.finalize_token(TokenKind.TAG)
    cursor.skip_newline()


def parse_label(cursor: Cursor) -> None:
    """``*name|`` with optional further ``segment|`` continuations.

    One LABEL token per segment. The label ends at a newline (consumed),
    or at a ``|`` followed by a newline or end of input.

    Raises:
        InvalidLabelError: Nothing follows ``*``, or a segment reaches
            end of input before ``|`` or a newline
    """
    start = cursor.location()
    cursor.skip_one()
    if cursor.at_end:
        raise InvalidLabelError(
            "label has no name", start.lineno, start.col_offset, cursor.source_file
        )

    while True:
        segment_start = cursor.location()
        if not cursor.scan_until_any(LABEL_STOP):
            raise InvalidLabelError(
                "label is not terminated by '|' or a newline",
                segment_start.lineno,
                segment_start.col_offset,
                cursor.source_file,
            )
        cursor.finalize_token(TokenKind.LABEL)

        if cursor.peek() != LABEL_SEPARATOR:
            cursor.skip_newline()
            return

        cursor.skip_one()
        if cursor.at_end:
            return
        if is_newline(cursor.peek()):
            cursor.skip_newline()
            return


def parse_inline_tag(cursor: Cursor, *, inline: bool = False) -> None:
    """``[name args]``.

    Without a closing ``]`` the tag runs to end of input, unless
    ``strict_inline_tags`` is configured.

    Args:
        cursor: The parse cursor, positioned on ``[``
        inline: True when called from inside a text run

    Raises:
        InvalidTagError: Missing ``]`` with strict_inline_tags enabled
    """
    start = cursor.location()
    cursor.skip_one()
    if not cursor.scan_until_any(TAG_STOP):
        if cursor.config.strict_inline_tags:
            raise InvalidTagError(
                "inline tag is missing its closing ']'",
                start.lineno,
                start.col_offset,
                cursor.source_file,
            )
        logger.warning("%s: inline tag has no closing ']', read to end of input", start)
    cursor.finalize_token(TokenKind.TAG, inline=inline)
    if cursor.peek() == TAG_CLOSE:
        cursor.skip_one()


def parse_text(cursor: Cursor) -> None:
    """Narrative text up to the next ``@``, ``*`` or ``[``.

    ``[[`` is literal text and does not stop the run. After the TEXT token
    a ``[`` tag is scanned directly, inline unless the text ended a line;
    a directive or label starting mid-line goes back through the dispatcher.
    """
    while cursor.scan_until_any(TEXT_STOP):
        if cursor.peek() == TAG_OPEN and cursor.peek(1) == TAG_OPEN:
            cursor.advance()
            cursor.advance()
            continue
        break

    event = cursor.finalize_token(TokenKind.TEXT)
    if cursor.at_end:
        return
    if cursor.peek() == TAG_OPEN:
        parse_inline_tag(cursor, inline=not is_newline(event.value[-1:]))
    else:
        dispatch_line(cursor)
