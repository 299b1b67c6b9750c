"""Scan cursor: the single mutable state of a parse pass.

Owns the source text, the scan position, the pending token value and the
listener registry. Grammar rules take the cursor and mutate it; nothing
else holds parse state.

Thread Safety:
Cursor instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Collection

from kagscript.config import ParseConfig, get_parse_config
from kagscript.lexer.charsets import WHITESPACE
from kagscript.listeners import (
    Callback,
    ListenerHandle,
    ListenerRegistry,
    Predicate,
    accept_all,
)
from kagscript.location import SourceLocation
from kagscript.stringbuilder import StringBuilder
from kagscript.tokens import TokenEvent, TokenKind


class Cursor:
    """Forward-only scan state over one script.

    Invariants:
        ``0 <= pos <= len(text)``; ``pos`` never decreases.
        ``pending_value`` holds exactly the characters consumed by
        advance() or scan_until_any() since the last finalize_token().

    Usage:
            >>> cursor = Cursor("@se storage=se1.wav\\n")
            >>> cursor.skip_one()
            '@'
            >>> cursor.scan_until_any("\\r\\n")
            True
            >>> cursor.finalize_token(TokenKind.TAG)
        TokenEvent(TAG, 'se storage=se1.wav', 1:2)

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_config",
        "_kind",
        "_token_count",
        "_pending",
        "_listeners",
        # Start of the pending token
        "_saved_offset",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: ParseConfig | None = None,
    ) -> None:
        """Initialize cursor with source text.

        Args:
            source: Script source text
            source_file: Optional source file path for error messages
            config: Parse configuration (defaults to the active ContextVar config)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._config = config if config is not None else get_parse_config()
        self._kind: TokenKind | None = None
        self._token_count = 0
        self._pending = StringBuilder()
        self._listeners = ListenerRegistry()

        self._saved_offset = 0
        self._saved_lineno = 1
        self._saved_col = 1

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def text(self) -> str:
        return self._source

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def current_kind(self) -> TokenKind | None:
        """Kind of the most recently finalized token (None before the first)."""
        return self._kind

    @property
    def token_count(self) -> int:
        """Number of tokens finalized so far, END_OF_INPUT included."""
        return self._token_count

    @property
    def pending_value(self) -> str:
        return self._pending.build()

    @property
    def config(self) -> ParseConfig:
        return self._config

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def listeners(self) -> ListenerRegistry:
        return self._listeners

    @property
    def at_end(self) -> bool:
        return self._pos >= self._source_len

    def location(self) -> SourceLocation:
        """Location of the current scan position."""
        return SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._pos,
            end_offset=self._pos,
            source_file=self._source_file,
        )

    # =========================================================================
    # Character navigation
    # =========================================================================

    def peek(self, offset: int = 0) -> str:
        """Character at ``pos + offset`` without consuming.

        Returns:
            The character, or empty string when out of range.
        """
        index = self._pos + offset
        if index < 0 or index >= self._source_len:
            return ""
        return self._source[index]

    def advance(self) -> str:
        """Consume one character into the pending value.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        if not self._pending:
            self._save_location()
        char = self._source[self._pos]
        self._pending.append(char)
        self._move(char)
        return char

    def skip_one(self) -> str:
        """Consume one character without recording it (delimiters).

        Returns:
            The skipped character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        char = self._source[self._pos]
        self._move(char)
        return char

    def scan_until_any(self, delimiters: Collection[str]) -> bool:
        """Advance until peek() is one of ``delimiters`` or input ends.

        Strictly forward, no backtracking. The scanned run is appended to
        the pending value in one piece.

        Returns:
            True if a delimiter was found, False if end of input came first.
        """
        source = self._source
        end = self._pos
        source_len = self._source_len
        while end < source_len and source[end] not in delimiters:
            end += 1

        if end > self._pos:
            if not self._pending:
                self._save_location()
            segment = source[self._pos : end]
            self._pending.append(segment)
            self._move_over(segment)

        return end < source_len

    def skip_whitespace(self) -> bool:
        """Skip spaces, tabs, carriage returns and line feeds unrecorded.

        Returns:
            False if end of input was reached, True otherwise.
        """
        while self._pos < self._source_len:
            char = self._source[self._pos]
            if char not in WHITESPACE:
                return True
            self._move(char)
        return False

    def skip_newline(self) -> None:
        """Consume one optional ``\\r`` then one optional ``\\n``."""
        if self.peek() == "\r":
            self.skip_one()
        if self.peek() == "\n":
            self.skip_one()

    def _move(self, char: str) -> None:
        self._pos += 1
        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

    def _move_over(self, segment: str) -> None:
        """Move past ``segment`` (which starts at pos), tracking lines."""
        newline_count = segment.count("\n")
        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)
        self._pos += len(segment)

    def _save_location(self) -> None:
        self._saved_offset = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    # =========================================================================
    # Token completion and notification
    # =========================================================================

    def finalize_token(self, kind: TokenKind, *, inline: bool = False) -> TokenEvent:
        """Close the pending token and notify listeners.

        Resets the pending value, records ``kind`` as the current kind and
        delivers the event synchronously. Listener exceptions propagate.

        Args:
            kind: Kind of the completed token
            inline: Mark a tag scanned from inside a text run

        Returns:
            The immutable event that was delivered.
        """
        if not self._pending:
            self._save_location()
        event = TokenEvent(
            kind=kind,
            value=self._pending.build(),
            inline=inline,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=self._saved_offset,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )
        self._pending.clear()
        self._kind = kind
        self._token_count += 1
        self.notify(event)
        return event

    def notify(self, event: TokenEvent) -> None:
        """Deliver ``event`` to every listener whose predicate accepts it."""
        self._listeners.notify(event)

    def register(
        self,
        callback: Callback | Callable[[TokenEvent], object],
        predicate: Predicate = accept_all,
        *,
        full_event: bool = False,
    ) -> ListenerHandle:
        """Register a listener on this cursor (see ListenerRegistry.register)."""
        return self._listeners.register(callback, predicate, full_event=full_event)

    def unregister(self, handle: ListenerHandle) -> None:
        self._listeners.unregister(handle)

    def __repr__(self) -> str:
        return f"Cursor(pos={self._pos}/{self._source_len}, {self._lineno}:{self._col})"
