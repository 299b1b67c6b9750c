"""Typed token observer with match-based dispatch.

An alternative to bare ``(kind, value)`` callbacks: subclass TokenObserver,
override the ``on_*`` methods for the kinds you care about and attach it
to a cursor. Filtering belongs in ``accepts``.

Example, count directives:

    class DirectiveCounter(TokenObserver):
        def __init__(self) -> None:
            self.count = 0

        def on_tag(self, event: TokenEvent) -> None:
            self.count += 1

    counter = DirectiveCounter()
    cursor = Cursor(source)
    counter.attach(cursor)
    start_parse(cursor)

Thread Safety:
    Observers may accumulate state. Create one per parse pass.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kagscript.tokens import TokenEvent, TokenKind

if TYPE_CHECKING:
    from kagscript.lexer.cursor import Cursor
    from kagscript.listeners import ListenerHandle


class TokenObserver:
    """Base observer. Every ``on_*`` method defaults to ``on_default``."""

    def attach(self, cursor: Cursor) -> ListenerHandle:
        """Register this observer on ``cursor``; returns the listener handle."""
        return cursor.register(self.on_token, self.accepts, full_event=True)

    def accepts(self, event: TokenEvent) -> bool:
        """Guard evaluated before dispatch. Default: every event."""
        return True

    def on_token(self, event: TokenEvent) -> None:
        """Dispatch to the ``on_*`` method for the event kind."""
        match event.kind:
            case TokenKind.TEXT:
                self.on_text(event)
            case TokenKind.TAG:
                self.on_tag(event)
            case TokenKind.LABEL:
                self.on_label(event)
            case TokenKind.END_OF_INPUT:
                self.on_end_of_input(event)
            case _:
                self.on_default(event)

    def on_default(self, event: TokenEvent) -> None:
        pass

    def on_text(self, event: TokenEvent) -> None:
        self.on_default(event)

    def on_tag(self, event: TokenEvent) -> None:
        self.on_default(event)

    def on_label(self, event: TokenEvent) -> None:
        self.on_default(event)

    def on_end_of_input(self, event: TokenEvent) -> None:
        self.on_default(event)
