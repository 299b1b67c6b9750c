"""Listener registry: the seam between scanning and consumption.

Listeners are (callback, predicate) pairs. For every finalized token the
registry calls, in registration order, each callback whose predicate
accepts the event. Callbacks receive ``(kind, value)``; predicates receive
the full TokenEvent.

Example:
    >>> registry = ListenerRegistry()
    >>> seen = []
    >>> handle = registry.register(
    ...     lambda kind, value: seen.append(value),
    ...     kind_is(TokenKind.TAG),
    ... )
    >>> registry.notify(TokenEvent(TokenKind.TAG, "se storage=se1.wav"))
    >>> seen
    ['se storage=se1.wav']

Thread Safety:
    A registry belongs to one cursor and one parse pass. Not thread-safe.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TypeAlias

from kagscript.errors import ListenerError
from kagscript.tokens import TokenEvent, TokenKind
from kagscript.utils.logger import get_logger

logger = get_logger(__name__)

Callback: TypeAlias = Callable[[TokenKind, str], object]
Predicate: TypeAlias = Callable[[TokenEvent], bool]


def accept_all(event: TokenEvent) -> bool:
    """Default predicate: accept every event."""
    return True


def kind_is(*kinds: TokenKind) -> Predicate:
    """Build a predicate accepting events of the given kinds."""
    accepted = frozenset(kinds)

    def predicate(event: TokenEvent) -> bool:
        return event.kind in accepted

    return predicate


@dataclass(frozen=True, slots=True, eq=False)
class ListenerHandle:
    """Opaque handle returned by register(); compared by identity.

    When ``full_event`` is set the callback receives the TokenEvent itself
    instead of ``(kind, value)``. Typed observers register this way.

    """

    callback: Callback | Callable[[TokenEvent], object]
    predicate: Predicate
    full_event: bool = False


class ListenerRegistry:
    """Ordered collection of listeners."""

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: list[ListenerHandle] = []

    def register(
        self,
        callback: Callback | Callable[[TokenEvent], object],
        predicate: Predicate = accept_all,
        *,
        full_event: bool = False,
    ) -> ListenerHandle:
        """Append a listener; it is notified after all earlier ones.

        Args:
            callback: Called with ``(kind, value)`` for accepted events,
                or with the event itself when ``full_event`` is set
            predicate: Filter over the full event (default: accept all)
            full_event: Deliver the TokenEvent instead of ``(kind, value)``

        Returns:
            Handle usable with unregister()
        """
        handle = ListenerHandle(callback, predicate, full_event)
        self._listeners.append(handle)
        logger.debug("Registered listener %r (%d total)", callback, len(self._listeners))
        return handle

    def unregister(self, handle: ListenerHandle) -> None:
        """Remove a listener by identity.

        Raises:
            ListenerError: If the handle is not registered here
        """
        for index, registered in enumerate(self._listeners):
            if registered is handle:
                del self._listeners[index]
                logger.debug("Unregistered listener %r", handle.callback)
                return
        raise ListenerError(f"Listener {handle.callback!r} is not registered")

    def notify(self, event: TokenEvent) -> None:
        """Deliver an event synchronously, in registration order.

        Exceptions raised by predicates or callbacks propagate to the caller.
        """
        # Snapshot so a callback may unregister itself mid-notification
        for handle in tuple(self._listeners):
            if not handle.predicate(event):
                continue
            if handle.full_event:
                handle.callback(event)  # type: ignore[call-arg]
            else:
                handle.callback(event.kind, event.value)  # type: ignore[call-arg]

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> Iterator[ListenerHandle]:
        return iter(self._listeners)
