"""TokenKind and TokenEvent definitions for the kagscript scanner.

The cursor finalizes one TokenEvent per grammar-rule invocation and hands
it to every listener whose predicate accepts it.

Thread Safety:
TokenEvent is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
TokenEvent stores raw coordinates and lazily creates SourceLocation on
demand, so listeners that only read kind and value pay nothing for it.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kagscript.location import SourceLocation


class TokenKind(Enum):
    """Token kinds produced by the scanner."""

    TEXT = auto()  # narrative prose run
    TAG = auto()  # @name ... or [name ...]
    LABEL = auto()  # *name| segment
    END_OF_INPUT = auto()


@dataclass(frozen=True, slots=True)
class TokenEvent:
    """A finalized token, as delivered to listeners.

    Attributes:
        kind: The token kind
        value: Characters accumulated for the token, delimiters excluded
        inline: True for a ``[tag]`` scanned from inside a text run
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _source_file: Optional source file path

    """

    kind: TokenKind
    value: str
    inline: bool = False
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from kagscript.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"TokenEvent({self.kind.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
