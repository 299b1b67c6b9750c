"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from kagscript.errors import ParseError
from kagscript.lexer import Cursor, start_parse, tokenize
from kagscript.tokens import TokenEvent, TokenKind

# Characters that cannot appear inside the generated piece
_PROSE = st.text(
    alphabet=st.characters(exclude_characters="@*[]|\r\n", exclude_categories=("Cs",)),
    min_size=1,
    max_size=20,
)
_NAME = st.text(
    alphabet=st.characters(exclude_characters="|\r\n", exclude_categories=("Cs",)),
    max_size=12,
)
_DIRECTIVE_BODY = st.text(
    alphabet=st.characters(exclude_characters="\r\n", exclude_categories=("Cs",)),
    max_size=20,
)
_TAG_BODY = st.text(
    alphabet=st.characters(exclude_characters="[]\r\n", exclude_categories=("Cs",)),
    max_size=12,
)

_LABEL_LINE = _NAME.map(lambda name: f"*{name}|\n")
_DIRECTIVE_LINE = _DIRECTIVE_BODY.map(lambda body: f"@{body}\n")
_TEXT_LINE = st.tuples(_PROSE, st.none() | _TAG_BODY).map(
    lambda parts: parts[0] + ("" if parts[1] is None else f"[{parts[1]}]") + "\n"
)
_WELL_FORMED = st.lists(st.one_of(_LABEL_LINE, _DIRECTIVE_LINE, _TEXT_LINE), max_size=15).map(
    "".join
)


def _reconstruct(events: list[TokenEvent]) -> str:
    """Put back the delimiters the rules strip."""
    parts: list[str] = []
    for event in events:
        match event.kind:
            case TokenKind.LABEL:
                parts.append(f"*{event.value}|\n")
            case TokenKind.TAG if event.inline:
                parts.append(f"[{event.value}]")
            case TokenKind.TAG:
                parts.append(f"@{event.value}\n")
            case TokenKind.TEXT:
                parts.append(event.value)
    return "".join(parts)


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_ends_with_single_end_of_input_or_fails(self, source: str) -> None:
        """Every pass either raises ParseError or ends with exactly one END_OF_INPUT."""
        try:
            events = tokenize(source)
        except ParseError:
            return

        assert events[-1].kind is TokenKind.END_OF_INPUT
        assert events[-1].value == ""
        assert sum(1 for e in events if e.kind is TokenKind.END_OF_INPUT) == 1

    @given(st.text(alphabet="@*[]|\r\n ab", max_size=200))
    @settings(max_examples=200)
    def test_position_bounds(self, source: str) -> None:
        """pos never exceeds len(text) and never moves backwards."""
        cursor = Cursor(source)
        positions: list[int] = []
        cursor.register(lambda kind, value: positions.append(cursor.pos))
        try:
            start_parse(cursor)
        except ParseError:
            pass

        assert 0 <= cursor.pos <= len(source)
        assert positions == sorted(positions)
        assert all(p <= len(source) for p in positions)

    @given(st.text(alphabet="@*[]|\r\n ab", max_size=200))
    @settings(max_examples=100)
    def test_offsets_within_source(self, source: str) -> None:
        try:
            events = tokenize(source)
        except ParseError:
            return

        for event in events:
            loc = event.location
            assert 0 <= loc.offset <= loc.end_offset <= len(source)
            assert loc.lineno >= 1
            assert loc.col_offset >= 1


class TestWellFormedInput:
    """Inputs built only from well-formed lines."""

    @given(_WELL_FORMED)
    @settings(max_examples=200)
    def test_round_trip(self, source: str) -> None:
        """Values plus their delimiters reconstruct the source exactly."""
        events = tokenize(source)

        assert events[-1].kind is TokenKind.END_OF_INPUT
        assert _reconstruct(events) == source

    @given(_NAME.filter(lambda name: name != ""), st.integers(min_value=1, max_value=6))
    @settings(max_examples=50)
    def test_label_segments(self, name: str, count: int) -> None:
        """``*n|n|...|`` yields one LABEL per segment."""
        segments = [f"{name}{i}" for i in range(count)]
        events = tokenize("*" + "|".join(segments) + "|\n")

        assert [(e.kind, e.value) for e in events[:-1]] == [
            (TokenKind.LABEL, segment) for segment in segments
        ]


class TestDeterminism:
    """Test that scanning is deterministic."""

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_fresh_cursors_agree(self, source: str) -> None:
        """Two fresh cursors over the same text yield identical event sequences."""

        def run() -> list[tuple[TokenKind, str, bool]] | type[ParseError]:
            try:
                return [(e.kind, e.value, e.inline) for e in tokenize(source)]
            except ParseError as err:
                return type(err)

        assert run() == run()
