"""Error-path and malformed input tests."""

import pytest

from kagscript import parse, tokenize
from kagscript.errors import (
    InvalidLabelError,
    InvalidTagError,
    KagScriptError,
    ListenerError,
    ParseError,
)

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = ParseError("missing bracket", lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="first.ks")
        assert str(err) == "first.ks:1:1 error"


class TestHierarchy:
    """Every library error is a KagScriptError."""

    @pytest.mark.parametrize(
        "error_type", [ParseError, InvalidTagError, InvalidLabelError, ListenerError]
    )
    def test_is_kagscript_error(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, KagScriptError)

    def test_grammar_errors_are_parse_errors(self) -> None:
        assert issubclass(InvalidTagError, ParseError)
        assert issubclass(InvalidLabelError, ParseError)


# =========================================================================
# Fail-fast behavior
# =========================================================================


class TestFailFast:
    """The first error aborts the pass."""

    def test_error_after_valid_lines(self) -> None:
        with pytest.raises(InvalidLabelError):
            tokenize("@ok\n*")

    def test_no_partial_result(self) -> None:
        with pytest.raises(InvalidTagError) as exc_info:
            parse("*p|\nhello\n@never ends")
        assert exc_info.value.lineno == 3

    def test_label_error_points_at_segment(self) -> None:
        with pytest.raises(InvalidLabelError) as exc_info:
            tokenize("*a|bc", source_file="x.ks")
        assert exc_info.value.col_offset == 4
        assert exc_info.value.source_file == "x.ks"

    def test_bare_star_message(self) -> None:
        with pytest.raises(InvalidLabelError, match="no name"):
            tokenize("text*")
