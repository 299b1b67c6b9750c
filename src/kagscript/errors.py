"""Exception classes for kagscript.

Provides standardized exceptions for error handling throughout kagscript.
Every parse error is fatal to the parse pass that raised it.
"""

from __future__ import annotations


class KagScriptError(Exception):
    """Base exception for all kagscript errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(KagScriptError):
    """Error during script parsing.

    Raised when the scanner encounters malformed input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class InvalidTagError(ParseError):
    """A directive opened with ``@`` never reached a newline.

    Also raised for ``[`` without a closing ``]`` when
    ``ParseConfig.strict_inline_tags`` is enabled.
    """


class InvalidLabelError(ParseError):
    """A label opened with ``*`` is empty or never reaches ``|`` or a newline."""


class ListenerError(KagScriptError):
    """Error in listener registration.

    Raised when unregistering a handle the registry does not hold.
    """
