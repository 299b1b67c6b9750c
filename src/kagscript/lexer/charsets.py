"""Character sets for O(1) scan-transition decisions.

All sets are frozensets: O(1) membership, immutable, allocated once.

Usage:
    from kagscript.lexer.charsets import TEXT_STOP

    if cursor.scan_until_any(TEXT_STOP):
        ...
"""

# Line-initial characters routed by the line dispatcher
DIRECTIVE_OPEN = "@"
LABEL_OPEN = "*"
TAG_OPEN = "["
TAG_CLOSE = "]"
LABEL_SEPARATOR = "|"

NEWLINE: frozenset[str] = frozenset("\r\n")

# skip_whitespace() consumes exactly these
WHITESPACE: frozenset[str] = frozenset(" \t\r\n")

RESERVED: frozenset[str] = frozenset("@*[]|\r\n")

# Stop sets for scan_until_any
DIRECTIVE_STOP: frozenset[str] = NEWLINE
LABEL_STOP: frozenset[str] = NEWLINE | frozenset(LABEL_SEPARATOR)
TAG_STOP: frozenset[str] = frozenset(TAG_CLOSE)
TEXT_STOP: frozenset[str] = frozenset(DIRECTIVE_OPEN + LABEL_OPEN + TAG_OPEN)


def is_whitespace(char: str) -> bool:
    """Space, tab, carriage return or line feed."""
    return char in WHITESPACE


def is_newline(char: str) -> bool:
    return char in NEWLINE


def is_reserved(char: str) -> bool:
    """Check if character is a delimiter of the script grammar.

    The empty string (end of input) is never reserved.

    """
    return bool(char) and char in RESERVED
