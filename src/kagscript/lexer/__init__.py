"""Single-pass scanner for Kirikiri (KAG) scripts.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── charsets.py          # Delimiter sets and character predicates
├── cursor.py            # Cursor (scan state, pending value, listeners)
├── rules.py             # Line dispatcher and grammar rules
└── driver.py            # start_parse loop, tokenize()

Usage:
    >>> from kagscript.lexer import tokenize
    >>> for event in tokenize("*page1|\\n@se storage=se1.wav\\n"):
    ...     print(event)
TokenEvent(LABEL, 'page1', 1:2)
TokenEvent(TAG, 'se storage=se1.wav', 2:2)
TokenEvent(END_OF_INPUT, '', 3:1)

"""

from kagscript.lexer.cursor import Cursor
from kagscript.lexer.driver import start_parse, tokenize
from kagscript.lexer.rules import (
    dispatch_line,
    parse_directive,
    parse_inline_tag,
    parse_label,
    parse_text,
)

__all__ = [
    "Cursor",
    "dispatch_line",
    "parse_directive",
    "parse_inline_tag",
    "parse_label",
    "parse_text",
    "start_parse",
    "tokenize",
]
