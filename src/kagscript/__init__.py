"""
kagscript: Kirikiri/KAG script parser

A single-pass, listener-driven scanner for visual-novel scripts made of
labels (``*page|``), directives (``@cmd args``), inline tags (``[lr]``)
and narrative text. Consumers observe tokens as they are recognized,
or ask for a typed AST.

Quick Start:
    >>> from kagscript import parse
    >>> script = parse("*page0|\\n@se storage=se1.wav\\nhello[lr]\\n")
    >>> [type(node).__name__ for node in script.children]
    ['Label', 'Tag', 'Text']

Streaming:
    >>> from kagscript import TokenKind, kind_is, new_cursor, register_listener, start_parse
    >>> cursor = new_cursor("hello[lr]world")
    >>> handle = register_listener(
    ...     cursor, lambda kind, value: print(value), kind_is(TokenKind.TEXT)
    ... )
    >>> start_parse(cursor)
    hello
    world
"""

from kagscript.builder import AstBuilder
from kagscript.codegen import WebGalPrinter, to_webgal
from kagscript.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from kagscript.errors import (
    InvalidLabelError,
    InvalidTagError,
    KagScriptError,
    ListenerError,
    ParseError,
)
from kagscript.lexer import Cursor, start_parse, tokenize
from kagscript.listeners import (
    Callback,
    ListenerHandle,
    ListenerRegistry,
    Predicate,
    accept_all,
    kind_is,
)
from kagscript.location import SourceLocation
from kagscript.nodes import Label, Node, Script, Tag, Text
from kagscript.observer import TokenObserver
from kagscript.tokens import TokenEvent, TokenKind
from kagscript.visitor import BaseVisitor

__version__ = "0.1.0"


def new_cursor(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Cursor:
    """Create a fresh cursor for one parse pass over ``source``."""
    return Cursor(source, source_file=source_file, config=config)


def register_listener(
    cursor: Cursor,
    callback: Callback,
    predicate: Predicate = accept_all,
) -> ListenerHandle:
    """Register ``callback(kind, value)`` for events accepted by ``predicate``.

    Listeners run synchronously, in registration order, as each token is
    finalized.
    """
    return cursor.register(callback, predicate)


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Script:
    """Parse a script into a typed AST.

    Args:
        source: Script source text
        source_file: Optional source file path for error messages
        config: Parse configuration (defaults to the active ContextVar config)

    Returns:
        Script AST root node

    Raises:
        ParseError: The first malformed directive or label

    Example:
        >>> script = parse("*a|b|\\n")
        >>> script.children[0].names
        ('a', 'b')
    """
    cursor = new_cursor(source, source_file=source_file, config=config)
    builder = AstBuilder()
    builder.attach(cursor)
    start_parse(cursor)
    script = builder.script
    assert script is not None
    return script


__all__ = [
    "AstBuilder",
    "BaseVisitor",
    "Callback",
    "Cursor",
    "InvalidLabelError",
    "InvalidTagError",
    "KagScriptError",
    "Label",
    "ListenerError",
    "ListenerHandle",
    "ListenerRegistry",
    "Node",
    "ParseConfig",
    "ParseError",
    "Predicate",
    "Script",
    "SourceLocation",
    "Tag",
    "Text",
    "TokenEvent",
    "TokenKind",
    "TokenObserver",
    "WebGalPrinter",
    "__version__",
    "accept_all",
    "get_parse_config",
    "kind_is",
    "new_cursor",
    "parse",
    "parse_config_context",
    "register_listener",
    "reset_parse_config",
    "set_parse_config",
    "start_parse",
    "to_webgal",
    "tokenize",
]
