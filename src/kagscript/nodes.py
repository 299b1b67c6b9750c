"""Typed AST nodes for kagscript.

All AST nodes are frozen dataclasses with slots. The scanner never builds
them; AstBuilder folds token events into nodes on the consumer side.

Node Hierarchy:
Node (base)
├── Script   root, ordered children
├── Label    page marker, one or more names
├── Tag      directive or inline tag, opaque text
└── Text     prose run with the inline tags found inside it

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from typing import TypeAlias

from kagscript.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Tag(Node):
    """A directive or inline tag.

    Script: ``@se storage=se1.wav`` or ``[lr]``
    ``text`` is everything between the delimiters.

    """

    text: str


@dataclass(frozen=True, slots=True)
class Text(Node):
    """A narrative text run.

    ``text`` concatenates the prose; ``tags`` holds the inline tags found
    inside the run, in source order.

    """

    text: str
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class Label(Node):
    """A page marker.

    Script: ``*page0|&f.scripttitle``

    """

    names: tuple[str, ...]


Statement: TypeAlias = Label | Tag | Text


@dataclass(frozen=True, slots=True)
class Script(Node):
    """Root node: the statements of one script, in source order."""

    children: tuple[Statement, ...]
