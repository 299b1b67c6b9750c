"""Parse a Kirikiri scene into a typed AST."""

from kagscript import parse

script = parse("*start|\n@bg storage=room.png\nGood morning.[lr]\n")
for node in script.children:
    print(node)
