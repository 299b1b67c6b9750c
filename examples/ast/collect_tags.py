"""Typed AST: list every tag a scene uses, standalone or inline."""

from collections import Counter

from kagscript import parse
from kagscript.nodes import Tag
from kagscript.visitor import BaseVisitor

SCENE = """*page0|&f.scripttitle
@se storage=se247.wav
　经过长途跋涉，到达了郊外的森林。[lr]
　从这里走二小时左右，可以走到越来越熟悉的爱因兹贝伦城。[lr]
@pg
"""


class TagNames(BaseVisitor[None]):
    """Count tags by command name (the first word)."""

    def __init__(self) -> None:
        self.names: Counter[str] = Counter()

    def visit_tag(self, node: Tag) -> None:
        self.names[node.text.split(" ", 1)[0]] += 1


collector = TagNames()
collector.visit(parse(SCENE))
for name, count in collector.names.most_common():
    print(f"{name}: {count}")
