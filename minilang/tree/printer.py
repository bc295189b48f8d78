from typing import Iterator

from minilang.token import Token
from minilang.tree.tree import Node
from minilang.tree.visitor import YieldVisitor


class Printer(YieldVisitor):
    def print(self, tree: Node) -> str:
        # Every leaf token is separated by exactly one space
        return " ".join(token.text for token in self.visit(tree))

    def visit_Token(self, token: Token) -> Iterator[Token]:
        yield token
