from typing import Iterator, List

from minilang.token import Token
from minilang.tree.visitor import YieldVisitor

from minilang.tree.tree import (  # isort:skip
    ExpressionNode,
    FactorNode,
    IdentifierNode,
    Node,
)


class Runner(YieldVisitor):
    """Walk a parsed tree depth-first, reporting one line per leaf."""

    def __init__(self, tree: ExpressionNode) -> None:
        super().__init__()
        self.tree = tree

    def run(self) -> None:
        for line in self.lines():
            print(line)

    def lines(self) -> List[str]:
        return list(self.visit(self.tree))

    def visit_ExpressionNode(self, node: ExpressionNode) -> Iterator[str]:
        for child in node.children:
            yield from self.visit(child)

    def visit_FactorNode(self, node: FactorNode) -> Iterator[str]:
        yield f"Factor: {node.token.value}"

    def visit_IdentifierNode(self, node: IdentifierNode) -> Iterator[str]:
        yield f"Identifier: {node.token.value}"

    def visit_children(self, node: Node | Token) -> Iterator[str]:
        # Only the node kinds above can be produced by the Parser
        raise TypeError(f"Cannot run a {node.__class__.__name__!r}.")
