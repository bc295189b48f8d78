from typing import List, Tuple

from minilang.error.parser_error import ParseError
from minilang.token import Token
from minilang.type import Type
from minilang.util import Span

from minilang.tree.tree import (  # isort:skip
    ExpressionNode,
    FactorNode,
    IdentifierNode,
    Node,
)


class Parser:
    def __init__(self, program: str) -> None:
        self.og_program = program

    def parse(self, tokens: List[Token]) -> ExpressionNode:
        """Given a list of Tokens from the scanner, produce the root Expression node
        holding one child per term.

        Args:
            tokens (List[Token]): A list of tokens, produced by `Scanner(program).scan()`

        Raises:
            ParserException: On the first token that cannot start a term.

        Returns:
            ExpressionNode: The root of the tree.
        """
        tree, _cursor = self.parse_expression(tokens, 0)
        return tree

    def parse_expression(
        self, tokens: List[Token], cursor: int
    ) -> Tuple[ExpressionNode, int]:
        children = []
        while cursor < len(tokens) and tokens[cursor].type != Type.EOF:
            child, cursor = self.parse_term(tokens, cursor)
            children.append(child)

        # The EOF token is not consumed, but it does locate an empty expression
        if children:
            span = children[0].span & children[-1].span
        elif cursor < len(tokens):
            span = tokens[cursor].span
        else:
            span = Span.default()
        return ExpressionNode(tuple(children), span=span), cursor

    def parse_term(self, tokens: List[Token], cursor: int) -> Tuple[Node, int]:
        token = tokens[cursor]
        match token.type:
            case Type.NUMBER:
                return FactorNode(token, span=token.span), cursor + 1
            case Type.IDENTIFIER:
                return IdentifierNode(token, span=token.span), cursor + 1
            case _:
                # Operators are scanned, but no rule consumes them,
                # so "2 + 3" fails here on the "+"
                ParseError(self.og_program, token.span, token, cursor)
