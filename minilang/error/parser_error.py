from dataclasses import dataclass

from minilang.error.error import CompilerException, UnrecoverableError
from minilang.token import Token
from minilang.type import Type


class ParserException(CompilerException):
    pass


@dataclass
class ParseError(UnrecoverableError):
    got: Token
    # Position of `got` in the token list
    index: int

    stage = ParserException

    def __str__(self) -> str:
        after = f"Expected a term, but got {self.got.type.article_str()}"
        if self.got.type != Type.EOF:
            after += f" {self.got.text!r}"
        after += " instead."

        return self.create_error(
            f"Expected {Type.NUMBER.article_str()} or {Type.IDENTIFIER.article_str()} at token {self.index}.",
            after,
            class_name="SyntaxError",
        )
