from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterator, Optional, Tuple

from minilang.token import Token
from minilang.util import Span


@dataclass(frozen=True)
class Node:
    span: Optional[Span] = field(repr=False, kw_only=True, compare=False, default=None)

    def __str__(self) -> str:
        from minilang.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def iter_fields(self) -> Iterator[Tuple[str, object]]:
        # Yield the dataclass fields, except for the location information
        for _field in fields(self):
            if _field.name != "span":
                yield _field.name, getattr(self, _field.name)


@dataclass(frozen=True)
class ExpressionNode(Node):
    children: Tuple[Node, ...]


@dataclass(frozen=True)
class FactorNode(Node):
    token: Token


@dataclass(frozen=True)
class IdentifierNode(Node):
    token: Token
