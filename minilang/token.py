from __future__ import annotations

from dataclasses import dataclass, field

from minilang.type import Type
from minilang.util import Span

EOF_VALUE = "EOF"


@dataclass(frozen=True)
class Token:
    value: str | int
    type: Type
    span: Span = field(repr=False, compare=False, default_factory=Span.default)

    def __post_init__(self) -> None:
        if not isinstance(self.type, Type):
            # Frozen, so bypass the dataclass __setattr__
            object.__setattr__(self, "type", Type.to_type(self.type))

    @property
    def text(self) -> str:
        if self.type == Type.EOF:
            return ""
        return str(self.value)

    def __str__(self) -> str:
        return str(self.value)
