from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    # Half-open range of character offsets into the program
    start: int
    end: int

    @property
    def offset_str(self) -> str:
        if self.end - self.start > 1:
            return f"offsets [{self.start}-{self.end - 1}]"
        return f"offset {self.start}"

    @classmethod
    def default(cls) -> Span:
        return cls(0, 0)

    def __and__(self, other: Span) -> Span:
        return Span(min(self.start, other.start), max(self.end, other.end))


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
