from dataclasses import dataclass
from typing import List

from minilang.error.communicator import Communicator
from minilang.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class CompilerException(Exception):
    def __init__(self, message: str, errors: List["CompilerError"] = ()) -> None:
        super().__init__(message)
        self.errors = list(errors)

    @property
    def error(self) -> "CompilerError | None":
        return self.errors[0] if self.errors else None


@dataclass
class CompilerError:
    program: str
    span: Span

    def create_error(
        self, before: str = "", after: str = "", class_name="CompilerError"
    ):
        return Communicator.create_message(
            self.program, self.span, class_name, before, after
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        return self.program[self.span.start : self.span.end]


class UnrecoverableError(CompilerError):
    stage = CompilerException

    # Call __post_init__ using dataclass, to immediately raise the error
    # from the stage that created it
    def __post_init__(self) -> None:
        raise self.stage(str(self), [self])
