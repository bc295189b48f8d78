from minilang.error.error import CompilerException, UnrecoverableError


class ScannerException(CompilerException):
    pass


class LexError(UnrecoverableError):
    stage = ScannerException

    @property
    def char(self) -> str:
        return self.error_chars

    @property
    def offset(self) -> int:
        return self.span.start

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected character {self.char!r} at {self.span.offset_str}.",
            class_name="ScannerError",
        )
