import re
from typing import List, Optional, Tuple

from minilang.error.scanner_error import LexError
from minilang.token import EOF_VALUE, Token
from minilang.type import KEYWORDS, Type
from minilang.util import Span


class Scanner:
    def __init__(self, program: str) -> None:
        self.og_program = program

        self.pattern = re.compile(
            r"""
                (?P<NUMBER>[0-9]+)|
                (?P<WORD>[a-zA-Z]+)| # Keyword or identifier
                (?P<OPERATOR>[+\-*/])|
                (?P<SPACE>\ )|
                (?P<ERROR>.)
            """,
            flags=re.X | re.S,
        )

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`.

        The program is scanned left to right in a single pass, and the resulting
        list is always terminated by exactly one EOF token.

        Raises:
            ScannerException: On the first character that cannot start a token.

        Returns:
            List[Token]: A list of Token instances
        """
        tokens = []
        cursor = 0
        while cursor < len(self.og_program):
            token, cursor = self.scan_token(cursor)
            if token is not None:
                tokens.append(token)

        tokens.append(Token(EOF_VALUE, Type.EOF, Span(cursor, cursor)))

        return tokens

    def scan_token(self, cursor: int) -> Tuple[Optional[Token], int]:
        """Scan the maximal token starting at `cursor`.

        Args:
            cursor (int): Offset into the program, must be before its end.

        Returns:
            Tuple[Optional[Token], int]: The token, or None for skipped whitespace,
                and the offset directly after the consumed characters.
        """
        match = self.pattern.match(self.og_program, cursor)
        span = Span(*match.span())
        match match.lastgroup:
            case "SPACE":
                return None, span.end
            case "NUMBER":
                return Token(int(match[0]), Type.NUMBER, span), span.end
            case "WORD":
                token_type = Type.KEYWORD if match[0] in KEYWORDS else Type.IDENTIFIER
                return Token(match[0], token_type, span), span.end
            case "OPERATOR":
                return Token(match[0], Type.OPERATOR, span), span.end
            case _:
                # Raises a ScannerException immediately
                LexError(self.og_program, span)
