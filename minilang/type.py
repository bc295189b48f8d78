from enum import Enum, auto

KEYWORDS = frozenset({"if", "then", "else", "while", "do"})


class Type(Enum):
    KEYWORD = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    OPERATOR = auto()
    EOF = auto()

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.EOF:
                return "end of input"
        return self.name.lower()

    def article_str(self) -> str:
        match self:
            case Type.EOF:
                return f"the {self}"
            case Type.IDENTIFIER | Type.OPERATOR:
                return f"an {self}"
            case _:
                return f"a {self}"
