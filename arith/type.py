from enum import Enum, auto


class Type(Enum):
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LRB = "("
    RRB = ")"
    NUMBER = auto()
    SPACE = " "
    ERROR = auto()

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.NUMBER:
                return "number"
            case Type.ERROR:
                return "error"
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.ERROR:
                return f"an {self}"
            case _:
                return f"a {self}"
