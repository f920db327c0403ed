from dataclasses import dataclass, field
from typing import Tuple

from arith.error.error import ArithError, ArithException
from arith.token import Token
from arith.type import Type


class ParserException(ArithException):
    pass


@dataclass
class ParseError(ArithError):
    stage = ParserException

    def create_error(self, before: str, after: str = ""):
        return super().create_error(before, after, class_name="SyntaxError")

    @property
    def expected_str(self) -> str:
        return " or ".join(tok_type.article_str() for tok_type in self.expected)


@dataclass
class UnexpectedTokenError(ParseError):
    token: Token
    expected: Tuple[Type, ...] = field(default=(Type.NUMBER, Type.LRB))

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected token {self.token.text!r} on {self.span.position_str}.",
            f"Expected {self.expected_str}, but got {self.token.type.article_str()} instead.",
        )


@dataclass
class UnexpectedEndOfInputError(ParseError):
    expected: Tuple[Type, ...] = field(default=(Type.NUMBER, Type.LRB))

    def __str__(self) -> str:
        return self.create_error(
            "Unexpected end of input.",
            f"Expected {self.expected_str}, but the expression ended.",
        )


@dataclass
class InvalidExpressionError(ParseError):
    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected input after the end of the expression on {self.span.position_str}."
        )


@dataclass
class NestingDepthError(ParseError):
    max_depth: int

    def __str__(self) -> str:
        return self.create_error(
            f"The bracket on {self.span.position_str} is nested too deeply.",
            f"Brackets may be nested at most {self.max_depth} levels deep.",
        )
