from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from arith.type import Type
from arith.util import Span


@dataclass(frozen=True)
class Token:
    text: str
    type: Type = field(repr=False)
    span: Span = field(repr=False, default_factory=Span.default)

    def __post_init__(self) -> None:
        if not isinstance(self.type, Type):
            object.__setattr__(self, "type", Type.to_type(self.type))

        # Only runs of ASCII digits are numbers, so `value` is always a non-negative int
        if self.type == Type.NUMBER and not (
            self.text.isascii() and self.text.isdigit()
        ):
            raise ValueError(f"{self.text!r} is not a valid number token.")

    @classmethod
    def number(cls, value: int, span: Optional[Span] = None) -> Token:
        return cls(str(value), Type.NUMBER, span or Span.default())

    @classmethod
    def of(cls, tok_type: Type, span: Optional[Span] = None) -> Token:
        """Create a token for one of the fixed-text types, e.g. `Token.of(Type.PLUS)`."""
        return cls(tok_type.value, tok_type, span or Span.default())

    @property
    def value(self) -> Optional[int]:
        if self.type == Type.NUMBER:
            return int(self.text)
        return None

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Token):
            return False
        return self.type == __o.type and self.value == __o.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __str__(self) -> str:
        return self.text
