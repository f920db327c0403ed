from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from arith.type import Type


@dataclass
class Span:
    ln: Tuple[int, int]
    col: Tuple[int, int]

    @property
    def start_ln(self) -> int:
        return self.ln[0]

    @property
    def end_ln(self) -> int:
        return self.ln[1]

    @property
    def start_col(self) -> int:
        return self.col[0]

    @property
    def end_col(self) -> int:
        return self.col[1]

    @property
    def multiline(self) -> bool:
        return self.start_ln != self.end_ln

    @property
    def known(self) -> bool:
        # Tokens constructed by hand rather than by the Scanner have no position
        return self.start_ln > 0

    @property
    def lines_str(self) -> str:
        if self.multiline:
            return f"lines [{self.start_ln}-{self.end_ln}]"
        return f"line [{self.start_ln}]"

    @property
    def position_str(self) -> str:
        if not self.known:
            return "an unknown position"
        return f"{self.lines_str} column [{self.start_col}]"

    @classmethod
    def default(cls):
        return cls(-1, (0, -1))

    def __init__(self, line_no: int | Tuple[int, int], span: Tuple[int, int]) -> None:
        if isinstance(line_no, int):
            self.ln = (line_no, line_no)
        else:
            self.ln = line_no
        self.col = span

    def __and__(self, other: Span) -> Span:
        # Determine the correct columns based on the starting line
        if self.start_ln < other.start_ln:
            col = (self.start_col, other.end_col)
        elif self.start_ln > other.start_ln:
            col = (other.start_col, self.end_col)
        else:
            col = (
                min(self.start_col, other.start_col),
                max(self.end_col, other.end_col),
            )

        return Span(
            line_no=(
                min(self.start_ln, other.start_ln),
                max(self.end_ln, other.end_ln),
            ),
            span=col,
        )


# Largest value a number literal may hold, i.e. that of a signed 64-bit integer
INT_MAX = 2**63 - 1

# Default limit on how deeply parentheses may be nested
MAX_NESTING_DEPTH = 128

BINARY_OPERATORS = (Type.PLUS, Type.MINUS, Type.STAR, Type.SLASH)

# Lower binds tighter
operator_precedence = {
    Type.PLUS: 6,
    Type.MINUS: 6,
    Type.STAR: 5,
    Type.SLASH: 5,
}


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"
