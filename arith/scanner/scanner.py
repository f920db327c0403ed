import re
from typing import List

from arith.token import Token
from arith.util import INT_MAX, Span

from arith.error.scanner_error import (  # isort:skip
    NumberOutOfRangeError,
    UnexpectedCharacterError,
)

# Number of digits in INT_MAX, used to reject long numbers before converting them
INT_MAX_DIGITS = len(str(INT_MAX))


class Scanner:
    def __init__(self, program: str) -> None:
        self.og_program = program

        self.pattern = re.compile(
            r"""
                (?P<NUMBER>[0-9]+)|
                (?P<PLUS>\+)|
                (?P<MINUS>\-)|
                (?P<STAR>\*)|
                (?P<SLASH>\/)|
                (?P<LRB>\()| # lrb = Left Round Bracket
                (?P<RRB>\))| # rrb = Right Round Bracket
                (?P<SPACE>[\ \t])|
                (?P<ERROR>.)
            """,
            flags=re.X | re.S,
        )

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`.

        Scanning stops at the first illegal character or out-of-range number,
        raising a ScannerException.

        Returns:
            List[Token]: A list of Token instances
        """
        # Only newlines separate lines, other characters such as '\r' are illegal
        lines = self.og_program.split("\n")

        return [
            token
            for line_no, line in enumerate(lines, start=1)
            for token in self.scan_line(line, line_no)
        ]

    def scan_line(self, line: str, line_no: int) -> List[Token]:
        tokens = []
        for match in self.pattern.finditer(line):
            span = Span(line_no, match.span())
            match match.lastgroup:
                case "SPACE":
                    continue
                case "ERROR":
                    UnexpectedCharacterError(self.og_program, span)
                case "NUMBER":
                    self.check_range(match[0], span)

            tokens.append(Token(match[0], match.lastgroup, span))
        return tokens

    def check_range(self, digits: str, span: Span) -> None:
        # Compare the length first, converting very long digit runs to int is slow,
        # and is refused outright by Python beyond a few thousand digits
        significant = digits.lstrip("0")
        if len(significant) > INT_MAX_DIGITS or (
            len(significant) == INT_MAX_DIGITS and int(significant) > INT_MAX
        ):
            NumberOutOfRangeError(self.og_program, span)


def tokenize(program: str) -> List[Token]:
    """Scan `program` into a list of tokens, see `Scanner.scan`."""
    return Scanner(program).scan()
