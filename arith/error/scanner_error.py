from dataclasses import dataclass

from arith.error.error import ArithError, ArithException
from arith.util import INT_MAX


class ScannerException(ArithException):
    pass


@dataclass
class ScannerError(ArithError):
    stage = ScannerException

    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="ScannerError", after=after)


@dataclass
class UnexpectedCharacterError(ScannerError):
    @property
    def character(self) -> str:
        return self.error_chars

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected character {self.character!r} on {self.span.position_str}."
        )


@dataclass
class NumberOutOfRangeError(ScannerError):
    def __str__(self) -> str:
        return self.create_error(
            f"The number {self.error_chars} on {self.span.position_str} is too large.",
            f"Numbers may be at most {INT_MAX}.",
        )
