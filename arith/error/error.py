from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from arith.error.communicator import Communicator
from arith.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class ArithException(Exception):
    def __init__(self, message: str, error: Optional[ArithError] = None) -> None:
        super().__init__(message)
        # The structured error that caused this exception
        self.error = error


@dataclass
class ArithError:
    program: str
    span: Span
    n_before: int = field(init=False, default=1)
    n_after: int = field(init=False, default=1)

    stage = ArithException

    # Call __post_init__ using dataclass, to immediately raise the error on creation
    def __post_init__(self) -> None:
        Communicator.communicate(self)

    def create_error(self, before: str = "", after: str = "", class_name="ArithError"):
        return Communicator.create_message(
            self.program,
            self.span,
            class_name,
            before,
            after,
            self.n_before,
            self.n_after,
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        error_line = self.program.split("\n")[self.span.start_ln - 1]
        return error_line[self.span.start_col : self.span.end_col]
