from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

from arith.token import Token
from arith.tree.tree import BinaryOpNode, Node, NumberNode
from arith.type import Type
from arith.util import MAX_NESTING_DEPTH, Span

from arith.error.parser_error import (  # isort:skip
    NestingDepthError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)

# Stack frames used per open bracket: factor -> expression -> term -> factor
FRAMES_PER_LEVEL = 3
# Stack frames left for the caller, and for raising an error at the deepest level
RESERVED_FRAMES = 200


def supported_depth() -> int:
    """The deepest bracket nesting that fits within the recursion limit."""
    return max(0, (sys.getrecursionlimit() - RESERVED_FRAMES) // FRAMES_PER_LEVEL)


@dataclass
class Grammar:
    """Recursive descent over `tokens`, with one rule method per non-terminal:

        expression := term ( ('+' | '-') term )*
        term       := factor ( ('*' | '/') factor )*
        factor     := number | '(' expression ')'
    """

    program: str
    tokens: List[Token]
    max_depth: int = MAX_NESTING_DEPTH

    def __post_init__(self):
        # Pointer used with `self.tokens`, only ever moves forward
        self.i = 0
        # Number of currently open brackets
        self.depth = 0

    @property
    def current(self) -> Optional[Token]:
        if self.i < len(self.tokens):
            return self.tokens[self.i]
        return None

    @property
    def done(self) -> bool:
        return self.i == len(self.tokens)

    @property
    def end_span(self) -> Span:
        # Zero-width span directly after the last token
        if not self.tokens:
            return Span(1, (0, 0))
        last = self.tokens[-1].span
        return Span(last.end_ln, (last.end_col, last.end_col))

    def match_type(self, *tok_types: Type) -> Optional[Token]:
        if self.current is not None and self.current.type in tok_types:
            try:
                return self.current
            finally:
                self.i += 1
        return None

    def expect(self, *tok_types: Type) -> Token:
        token = self.match_type(*tok_types)
        if token is None:
            self.unexpected(tok_types)
        return token

    def unexpected(self, expected: Tuple[Type, ...]) -> None:
        if self.current is None:
            UnexpectedEndOfInputError(self.program, self.end_span, expected)
        UnexpectedTokenError(self.program, self.current.span, self.current, expected)

    def expression(self) -> Node:
        tree = self.term()
        while operator := self.match_type(Type.PLUS, Type.MINUS):
            right = self.term()
            tree = BinaryOpNode(tree, operator, right, span=tree.span & right.span)
        return tree

    def term(self) -> Node:
        tree = self.factor()
        while operator := self.match_type(Type.STAR, Type.SLASH):
            right = self.factor()
            tree = BinaryOpNode(tree, operator, right, span=tree.span & right.span)
        return tree

    def factor(self) -> Node:
        token = self.expect(Type.NUMBER, Type.LRB)
        if token.type == Type.NUMBER:
            return NumberNode(token.value, span=token.span)

        # Refuse to recurse any deeper than allowed, rather than exhausting the stack
        self.depth += 1
        if self.depth > self.max_depth:
            NestingDepthError(self.program, token.span, self.max_depth)

        tree = self.expression()
        self.expect(Type.RRB)
        self.depth -= 1
        return tree
