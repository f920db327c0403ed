from typing import List

from arith.error.parser_error import InvalidExpressionError
from arith.parser.grammar import Grammar, supported_depth
from arith.token import Token
from arith.tree.tree import Node
from arith.util import MAX_NESTING_DEPTH


class Parser:
    def __init__(self, program: str = "", max_depth: int = MAX_NESTING_DEPTH) -> None:
        self.og_program = program

        # Deeper limits would exhaust the stack before NestingDepthError is raised
        if not 0 <= max_depth <= supported_depth():
            raise ValueError(
                f"max_depth must be between 0 and {supported_depth()}, got {max_depth}."
            )
        self.max_depth = max_depth

    def parse(self, tokens: List[Token]) -> Node:
        """Given a list of Tokens from the scanner, apply the expression grammar
        to produce an Abstract Syntax Tree.

        The first syntax error raises a ParserException, whose `error` attribute
        holds one of UnexpectedTokenError, UnexpectedEndOfInputError,
        InvalidExpressionError or NestingDepthError.

        Args:
            tokens (List[Token]): A list of tokens, produced by `Scanner(program).scan()`

        Returns:
            Node: The root of the AST.
        """
        grammar = Grammar(self.og_program, tokens, self.max_depth)
        tree = grammar.expression()

        # A complete expression was parsed, but not all tokens were used
        if not grammar.done:
            trailing = tokens[grammar.i :]
            InvalidExpressionError(self.og_program, trailing[0].span & trailing[-1].span)

        return tree


def parse(
    tokens: List[Token], program: str = "", max_depth: int = MAX_NESTING_DEPTH
) -> Node:
    """Parse `tokens` into an AST, see `Parser.parse`.

    `program` is the text the tokens were scanned from, and is only used to show
    context in error messages.
    """
    return Parser(program, max_depth).parse(tokens)
