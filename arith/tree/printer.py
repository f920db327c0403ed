from typing import Iterator, List, Optional, Tuple

from arith.token import Token
from arith.tree.tree import BinaryOpNode, Node, NumberNode
from arith.type import Type
from arith.util import operator_precedence

LEFT_ATTACHED_TOKENS = {
    Type.LRB,  # (
}

RIGHT_ATTACHED_TOKENS = {
    Type.RRB,  # )
}


class Printer:
    """Convert an AST back into expression text.

    By default only the brackets required to preserve the tree structure are printed,
    e.g. `2 * (3 + 4)` or `2 - (3 - 4)`. With `parenthesize=True` every binary
    operation is wrapped in brackets, e.g. `(2 * (3 + 4))`.
    """

    def __init__(self, parenthesize: bool = False) -> None:
        self.parenthesize = parenthesize

    def print(self, tree: Node) -> str:
        program = []
        for token in self.tokens(tree):
            # Remove the last space if this is a tightly bound character, e.g. ')'
            if program and program[-1] == " " and token.type in RIGHT_ATTACHED_TOKENS:
                program.pop()

            program.append(token.text)

            # Print space that follows this token if applicable
            if token.type not in LEFT_ATTACHED_TOKENS:
                program.append(" ")

        return "".join(program).strip()

    def tokens(self, tree: Node) -> Iterator[Token]:
        """Yield the tokens of `tree` from left to right.

        The tree is walked with an explicit stack, as a chain such as `1 + 1 + ... + 1`
        nests one BinaryOpNode per operator, far deeper than the recursion limit.
        """
        # Holds tokens that are ready to be printed, and
        # (node, precedence of the parent operator, whether node is the right operand)
        stack: List[Token | Tuple[Node, Optional[int], bool]] = [(tree, None, False)]
        while stack:
            item = stack.pop()
            if isinstance(item, Token):
                yield item
                continue

            node, previous_precedence, is_right = item
            match node:
                case NumberNode():
                    yield Token.number(node.value)

                case BinaryOpNode():
                    precedence = operator_precedence[node.operator.type]
                    wrap = self.needs_brackets(precedence, previous_precedence, is_right)
                    # Pushed in reverse, so the left operand is printed first
                    if wrap:
                        stack.append(Token.of(Type.RRB))
                    stack.append((node.right, precedence, True))
                    stack.append(Token.of(node.operator.type))
                    stack.append((node.left, precedence, False))
                    if wrap:
                        stack.append(Token.of(Type.LRB))

                case _:
                    raise TypeError(f"Cannot print {node!r}")

    def needs_brackets(
        self, precedence: int, previous_precedence: Optional[int], is_right: bool
    ) -> bool:
        if self.parenthesize:
            return True
        if previous_precedence is None:
            return False
        # All operators are left associative, so an operator of equal precedence
        # only needs brackets when it is the right operand
        return precedence > previous_precedence or (
            precedence == previous_precedence and is_right
        )
