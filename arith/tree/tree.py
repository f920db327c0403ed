from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterator, Tuple

from arith.token import Token
from arith.util import Span


# Equality is implemented on Node, as the generated __eq__ recurses once per level,
# and a chain such as `1 + 1 + ... + 1` nests one level per operator
@dataclass(eq=False)
class Node:
    span: Span = field(repr=False, kw_only=True, default=None)

    def __str__(self) -> str:
        from arith.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Node):
            return NotImplemented

        # Compare pairs of nodes using an explicit stack, ignoring the spans
        pairs = [(self, __o)]
        while pairs:
            left, right = pairs.pop()
            if left.__class__ is not right.__class__:
                return False
            for (_, left_child), (_, right_child) in zip(
                left.iter_fields(), right.iter_fields()
            ):
                if isinstance(left_child, Node):
                    pairs.append((left_child, right_child))
                elif left_child != right_child:
                    return False
        return True

    def __contains__(self, element: Node) -> bool:
        stack = [self]
        while stack:
            node = stack.pop()
            if node == element:
                return True
            stack.extend(
                child for _, child in node.iter_fields() if isinstance(child, Node)
            )
        return False

    def iter_fields(self) -> Iterator[Tuple[str, Node | Token]]:
        # Yield the dataclass fields, except for the location information
        for _field in fields(self):
            if _field.name != "span":
                yield _field.name, getattr(self, _field.name)


@dataclass(eq=False)
class NumberNode(Node):
    value: int

    def __post_init__(self) -> None:
        # Negative numbers cannot be written, as there is no unary minus
        if self.value < 0:
            raise ValueError(f"NumberNode value must be non-negative, got {self.value}.")


@dataclass(eq=False)
class BinaryOpNode(Node):
    left: Node
    operator: Token
    right: Node
