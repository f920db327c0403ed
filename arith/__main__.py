import argparse
import sys
from typing import List, Optional

from arith.error.error import ArithException
from arith.parser.grammar import supported_depth
from arith.parser.parser import Parser
from arith.scanner.scanner import Scanner
from arith.tree.printer import Printer
from arith.util import MAX_NESTING_DEPTH


def _max_depth(value: str) -> int:
    depth = int(value)
    if not 0 <= depth <= supported_depth():
        raise argparse.ArgumentTypeError(
            f"must be between 0 and {supported_depth()}, got {depth}"
        )
    return depth


def _cli(argv: List[str]) -> int:
    """
    Scan and parse a single arithmetic expression, and print the resulting tree.

    Exits with 0 on success and 1 if the expression could not be scanned or parsed.
    """
    ap = argparse.ArgumentParser(
        prog="arith", description="Parse an arithmetic expression"
    )
    ap.add_argument(
        "expression", nargs="?", help="expression to parse, read from stdin if omitted"
    )
    ap.add_argument("--tokens", action="store_true", help="dump token stream and exit")
    ap.add_argument(
        "--parenthesize",
        action="store_true",
        help="wrap every operation in brackets when printing the tree",
    )
    ap.add_argument("--max-depth", type=_max_depth, default=MAX_NESTING_DEPTH)
    args = ap.parse_args(argv)

    program = args.expression
    if program is None:
        print("Insert expression: ", end="", flush=True)
        program = sys.stdin.readline().rstrip("\n")

    try:
        tokens = Scanner(program).scan()
        if args.tokens:
            for token in tokens:
                print(f"{token.type.name} {token.text!r} {token.span.position_str}")
            return 0

        parser = Parser(program, max_depth=args.max_depth)
        tree = parser.parse(tokens)
    except ArithException as exc:
        print(exc, file=sys.stderr)
        return 1

    print(Printer(parenthesize=args.parenthesize).print(tree))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return _cli(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
