from arith.error.error import ArithException
from arith.error.parser_error import ParserException
from arith.error.scanner_error import ScannerException
from arith.parser.parser import Parser, parse
from arith.scanner.scanner import Scanner, tokenize
from arith.token import Token
from arith.tree.printer import Printer
from arith.tree.tree import BinaryOpNode, Node, NumberNode
from arith.type import Type
