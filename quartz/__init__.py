from .types import (
    Atom, Exp, List, Location, LParen, Nil, ReaderOptions, RParen,
    StringLiteral, Symbol, Token,
)
from .errors import (
    DepthExceeded, InvalidExpression, MissingClose, ParseError,
    UnexpectedClose, UnterminatedString,
)
from .lexer import tokenize
from .parser import (
    find_exp_end, iter_expressions, parse, parse_expression,
    parse_expressions, read_expressions,
)

__all__ = [
    "tokenize", "parse", "parse_expression", "find_exp_end",
    "iter_expressions", "parse_expressions", "read_expressions",
    "Location", "LParen", "RParen", "Symbol", "StringLiteral", "Token",
    "Nil", "List", "Atom", "Exp", "ReaderOptions",
    "ParseError", "UnexpectedClose", "MissingClose", "InvalidExpression",
    "DepthExceeded", "UnterminatedString",
]
