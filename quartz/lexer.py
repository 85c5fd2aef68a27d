"""Character-level tokenizer for Quartz source text."""

import logging
from typing import Optional

from .errors import UnterminatedString
from .types import (
    LParen, Location, RParen, ReaderOptions, StringLiteral, Symbol, Token,
)

logger = logging.getLogger(__name__)

NEUTRAL = "neutral"
IN_SYMBOL = "symbol"
IN_STRING = "string"

QUOTES = ("'", '"')
WHITESPACE = (" ", "\n")


class _ScanState:
    __slots__ = ("mode", "buf", "line", "column", "start", "delim", "tokens")

    def __init__(self):
        self.mode = NEUTRAL
        self.buf: list[str] = []
        self.line = 1
        self.column = 0
        self.start = Location()
        self.delim = ""
        self.tokens: list[Token] = []

    def here(self) -> Location:
        return Location(self.line, self.column)

    def advance(self, ch: str) -> None:
        if ch == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1

    def take(self) -> str:
        text = "".join(self.buf)
        self.buf = []
        return text

    def flush_symbol(self) -> None:
        if self.mode == IN_SYMBOL:
            self.tokens.append(Symbol(self.take(), self.start))
        self.mode = NEUTRAL


def tokenize(source: str, options: Optional[ReaderOptions] = None) -> list[Token]:
    """Split source text into parenthesis, symbol and string literal tokens.

    Each token carries the location where it starts. An unterminated string
    literal is dropped unless ``options.strict_strings`` is set, in which case
    UnterminatedString is raised at its opening quote.
    """
    opts = options or ReaderOptions()
    st = _ScanState()

    for ch in source:
        st.advance(ch)

        if st.mode == IN_STRING:
            if ch == st.delim:
                st.tokens.append(StringLiteral(st.take(), st.start))
                st.mode = NEUTRAL
            else:
                st.buf.append(ch)
            continue

        if ch == "(":
            st.flush_symbol()
            st.tokens.append(LParen(st.here()))
        elif ch == ")":
            st.flush_symbol()
            st.tokens.append(RParen(st.here()))
        elif ch in QUOTES:
            st.flush_symbol()
            st.mode = IN_STRING
            st.delim = ch
            st.start = st.here()
        elif ch in WHITESPACE:
            if st.mode == IN_SYMBOL and st.buf:
                st.flush_symbol()
            st.mode = NEUTRAL
        else:
            if st.mode != IN_SYMBOL:
                st.mode = IN_SYMBOL
                st.start = st.here()
            st.buf.append(ch)

    if st.mode == IN_SYMBOL:
        # Flushed even when empty, unlike the whitespace case above.
        st.tokens.append(Symbol(st.take(), st.start))
    elif st.mode == IN_STRING:
        if opts.strict_strings:
            raise UnterminatedString(st.start)
        logger.debug("dropping unterminated string literal opened at %s", st.start)

    logger.debug("tokenized %d characters into %d tokens", len(source), len(st.tokens))
    return st.tokens
