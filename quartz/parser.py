"""Recursive parser that rebuilds S-expression trees from a token sequence."""

import logging
from typing import Iterator, Optional, Sequence

from .errors import DepthExceeded, InvalidExpression, MissingClose, UnexpectedClose
from .lexer import tokenize
from .types import (
    Atom, Exp, List, Location, LParen, Nil, ReaderOptions, RParen, Token,
)

logger = logging.getLogger(__name__)


def find_exp_end(tokens: Sequence[Token], start: int) -> int:
    """Return the index of the RParen matching the LParen at ``start``."""
    nesting = 0
    location = tokens[start].location if start < len(tokens) else Location()
    for i in range(start, len(tokens)):
        t = tokens[i]
        location = t.location
        if isinstance(t, LParen):
            nesting += 1
        elif isinstance(t, RParen):
            if nesting == 0:
                raise UnexpectedClose(location)
            nesting -= 1
            if nesting == 0:
                return i
    raise MissingClose(location)


def parse_expression(
    tokens: Sequence[Token],
    start: int = 0,
    end: Optional[int] = None,
    options: Optional[ReaderOptions] = None,
) -> Exp:
    """Parse ``tokens[start:end]`` into a single expression.

    ``end`` is the sequence length for a whole-input parse (the default) or
    the index of the RParen closing the group that starts at ``start``.
    Several groups in a whole-input range are merged into one List.
    """
    if end is None:
        end = len(tokens)
    return _parse_range(tokens, start, end, options or ReaderOptions(), 0)


def _parse_range(
    tokens: Sequence[Token], start: int, end: int, opts: ReaderOptions, depth: int,
) -> Exp:
    contents: list[Exp] = []
    nested = False
    location = Location()
    i = start
    while i <= end and i < len(tokens):
        t = tokens[i]
        location = t.location
        if isinstance(t, LParen):
            if not nested:
                if opts.max_depth is not None and depth + 1 > opts.max_depth:
                    raise DepthExceeded(location)
                nested = True
            else:
                try:
                    inner_end = find_exp_end(tokens, i)
                    contents.append(_parse_range(tokens, i, inner_end, opts, depth + 1))
                except RecursionError:
                    # Unbounded max_depth still ends at the interpreter's stack.
                    raise DepthExceeded(location) from None
                i = inner_end
                location = tokens[i].location
        elif isinstance(t, RParen):
            if not nested:
                raise UnexpectedClose(location)
            nested = False
        elif nested:
            contents.append(Atom(t))
        elif end - start > 1:
            # A bare atom only stands alone in a one-token range; blame the
            # first token that shows this range holds more.
            if i == start and i + 1 < len(tokens):
                following = tokens[i + 1]
                if isinstance(following, RParen):
                    raise UnexpectedClose(following.location)
                location = following.location
            raise InvalidExpression(location)
        else:
            return Atom(t)
        i += 1

    if nested:
        raise MissingClose(location)
    if not contents:
        return Nil()
    return List(contents)


def iter_expressions(
    tokens: Sequence[Token], options: Optional[ReaderOptions] = None,
) -> Iterator[Exp]:
    """Yield each top-level form of ``tokens`` in order.

    Forms already yielded stay valid if a later form raises.
    """
    opts = options or ReaderOptions()
    depth = 0
    begin = 0
    for i, t in enumerate(tokens):
        if isinstance(t, LParen):
            if depth == 0:
                begin = i
            depth += 1
        elif isinstance(t, RParen) and depth > 0:
            depth -= 1
            if depth == 0:
                yield _parse_top_level(tokens, begin, i, opts)
        elif depth == 0:
            # A bare atom, or a stray close which fails as UnexpectedClose.
            yield _parse_top_level(tokens, i, i + 1, opts)

    if depth > 0:
        # The trailing group never closed; parsing it raises MissingClose.
        _parse_range(tokens, begin, len(tokens), opts, 0)


def _parse_top_level(
    tokens: Sequence[Token], start: int, end: int, opts: ReaderOptions,
) -> Exp:
    exp = _parse_range(tokens, start, end, opts, 0)
    logger.debug("parsed top-level form at %s", tokens[start].location)
    return exp


def parse_expressions(
    tokens: Sequence[Token], options: Optional[ReaderOptions] = None,
) -> list[Exp]:
    return list(iter_expressions(tokens, options))


def read_expressions(source: str, options: Optional[ReaderOptions] = None) -> list[Exp]:
    """Tokenize and parse source text into its top-level forms."""
    return parse_expressions(tokenize(source, options), options)


def parse(source: str, options: Optional[ReaderOptions] = None) -> Exp:
    """Parse a whole Quartz source string into one expression."""
    return parse_expression(tokenize(source, options), options=options)
