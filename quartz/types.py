from dataclasses import dataclass, field
from typing import Optional, Union

DEFAULT_MAX_DEPTH = 512


@dataclass(frozen=True)
class Location:
    line: int = 1
    column: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


# Tokens

@dataclass(frozen=True)
class LParen:
    location: Location


@dataclass(frozen=True)
class RParen:
    location: Location


@dataclass(frozen=True)
class Symbol:
    content: str
    location: Location


@dataclass(frozen=True)
class StringLiteral:
    content: str
    location: Location


Token = Union[LParen, RParen, Symbol, StringLiteral]


# Expressions

@dataclass(frozen=True)
class Nil:
    def __str__(self) -> str:
        return "()"


@dataclass(frozen=True)
class List:
    contents: tuple = ()

    def __post_init__(self):
        # Accept any iterable of children but always store a tuple.
        object.__setattr__(self, "contents", tuple(self.contents))

    def __str__(self) -> str:
        return "(" + " ".join(str(c) for c in self.contents) + ")"


@dataclass(frozen=True)
class Atom:
    token: Union[Symbol, StringLiteral]

    def __post_init__(self):
        if not isinstance(self.token, (Symbol, StringLiteral)):
            raise TypeError(f"Atom cannot wrap {type(self.token).__name__}")

    @property
    def location(self) -> Location:
        return self.token.location

    def __str__(self) -> str:
        text = self.token.content
        if isinstance(self.token, Symbol):
            return text
        if '"' in text and "'" not in text:
            return f"'{text}'"
        return f'"{text}"'


Exp = Union[Nil, List, Atom]


@dataclass
class ReaderOptions:
    strict_strings: bool = False
    max_depth: Optional[int] = field(default=DEFAULT_MAX_DEPTH)
