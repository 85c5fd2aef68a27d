"""Syntax errors raised while reading Quartz source."""

from .types import Location


class ParseError(SyntaxError):
    """A structural problem in the source, with the location it was found at."""

    def __init__(self, message: str, location: Location):
        super().__init__(message)
        self.message = message
        self.location = location

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class UnexpectedClose(ParseError):
    def __init__(self, location: Location):
        super().__init__("Unexpected closing parentheses", location)


class MissingClose(ParseError):
    def __init__(self, location: Location):
        super().__init__("Missing closing parentheses", location)


class InvalidExpression(ParseError):
    def __init__(self, location: Location):
        super().__init__("Invalid expression", location)


class DepthExceeded(ParseError):
    def __init__(self, location: Location):
        super().__init__("Maximum nesting depth exceeded", location)


class UnterminatedString(ParseError):
    def __init__(self, location: Location):
        super().__init__("Unterminated string literal", location)
