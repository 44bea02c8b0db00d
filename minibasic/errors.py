from typing import Optional
from minibasic.types import ErrorVal


class BasicError(Exception):
    """Exception type used to propagate minibasic runtime errors."""
    def __init__(self, err: ErrorVal, line_number: Optional[int] = None):
        message = f"BasicError: {err.name}: {err.message}"
        if line_number is not None:
            message += f" (line {line_number})"
        super().__init__(message)
        self.err = err
        self.line_number = line_number


class ParseError(Exception):
    """Raised when source text does not match the grammar.

    `line` is the 1-based source line, `column` the 1-based character
    position within it, and `expected` describes what the grammar wanted
    at that point.
    """
    def __init__(self, expected: str, line: int, column: int, found: Optional[str] = None):
        got = 'end of line' if found is None else repr(found)
        super().__init__(f"expected {expected} at {line}:{column}, got {got}")
        self.expected = expected
        self.line = line
        self.column = column
        self.found = found
