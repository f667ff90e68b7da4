"""Exceptions raised by the route database."""

from typing import Optional


class RouteDbError(Exception):
    """Base class for all route database errors."""


class ArchiveError(RouteDbError):
    """The route archive could not be opened or read."""

    def __init__(self, message: str, file: Optional[str] = None):
        super().__init__(message)
        self.file = file


class ParseError(RouteDbError):
    """An archive entry is not a valid GPX document."""

    def __init__(self, file: str, cause: Exception):
        super().__init__(f"Failed to parse {file}: {cause}")
        self.file = file
        self.cause = cause


class StructureError(RouteDbError):
    """A GPX document does not hold exactly one track with one segment."""

    def __init__(self, file: str, expected: int, found: int, what: str = "track"):
        super().__init__(f"In file {file} expected {expected} {what}, found {found}")
        self.file = file
        self.expected = expected
        self.found = found
        self.what = what


class NotFoundError(RouteDbError):
    """No stop matched the search."""

    def __init__(self, message: str = "No stop found matching criteria."):
        super().__init__(message)


class OutOfRangeError(RouteDbError, IndexError):
    """A route index is outside ``[0, count)``."""

    def __init__(self, index: int, count: int):
        super().__init__(f"Route index {index} out of range (0-{count - 1})"
                         if count else f"Route index {index} out of range (no routes)")
        self.index = index
        self.count = count


class EncodingError(RouteDbError, ValueError):
    """A coordinate does not fit the integer width of a binary record."""

    def __init__(self, value: float, bits: int):
        super().__init__(f"Coordinate {value} does not fit in int{bits} micro-degrees")
        self.value = value
        self.bits = bits
