from __future__ import annotations

"""
Domain Exception Hierarchy.

Every failure raised by the loading and service layers derives from
SchemaTreeError so that interfaces can report them uniformly.
"""


class SchemaTreeError(Exception):
    """Base class for all application-level failures."""


class InputNotFoundError(SchemaTreeError):
    """The requested input file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f'File "{path}" does not exist.')
        self.path = path


class UnsupportedFormatError(SchemaTreeError):
    """The input format could not be resolved to a known loader."""


class DocumentParseError(SchemaTreeError):
    """
    Malformed document content.

    Attributes:
        fmt: Format name whose parser rejected the content.
    """

    def __init__(self, fmt: str, message: str) -> None:
        super().__init__(f"Invalid {fmt.upper()}: {message}")
        self.fmt = fmt


class DocumentShapeError(SchemaTreeError):
    """The parsed document is not a mapping at the top level."""
