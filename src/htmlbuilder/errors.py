# src/htmlbuilder/errors.py
from typing import Optional


class BuilderError(Exception):
    """Base class for all errors raised by the template builder."""


class MalformedLineError(BuilderError):
    """Raised when a template line does not start with a tag name."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f'HTMLBuilder: unable to parse a line{where}: "{line}"')


class RegistrationError(BuilderError):
    """Raised when an event binding is registered without a name, type or callback."""
