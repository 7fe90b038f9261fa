from __future__ import annotations

import contextlib
import dataclasses
import sys
import typing

if typing.TYPE_CHECKING:
    from collections.abc import Generator

__all__ = [
    "ExceptionGroup",
    "InvalidLicenseExpression",
    "LexError",
    "ParserSyntaxError",
    "SpdxException",
]


if sys.version_info >= (3, 11):  # pragma: no cover
    from builtins import ExceptionGroup
else:  # pragma: no cover

    class ExceptionGroup(Exception):
        """A minimal implementation of :external:exc:`ExceptionGroup` from Python 3.11.

        If :external:exc:`ExceptionGroup` is already defined by Python itself,
        that version is used instead.
        """

        message: str
        exceptions: list[Exception]

        def __init__(self, message: str, exceptions: list[Exception]) -> None:
            self.message = message
            self.exceptions = exceptions

        def __repr__(self) -> str:
            return f"{self.__class__.__name__}({self.message!r}, {self.exceptions!r})"


class SpdxException(ValueError):
    """The provided license expression could not be parsed.

    ``span`` is an inclusive ``(start, end)`` pair of character offsets into
    ``source``.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str,
        span: tuple[int, int],
    ) -> None:
        self.span = span
        self.message = message
        self.source = source

        super().__init__()

    @property
    def position(self) -> int:
        return self.span[0]

    def __str__(self) -> str:
        marker = " " * self.span[0] + "^" * (self.span[1] - self.span[0] + 1)
        return "\n    ".join([self.message, self.source, marker])


class LexError(SpdxException):
    """A character outside of the license expression alphabet was found."""

    @property
    def character(self) -> str:
        return self.source[self.position]


class ParserSyntaxError(SpdxException):
    """The tokens of the license expression do not follow the grammar."""


class InvalidLicenseExpression(ValueError):
    """
    A parsed license expression refers to something the license registry does
    not accept, e.g. an unknown or deprecated license identifier.
    """


@dataclasses.dataclass
class _ErrorCollector:
    """
    Collect errors and raise them as a group at the end, instead of stopping at
    the first one.
    """

    errors: list[Exception] = dataclasses.field(default_factory=list, init=False)

    def error(self, error: Exception) -> None:
        """Add an error to the list."""
        self.errors.append(error)

    def finalize(self, msg: str) -> None:
        """Raise a group exception if there are any errors."""
        if self.errors:
            raise ExceptionGroup(msg, self.errors)

    @contextlib.contextmanager
    def on_exit(self, msg: str) -> Generator[_ErrorCollector, None, None]:
        """
        Calls finalize if no uncollected errors were present.

        Uncollected errors are raised normally.
        """
        yield self
        self.finalize(msg)

