"""OS-style error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import errno
from enum import Enum

import msgspec

__all__ = [
    'ErrorKind',
    'IoError',
    'IoException',
    'invalid_input',
]


class ErrorKind(Enum):
    """Classification carried by an :class:`IoError`."""

    INVALID_INPUT = 'invalid_input'
    INVALID_DATA = 'invalid_data'
    OTHER = 'other'

    @property
    def errno(self) -> int:
        """The closest POSIX errno for this kind."""
        if self is ErrorKind.INVALID_INPUT:
            return errno.EINVAL
        return errno.EIO


class IoError(msgspec.Struct, frozen=True, gc=False):
    """OS-style error - struct variant for Result[T, IoError].

    ``str(error)`` gives back the plain diagnostic text.
    """

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> IoException:
        """Convert to exception for raise-based code."""
        return IoException(self.kind, self.message)


class IoException(OSError):
    """OS-style error - exception variant."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(kind.errno, message)

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[type[IoException], tuple[ErrorKind, str]]:
        # args holds (errno, message); rebuild from kind instead.
        return (type(self), (self.kind, self.message))

    def to_struct(self) -> IoError:
        """Convert to struct for Result-based code."""
        return IoError(self.kind, self.message)


def invalid_input(message: object) -> IoError:
    """Wrap a diagnostic as an ``INVALID_INPUT`` error."""
    return IoError(ErrorKind.INVALID_INPUT, str(message))
