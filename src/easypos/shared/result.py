"""Outcome of a command: a success or a typed error, never an exception."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorType(Enum):
    """Kinds of errors a command can report."""

    VALIDATION = "Validation"
    FAILURE = "Failure"


@dataclass(frozen=True)
class Success:
    """Command completed. ``value`` is None for commands without a payload."""

    value: Any = None

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Error:
    """Command was rejected (validation) or could not complete (failure).

    ``code`` is scoped to the offending field or operation, for example
    ``Customer.PhoneNumber`` or ``CreateCustomer.Failure``.
    """

    code: str
    description: str
    type: ErrorType

    @property
    def is_error(self) -> bool:
        return True

    @classmethod
    def validation(cls, code: str, description: str) -> "Error":
        return cls(code=code, description=description, type=ErrorType.VALIDATION)

    @classmethod
    def failure(cls, code: str, description: str) -> "Error":
        return cls(code=code, description=description, type=ErrorType.FAILURE)


Result = Success | Error
