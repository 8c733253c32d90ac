"""
Centralized exception hierarchy for fpbook.

Only programmer errors are raised as exceptions: asking an empty container for
an element, passing an argument a function cannot accept, or loading invalid
settings. Recoverable absence and failure are modelled as values with
``Option`` and ``Either`` instead.
"""

from datetime import UTC, datetime
from typing import TypeAlias

# Type alias for error context data
ErrorContextData: TypeAlias = str | int | float | bool | datetime | None
ErrorContextDict: TypeAlias = dict[str, ErrorContextData]


class FPBookError(Exception):
    """
    Base exception for all fpbook errors.

    Provides a stable error code and structured context for logging.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: ErrorContextDict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.timestamp = datetime.now(UTC)

    def get_error_context(self) -> ErrorContextDict:
        """Get structured error context for logging and debugging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": str(self.context),
            "timestamp": self.timestamp.isoformat(),
        }


class EmptyContainerError(FPBookError):
    """An operation that needs at least one element was given an empty container."""

    def __init__(
        self,
        operation: str,
        container: str = "container",
        message: str | None = None,
        **kwargs: ErrorContextData,
    ):
        super().__init__(
            message or f"Cannot {operation} an empty {container}", **kwargs
        )
        self.operation = operation
        self.container = container

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context.update({"operation": self.operation, "container": self.container})
        return context


class EmptyListError(EmptyContainerError):
    """Operation on an empty ``List``."""

    def __init__(self, operation: str, **kwargs: ErrorContextData):
        super().__init__(operation, container="list", **kwargs)


class EmptyStreamError(EmptyContainerError):
    """Operation on an empty ``Stream``."""

    def __init__(self, operation: str, **kwargs: ErrorContextData):
        super().__init__(operation, container="stream", **kwargs)


class InvalidArgumentError(FPBookError):
    """A function was called with an argument outside its domain."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        invalid_value: ErrorContextData = None,
        **kwargs: ErrorContextData,
    ):
        super().__init__(message, **kwargs)
        self.argument = argument
        self.invalid_value = invalid_value

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context.update(
            {
                "argument": self.argument,
                "invalid_value": (
                    str(self.invalid_value) if self.invalid_value is not None else None
                ),
            }
        )
        return context


class WrappedFailure(FPBookError):
    """
    Wraps a raised value that is not an ``Exception``.

    ``try_either`` uses this to give every ``Left`` it produces the same error
    representation, whatever was actually raised.
    """

    def __init__(self, payload: BaseException):
        super().__init__(str(payload) or payload.__class__.__name__)
        self.payload = payload
        self.__cause__ = payload

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, WrappedFailure)
            and type(self.payload) is type(other.payload)
            and self.payload.args == other.payload.args
        )

    def __hash__(self) -> int:
        return hash((type(self.payload), self.payload.args))


class ConfigurationError(FPBookError):
    """Settings could not be loaded or failed validation."""
