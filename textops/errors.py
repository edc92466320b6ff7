"""Exception hierarchy shared by the engine and the CLI host."""

from __future__ import annotations


class TextOpsError(Exception):
    """Base class for every error surfaced to the user."""


class UserInputError(TextOpsError):
    """A user-supplied parameter was rejected."""


class InvalidColumnError(UserInputError):
    """Raised when a sort column is not an integer >= 1."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Column number must be an integer greater than 0 (got {value!r})")


class UnrecognizedFormatError(TextOpsError):
    """Raised when text is neither JSON nor YAML."""

    def __init__(self) -> None:
        super().__init__("Cannot recognize text format, make sure it is JSON or YAML")


class UnknownOperationError(TextOpsError):
    """Raised when an operation name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown operation '{name}'")


class OperationFailedError(TextOpsError):
    """Wraps an unexpected exception raised inside an operation."""

    def __init__(self, operation: str, cause: Exception) -> None:
        self.operation = operation
        super().__init__(f"{operation} failed: {cause}")
        self.__cause__ = cause
