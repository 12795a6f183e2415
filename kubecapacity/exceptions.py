"""Exceptions raised by the accounting engine."""

from __future__ import annotations


class AccountingError(Exception):
    """Base exception for resource accounting errors."""


class ExtractionError(AccountingError):
    """Base exception for errors decoding a raw entity."""

    def __init__(self, message: str, entity: str | None = None) -> None:
        self.entity = entity
        if entity:
            message = f"{entity}: {message}"
        super().__init__(message)


class MalformedQuantityError(ExtractionError, ValueError):
    """A quantity string does not match the grammar for its resource kind."""

    def __init__(
        self, value: object, kind: str | None = None, entity: str | None = None
    ) -> None:
        self.value = value
        self.kind = kind
        label = f"{kind} quantity" if kind else "quantity"
        super().__init__(f"malformed {label} {value!r}", entity)


class MissingRequiredFieldError(ExtractionError, KeyError):
    """A required attribute path is absent from a raw entity."""

    def __init__(self, path: tuple[str, ...], entity: str | None = None) -> None:
        self.path = path
        super().__init__(f"missing required field {'.'.join(path)}", entity)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class MalformedEntityError(ExtractionError, TypeError):
    """A raw entity has an attribute of the wrong shape."""


class DuplicateEntityError(ExtractionError, ValueError):
    """Two entities of one batch share a name."""

    def __init__(self, kind: str, entity: str) -> None:
        self.kind = kind
        super().__init__(f"duplicate {kind} name", entity)


class UnknownResourceKindError(AccountingError, ValueError):
    """A resource kind outside cpu, memory and pods was requested."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"unknown resource kind {kind!r}")


class ZeroAllocatableError(AccountingError, ZeroDivisionError):
    """A percentage was computed against zero allocatable."""

    def __init__(self, amount: float) -> None:
        self.amount = amount
        super().__init__(f"cannot express {amount} as a percentage of zero allocatable")
