from __future__ import annotations

from typing import Any


class WaitError(RuntimeError):
    """Base class for failures raised while waiting on an entity."""


class ConditionNotMatchedError(WaitError):
    """Raised when a single condition evaluation does not match."""

    def __init__(self, message: str = "condition not matched") -> None:
        super().__init__(message)


class ActualValueMismatchError(ConditionNotMatchedError):
    """Raised when a queried value is rejected by its predicate."""

    def __init__(self, query_description: str, actual: Any) -> None:
        super().__init__(f"actual {query_description}: {actual}")
        self.query_description = query_description
        self.actual = actual


class WaitTimeoutError(WaitError):
    """Raised when a retried function keeps failing past its deadline."""

    def __init__(
        self,
        timeout: float,
        entity: str,
        description: str,
        cause: BaseException,
    ) -> None:
        self.timeout = timeout
        self.entity = entity
        self.description = description
        self.cause = cause
        self.reason = str(cause)
        super().__init__(
            "\n"
            f"\tTimed out after {timeout}s, while waiting for:\n"
            f"\t{entity}.{description}\n"
            "Reason:\n"
            f"\t{self.reason}"
        )
