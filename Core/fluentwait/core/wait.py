from __future__ import annotations

import asyncio
import inspect
import logging
from time import monotonic
from typing import Awaitable, Callable, Generic, Iterable, TypeVar

from fluentwait.core.exceptions import ConditionNotMatchedError, WaitTimeoutError
from fluentwait.utils.described import described, describe

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# A query reads something from the entity; it returns a value or raises.
Query = Callable[[T], Awaitable[R]]
# A command performs an action on the entity; it passes or raises.
Command = Callable[[T], Awaitable[None]]
# A condition matches the entity; passing means "matched", raising means "not matched".
Condition = Callable[[T], Awaitable[None]]
FailureHook = Callable[[], Awaitable[None] | None]

DEFAULT_POLL_INTERVAL = 0.01


def not_(condition: Condition[T], description: str | None = None) -> Condition[T]:
    async def negated(entity: T) -> None:
        try:
            await condition(entity)
        except Exception:  # noqa: BLE001 - any failure means the negation holds.
            return
        raise ConditionNotMatchedError()

    return described(description or f"not {describe(condition)}", negated)


def as_predicate(condition: Condition[T]) -> Callable[[T], Awaitable[bool]]:
    """Turns a condition (passes or raises) into an async predicate (True or False)."""

    async def predicate(entity: T) -> bool:
        try:
            await condition(entity)
        except Exception:  # noqa: BLE001
            return False
        return True

    return described(describe(condition), predicate)


class Wait(Generic[T]):
    """Retries async functions against one entity until they pass or time out.

    Each attempt fully completes before the next one starts. Between failed
    attempts the loop sleeps ``poll_interval`` seconds so other tasks can run.
    The deadline is checked only after a failed attempt, so a call may exceed
    its timeout by up to one attempt's duration.
    """

    def __init__(
        self,
        entity: T,
        timeout: float,
        failure_hooks: Iterable[FailureHook] = (),
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        if poll_interval < 0:
            raise ValueError("poll_interval must not be negative")
        self._entity = entity
        self._timeout = timeout
        self._failure_hooks = tuple(failure_hooks)
        self._poll_interval = poll_interval

    @property
    def entity(self) -> T:
        return self._entity

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def failure_hooks(self) -> tuple[FailureHook, ...]:
        return self._failure_hooks

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    async def until(self, fn: Condition[T], timeout: float | None = None) -> bool:
        try:
            await self.query(fn, timeout)
        except Exception:  # noqa: BLE001 - until reports failure as False.
            return False
        return True

    async def command(self, fn: Command[T], timeout: float | None = None) -> None:
        await self.query(fn, timeout)

    async def query(self, fn: Query[T, R], timeout: float | None = None) -> R:
        duration = self._timeout if timeout is None else timeout
        deadline = monotonic() + duration

        while True:
            try:
                return await fn(self._entity)
            except Exception as exc:  # noqa: BLE001 - every failure is retried until the deadline.
                if monotonic() > deadline:
                    description = describe(fn)
                    _LOGGER.debug(
                        "timed out after %ss waiting for %s.%s: %r",
                        duration,
                        self._entity,
                        description,
                        exc,
                    )
                    await self._run_failure_hooks()
                    raise WaitTimeoutError(duration, str(self._entity), description, exc) from exc
            await asyncio.sleep(self._poll_interval)

    async def _run_failure_hooks(self) -> None:
        for hook in self._failure_hooks:
            try:
                result = hook()
                if inspect.isawaitable(result):
                    await result
            except Exception:  # noqa: BLE001 - hook failures are only logged.
                _LOGGER.warning("failure hook %s raised", describe(hook), exc_info=True)

    def __repr__(self) -> str:
        return f"Wait({self._entity!r}, timeout={self._timeout})"
