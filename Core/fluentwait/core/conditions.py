from __future__ import annotations

from typing import Awaitable, Callable, TypeVar

from fluentwait.core.exceptions import ActualValueMismatchError, ConditionNotMatchedError
from fluentwait.core.wait import Condition
from fluentwait.utils.described import described, describe

E = TypeVar("E")
A = TypeVar("A")


def condition_from_async_query(predicate: Callable[[E], Awaitable[bool]]) -> Condition[E]:
    return throw_if_not(describe(predicate), predicate)


def throw_if_not(description: str, predicate: Callable[[E], Awaitable[bool]]) -> Condition[E]:
    """Like condition_from_async_query but labelled with ``description``."""

    async def condition(entity: E) -> None:
        if not await predicate(entity):
            raise ConditionNotMatchedError()

    return described(description, condition)


def throw_if_not_actual(
    query: Callable[[E], Awaitable[A]],
    predicate: Callable[[A], bool],
) -> Condition[E]:
    """Compares the value read by ``query`` through ``predicate``.

    Example: ``throw_if_not_actual(queries.element.text, predicates.equals("Login"))``
    """

    async def condition(entity: E) -> None:
        actual = await query(entity)
        if not predicate(actual):
            raise ActualValueMismatchError(describe(query), actual)

    return described(f"{describe(query)} {describe(predicate)}", condition)
