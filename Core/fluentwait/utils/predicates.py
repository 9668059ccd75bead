from __future__ import annotations

from typing import Any, Sequence

from fluentwait.utils.described import Described, described


def equals(expected: Any) -> Described:
    return described(f"equals {expected!r}", lambda actual: actual == expected)


def includes(expected: Any) -> Described:
    return described(f"includes {expected!r}", lambda actual: _includes(actual, expected))


def includes_word(expected: str) -> Described:
    return described(f"includes word {expected!r}", lambda actual: expected in str(actual or "").split())


def _is_truthy(actual: Any) -> bool:
    return bool(actual)


is_truthy = described("is truthy", _is_truthy)


def is_more_than(expected: float) -> Described:
    return described(f"is more than {expected}", lambda actual: actual > expected)


def is_less_than(expected: float) -> Described:
    return described(f"is less than {expected}", lambda actual: actual < expected)


def equals_by_contains_to_array(expected: Sequence[str]) -> Described:
    """Each actual item must contain the expected item at the same index."""

    expected_items = list(expected)

    def matches(actual: Sequence[str]) -> bool:
        actual_items = list(actual)
        if len(actual_items) != len(expected_items):
            return False
        return all(_includes(item, wanted) for item, wanted in zip(actual_items, expected_items))

    return described(f"equals by contains to {expected_items!r}", matches)


def _includes(actual: Any, expected: Any) -> bool:
    if actual is None:
        return False
    return str(expected) in str(actual)
