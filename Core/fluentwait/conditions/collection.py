from __future__ import annotations

from typing import Sequence

from fluentwait.core import queries
from fluentwait.core.conditions import throw_if_not_actual
from fluentwait.core.entities import CollectionEntity
from fluentwait.core.wait import Condition
from fluentwait.utils import predicates
from fluentwait.utils.described import described

CollectionCondition = Condition[CollectionEntity]


def has_size(expected: int) -> CollectionCondition:
    return described(
        f"has size {expected}",
        throw_if_not_actual(queries.collection_size, predicates.equals(expected)),
    )


def has_size_more_than(size: int) -> CollectionCondition:
    return described(
        f"has size more than {size}",
        throw_if_not_actual(queries.collection_size, predicates.is_more_than(size)),
    )


def has_size_less_than(size: int) -> CollectionCondition:
    return described(
        f"has size less than {size}",
        throw_if_not_actual(queries.collection_size, predicates.is_less_than(size)),
    )


def has_texts(texts: Sequence[str]) -> CollectionCondition:
    return described(
        f"has texts {list(texts)}",
        throw_if_not_actual(queries.collection_texts, predicates.equals_by_contains_to_array(texts)),
    )


def has_exact_texts(texts: Sequence[str]) -> CollectionCondition:
    """Unlike has_texts, every text must equal its expected item exactly."""
    return described(
        f"has exact texts (equal, not containing) {list(texts)}",
        throw_if_not_actual(queries.collection_texts, predicates.equals(list(texts))),
    )
