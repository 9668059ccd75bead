from __future__ import annotations

from fluentwait.core import queries
from fluentwait.core.conditions import throw_if_not_actual
from fluentwait.core.entities import BrowserEntity
from fluentwait.core.wait import Condition
from fluentwait.utils import predicates
from fluentwait.utils.described import described

BrowserCondition = Condition[BrowserEntity]


def has_url_containing(partial_url: str) -> BrowserCondition:
    return described(
        f"has url containing {partial_url}",
        throw_if_not_actual(queries.browser_url, predicates.includes(partial_url)),
    )


def has_url(url: str) -> BrowserCondition:
    return described(
        f"has url {url}",
        throw_if_not_actual(queries.browser_url, predicates.equals(url)),
    )


def has_tabs_number(number: int) -> BrowserCondition:
    return described(
        f"has tabs number {number}",
        throw_if_not_actual(queries.browser_tabs_number, predicates.equals(number)),
    )


def has_tabs_number_more_than(number: int) -> BrowserCondition:
    return described(
        f"has tabs number more than {number}",
        throw_if_not_actual(queries.browser_tabs_number, predicates.is_more_than(number)),
    )


def has_tabs_number_less_than(number: int) -> BrowserCondition:
    return described(
        f"has tabs number less than {number}",
        throw_if_not_actual(queries.browser_tabs_number, predicates.is_less_than(number)),
    )
