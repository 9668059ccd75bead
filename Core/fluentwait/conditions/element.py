from __future__ import annotations

import asyncio

from fluentwait.core import queries
from fluentwait.core.conditions import throw_if_not, throw_if_not_actual
from fluentwait.core.entities import ElementEntity
from fluentwait.core.wait import Condition, not_
from fluentwait.utils import predicates
from fluentwait.utils.described import described

ElementCondition = Condition[ElementEntity]


async def _is_displayed(element: ElementEntity) -> bool:
    web_element = await element.get_web_element()
    return await asyncio.to_thread(web_element.is_displayed)


async def _is_enabled(element: ElementEntity) -> bool:
    web_element = await element.get_web_element()
    return await asyncio.to_thread(web_element.is_enabled)


async def _is_selected(element: ElementEntity) -> bool:
    web_element = await element.get_web_element()
    return await asyncio.to_thread(web_element.is_selected)


async def _is_present(element: ElementEntity) -> bool:
    return bool(await element.get_web_element())


async def _is_focused(element: ElementEntity) -> bool:
    active = await element.execute_script("return document.activeElement")
    return active == await element.get_web_element()


is_visible: ElementCondition = throw_if_not("is visible", _is_displayed)

is_hidden: ElementCondition = not_(is_visible, "is hidden")

is_enabled: ElementCondition = throw_if_not("is enabled", _is_enabled)

is_disabled: ElementCondition = not_(is_enabled, "is disabled")

is_present: ElementCondition = throw_if_not("is present", _is_present)

is_absent: ElementCondition = not_(is_present, "is absent")

is_selected: ElementCondition = throw_if_not("is selected", _is_selected)

is_focused: ElementCondition = throw_if_not("is focused", _is_focused)


def has_visible_element(by: tuple[str, str]) -> ElementCondition:
    async def inner_is_displayed(element: ElementEntity) -> bool:
        return await _is_displayed(element.element(by))

    return throw_if_not(f"has visible element located by {by}", inner_is_displayed)


def has_attribute(name: str) -> ElementCondition:
    return described(
        f"has attribute '{name}'",
        throw_if_not_actual(queries.element_attribute(name), predicates.is_truthy),
    )


def has_text(expected: str) -> ElementCondition:
    return described(
        f"has text: {expected}",
        throw_if_not_actual(queries.element_text, predicates.includes(expected)),
    )


def has_exact_text(expected: str) -> ElementCondition:
    return described(
        f"has exact text: {expected}",
        throw_if_not_actual(queries.element_text, predicates.equals(expected)),
    )


def has_attribute_with_value(name: str, value: str) -> ElementCondition:
    return described(
        f"has attribute '{name}' with value '{value}'",
        throw_if_not_actual(queries.element_attribute(name), predicates.equals(value)),
    )


def has_attribute_with_value_containing(name: str, partial_value: str) -> ElementCondition:
    return described(
        f"has attribute '{name}' with value containing '{partial_value}'",
        throw_if_not_actual(queries.element_attribute(name), predicates.includes(partial_value)),
    )


def has_css_class(css_class: str) -> ElementCondition:
    return described(
        f"has css class '{css_class}'",
        throw_if_not_actual(queries.element_attribute("class"), predicates.includes_word(css_class)),
    )
