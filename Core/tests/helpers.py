from __future__ import annotations

import asyncio
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator

import pytest
from selenium import webdriver
from selenium.common.exceptions import NoSuchElementException, WebDriverException
from selenium.webdriver import ChromeOptions
from selenium.webdriver.common.by import By


@dataclass
class FakeWebElement:
    """Stands in for a selenium WebElement with mutable state."""

    text: str = ""
    displayed: bool = True
    enabled: bool = True
    selected: bool = False
    attributes: dict[str, str] = field(default_factory=dict)

    def is_displayed(self) -> bool:
        return self.displayed

    def is_enabled(self) -> bool:
        return self.enabled

    def is_selected(self) -> bool:
        return self.selected

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)


class FakeElement:
    def __init__(self, web_element: FakeWebElement | None = None, name: str = "element") -> None:
        self.web_element = web_element
        self.name = name
        self.children: dict[tuple[str, str], FakeElement] = {}
        self.active_element: Any = None
        self.lookups = 0

    async def get_web_element(self) -> FakeWebElement:
        self.lookups += 1
        if self.web_element is None:
            raise NoSuchElementException(f"no such element: {self.name}")
        return self.web_element

    def element(self, by: tuple[str, str]) -> FakeElement:
        return self.children.setdefault(by, FakeElement(name=f"{self.name}.element({by})"))

    async def execute_script(self, script: str, *args: Any) -> Any:
        return self.active_element

    def __str__(self) -> str:
        return f"browser.element({self.name})"


class FakeCollection:
    def __init__(self, *texts: str, name: str = "collection") -> None:
        self.web_elements = [FakeWebElement(text=text) for text in texts]
        self.name = name

    async def get_web_elements(self) -> list[FakeWebElement]:
        return list(self.web_elements)

    def __str__(self) -> str:
        return f"browser.all({self.name})"


class FakeBrowser:
    def __init__(self, url: str = "about:blank", tabs: int = 1) -> None:
        self.url = url
        self.handles = [f"tab-{index}" for index in range(tabs)]

    async def current_url(self) -> str:
        return self.url

    async def window_handles(self) -> list[str]:
        return list(self.handles)

    def __str__(self) -> str:
        return "browser"


def later(delay: float, callback, *args) -> asyncio.TimerHandle:
    """Schedules a state change on the running loop after ``delay`` seconds."""

    return asyncio.get_running_loop().call_later(delay, callback, *args)


class SeleniumElement:
    """Minimal element wrapper over a live driver, used by integration tests."""

    def __init__(self, driver, by: tuple[str, str]) -> None:
        self.driver = driver
        self.by = by

    async def get_web_element(self):
        return await asyncio.to_thread(self.driver.find_element, *self.by)

    def element(self, by: tuple[str, str]) -> SeleniumElement:
        return SeleniumElement(self.driver, by)

    async def execute_script(self, script: str, *args: Any) -> Any:
        return await asyncio.to_thread(self.driver.execute_script, script, *args)

    def __str__(self) -> str:
        return f"browser.element({self.by[1]})"


def css(selector: str) -> tuple[str, str]:
    return (By.CSS_SELECTOR, selector)


@contextmanager
def managed_driver() -> Iterator[Any]:
    options = ChromeOptions()
    options.add_argument("--headless=new")
    options.add_argument("--window-size=1440,1200")
    try:
        driver = webdriver.Chrome(options=options)
    except WebDriverException as exc:
        pytest.skip(f"WebDriver could not start for chrome: {exc}")
    driver.implicitly_wait(0)
    try:
        yield driver
    finally:
        driver.quit()


def open_page_with_body(driver, body: str) -> None:
    driver.get("about:blank")
    driver.execute_script("document.body.innerHTML = arguments[0];", body)


def execute_script_with_timeout(driver, script: str, delay_seconds: float) -> None:
    driver.execute_script(
        "var code = arguments[0]; setTimeout(function () { eval(code); }, arguments[1]);",
        script,
        int(delay_seconds * 1000),
    )
