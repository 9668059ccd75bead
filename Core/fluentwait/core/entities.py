from __future__ import annotations

from typing import Any, Protocol

from selenium.webdriver.remote.webelement import WebElement


class ElementEntity(Protocol):
    """An element wrapper that resolves its selenium element lazily."""

    async def get_web_element(self) -> WebElement: ...

    def element(self, by: tuple[str, str]) -> ElementEntity: ...

    async def execute_script(self, script: str, *args: Any) -> Any: ...


class CollectionEntity(Protocol):
    async def get_web_elements(self) -> list[WebElement]: ...


class BrowserEntity(Protocol):
    async def current_url(self) -> str: ...

    async def window_handles(self) -> list[str]: ...
