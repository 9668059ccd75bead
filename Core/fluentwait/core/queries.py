from __future__ import annotations

import asyncio

from fluentwait.core.entities import BrowserEntity, CollectionEntity, ElementEntity
from fluentwait.utils.described import Described, described

# Selenium element reads are blocking webdriver calls, so they run in a worker thread.


async def _element_text(element: ElementEntity) -> str:
    web_element = await element.get_web_element()
    return await asyncio.to_thread(lambda: web_element.text)


element_text = described("text", _element_text)


def element_attribute(name: str) -> Described:
    async def read(element: ElementEntity) -> str | None:
        web_element = await element.get_web_element()
        return await asyncio.to_thread(web_element.get_attribute, name)

    return described(f"attribute {name}", read)


async def _collection_size(collection: CollectionEntity) -> int:
    return len(await collection.get_web_elements())


collection_size = described("size", _collection_size)


async def _collection_texts(collection: CollectionEntity) -> list[str]:
    web_elements = await collection.get_web_elements()
    return await asyncio.to_thread(lambda: [item.text for item in web_elements])


collection_texts = described("texts", _collection_texts)


async def _browser_url(browser: BrowserEntity) -> str:
    return await browser.current_url()


browser_url = described("url", _browser_url)


async def _browser_tabs_number(browser: BrowserEntity) -> int:
    return len(await browser.window_handles())


browser_tabs_number = described("tabs number", _browser_tabs_number)
