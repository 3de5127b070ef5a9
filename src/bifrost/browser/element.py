"""
Element - Operations on a located DOM element.

An element is identified by the web element reference issued by the
remote end and is only valid while its session is open and the node
is attached to the document.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from bifrost.logging import BifrostLogger
from bifrost.models import StringResponse
from bifrost.utils.media import decode_screenshot, save_screenshot_async

if TYPE_CHECKING:
    from bifrost.browser.session import Browser

log = BifrostLogger("bifrost.browser.element")


class Element:
    """
    A web element found by Browser.find_element().

    Usage:
        heading = await browser.find_element(LocatorStrategy.TAG_NAME, "h1")
        print(await heading.text())
        await heading.click()
    """

    def __init__(self, element_id: str, browser: "Browser"):
        self._element_id = element_id
        self._browser = browser

    @property
    def element_id(self) -> str:
        return self._element_id

    @property
    def browser(self) -> "Browser":
        return self._browser

    def _path(self, command: str) -> str:
        return f"/session/{self._browser.session_id}/element/{self._element_id}/{command}"

    async def text(self) -> str:
        """
        Get the rendered text of the element.

        https://www.w3.org/TR/webdriver/#get-element-text
        """
        transport = self._browser.transport
        response = await transport.request("GET", self._path("text"))
        return transport.decode(response, StringResponse).value

    async def click(self) -> None:
        """
        Click the element.

        https://www.w3.org/TR/webdriver/#element-click
        """
        # The request body must be an empty JSON object.
        await self._browser.transport.request("POST", self._path("click"), {})
        log.element("clicked", self._element_id)

    async def take_screenshot(self) -> bytes:
        """
        Capture the element's bounding box as a PNG.

        https://www.w3.org/TR/webdriver/#take-element-screenshot

        Returns:
            PNG image data as bytes
        """
        transport = self._browser.transport
        response = await transport.request("GET", self._path("screenshot"))
        encoded = transport.decode(response, StringResponse).value
        return decode_screenshot(encoded)

    async def save_screenshot(self, path: str | Path) -> Path:
        """Capture the element and write the PNG to path."""
        data = await self.take_screenshot()
        return await save_screenshot_async(data, path)

    def __repr__(self) -> str:
        return f"Element(element_id={self._element_id!r}, session_id={self._browser.session_id!r})"
