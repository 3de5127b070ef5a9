"""
Browser - Session-scoped WebDriver operations.

A Browser wraps one session on the remote end. Every method is a single
HTTP round trip against /session/{session_id}/...; nothing is retried.
"""

import logging
from pathlib import Path
from typing import Any

from bifrost.browser.element import Element
from bifrost.config import LocatorStrategy
from bifrost.exceptions import MissingElementError, RequestConstructionError
from bifrost.logging import BifrostLogger
from bifrost.models import ElementResponse, StringResponse
from bifrost.transport import Transport
from bifrost.utils.media import decode_screenshot, save_screenshot_async

logger = logging.getLogger(__name__)
log = BifrostLogger("bifrost.browser.session")


class Browser:
    """
    A browser opened by WebDriver.open_session().

    Operations on one Browser are not serialized locally; most remote ends
    handle a single command per session at a time, so callers sharing a
    Browser across tasks must serialize their calls.

    Usage:
        async with await driver.open_session() as browser:
            await browser.navigate_to("https://example.com/")
            print(await browser.current_url())
    """

    def __init__(
        self,
        session_id: str,
        transport: Transport,
        capabilities: dict[str, Any] | None = None,
    ):
        self._session_id = session_id
        self._transport = transport
        self._capabilities = capabilities or {}
        self._closed = False

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def capabilities(self) -> dict[str, Any]:
        """Capabilities echoed by the remote end on session creation."""
        return self._capabilities

    @property
    def is_closed(self) -> bool:
        return self._closed

    def _path(self, command: str = "") -> str:
        path = f"/session/{self._session_id}"
        return f"{path}/{command}" if command else path

    async def close(self) -> None:
        """
        Delete the session.

        https://www.w3.org/TR/webdriver/#delete-session
        """
        if self._closed:
            return

        await self._transport.request("DELETE", self._path())
        self._closed = True
        log.session(self._session_id, "closed")

    async def navigate_to(self, url: str) -> None:
        """
        Navigate the current top-level browsing context to url.

        https://www.w3.org/TR/webdriver/#navigate-to
        """
        logger.debug(f"Navigating to {url}")
        await self._transport.request("POST", self._path("url"), {"url": url})

    async def current_url(self) -> str:
        """
        Get the URL of the current top-level browsing context.

        https://www.w3.org/TR/webdriver/#get-current-url
        """
        response = await self._transport.request("GET", self._path("url"))
        return self._transport.decode(response, StringResponse).value

    async def find_element(self, strategy: LocatorStrategy | str, value: str) -> Element:
        """
        Find the first element matching the locator.

        https://www.w3.org/TR/webdriver/#find-element

        Args:
            strategy: Locator strategy, e.g. LocatorStrategy.CSS or "tag name"
            value: Selector understood by the strategy

        Raises:
            RequestConstructionError: If strategy is not a known locator strategy
            MissingElementError: If the response has no web element reference
        """
        try:
            using = LocatorStrategy(strategy)
        except ValueError as e:
            raise RequestConstructionError(f"unknown locator strategy: {strategy!r}") from e

        response = await self._transport.request(
            "POST",
            self._path("element"),
            {"using": using.value, "value": value},
        )

        # {"value": {"element-6066-11e4-a52e-4f735466cecf": "84b10d39-94f5-..."}}
        reference = self._transport.decode(response, ElementResponse).value
        if reference is None or not reference.element_id:
            raise MissingElementError(
                f"got empty element ID for {using.value}={value!r}: {response.content[:200]!r}"
            )

        log.element("found", reference.element_id, f"{using.value}={value}")
        return Element(reference.element_id, self)

    async def take_screenshot(self) -> bytes:
        """
        Capture the current viewport as a PNG.

        https://www.w3.org/TR/webdriver/#take-screenshot

        Returns:
            PNG image data as bytes
        """
        response = await self._transport.request("GET", self._path("screenshot"))
        encoded = self._transport.decode(response, StringResponse).value
        return decode_screenshot(encoded)

    async def save_screenshot(self, path: str | Path) -> Path:
        """Capture the viewport and write the PNG to path."""
        data = await self.take_screenshot()
        return await save_screenshot_async(data, path)

    async def new_window(self) -> None:
        """
        Open a new top-level browsing context (window or tab).

        https://www.w3.org/TR/webdriver/#new-window
        """
        await self._transport.request("POST", self._path("window/new"), {})

    # ===== Context Manager Support =====

    async def __aenter__(self) -> "Browser":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"Browser(session_id={self._session_id!r}, closed={self._closed})"
