"""
Bifrost - Thin asyncio client for the W3C WebDriver protocol.

Drives a remote end such as chromedriver over HTTP+JSON: open sessions,
navigate, locate elements, interact with them and capture screenshots.

Usage:
    from bifrost import LocatorStrategy, new_driver

    async with new_driver("http://localhost:9515") as driver:
        async with await driver.open_session() as browser:
            await browser.navigate_to("https://example.com/")
            heading = await browser.find_element(LocatorStrategy.TAG_NAME, "h1")
            print(await heading.text())
"""

__version__ = "0.1.0"

from bifrost.browser import Browser, Element
from bifrost.config import LocatorStrategy
from bifrost.driver import DriverConfig, WebDriver, new_driver
from bifrost.exceptions import (
    BifrostError,
    ConfigurationError,
    DecodeError,
    EmptyIdentifierError,
    MissingElementError,
    MissingIdentifierError,
    ProtocolError,
    RequestConstructionError,
    TransportError,
)
from bifrost.logging import logger, setup_logging
from bifrost.models import Capabilities

__all__ = [
    "__version__",
    "WebDriver",
    "DriverConfig",
    "new_driver",
    "Browser",
    "Element",
    "Capabilities",
    "LocatorStrategy",
    "BifrostError",
    "RequestConstructionError",
    "ConfigurationError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
    "MissingIdentifierError",
    "EmptyIdentifierError",
    "MissingElementError",
    "setup_logging",
    "logger",
]
