"""
WebDriver - Entry point for opening browser sessions.

Holds the transport configuration (remote end URL, request timeout) and
opens new sessions on the remote end, e.g. a local chromedriver:

    $ chromedriver --port=9515
"""

import json
import os
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import BaseModel, Field, ValidationError

from bifrost.browser.session import Browser
from bifrost.config import DEFAULT_REMOTE_URL, DEFAULT_TIMEOUT, ENV_REMOTE_URL, ENV_TIMEOUT
from bifrost.exceptions import ConfigurationError, EmptyIdentifierError
from bifrost.logging import BifrostLogger
from bifrost.models import Capabilities, NewSessionResponse
from bifrost.transport import Transport

log = BifrostLogger("bifrost.driver")


class DriverConfig(BaseModel):
    """Configuration for the WebDriver client."""

    remote_url: str = DEFAULT_REMOTE_URL
    timeout: float = DEFAULT_TIMEOUT
    capabilities: Capabilities = Field(default_factory=Capabilities.chrome)

    @classmethod
    def from_env(cls) -> "DriverConfig":
        """Build a config from BIFROST_REMOTE_URL and BIFROST_TIMEOUT."""
        values: dict[str, Any] = {}
        if remote_url := os.environ.get(ENV_REMOTE_URL):
            values["remote_url"] = remote_url
        if timeout := os.environ.get(ENV_TIMEOUT):
            values["timeout"] = timeout
        return cls._validate(values, source="environment")

    @classmethod
    def from_file(cls, path: str | Path) -> "DriverConfig":
        """
        Load a config from a YAML or JSON file.

        Settings are read from a top-level `driver:` section if present,
        otherwise from the top level itself.
        """
        path = Path(path)
        try:
            content = path.read_text()
        except OSError as e:
            raise ConfigurationError(f"can't read config file {path}: {e}") from e

        try:
            data = json.loads(content) if path.suffix == ".json" else yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"can't parse config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"config file {path} must contain a mapping")

        section = data.get("driver", data)
        if not isinstance(section, dict):
            raise ConfigurationError(f"`driver` section of {path} must be a mapping")
        return cls._validate(section, source=str(path))

    @classmethod
    def _validate(cls, values: dict[str, Any], source: str) -> "DriverConfig":
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(f"invalid driver config from {source}: {e}") from e


class WebDriver:
    """
    Manages the connection settings for browser sessions.

    Usage:
        async with new_driver("http://localhost:9515") as driver:
            browser = await driver.open_session()
            await browser.navigate_to("https://example.com/")
            await browser.close()
    """

    def __init__(
        self,
        config: DriverConfig | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or DriverConfig()
        self._transport = Transport(
            self.config.remote_url,
            timeout=self.config.timeout,
            http_transport=http_transport,
        )

    @property
    def transport(self) -> Transport:
        return self._transport

    async def open_session(self, capabilities: Capabilities | None = None) -> Browser:
        """
        Open a new browser session.

        https://www.w3.org/TR/webdriver/#new-session

        Args:
            capabilities: Requested capabilities; defaults to the configured ones

        Raises:
            ProtocolError: If the remote end refuses the session
            DecodeError: If the response body is malformed
            EmptyIdentifierError: If the response carries no session ID
        """
        if capabilities is None:
            capabilities = self.config.capabilities
        response = await self._transport.request("POST", "/session", capabilities.payload())

        value = self._transport.decode(response, NewSessionResponse).value
        if value is None or not value.session_id:
            raise EmptyIdentifierError(
                f"got empty session ID from {self._transport.remote_url}: {response.content[:200]!r}"
            )

        log.session(value.session_id, "opened")
        return Browser(value.session_id, self._transport, value.capabilities)

    async def close(self) -> None:
        """Release the HTTP client. Open sessions are not deleted."""
        await self._transport.close()

    # ===== Context Manager Support =====

    async def __aenter__(self) -> "WebDriver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def new_driver(
    remote_url: str = DEFAULT_REMOTE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> WebDriver:
    """
    Create a WebDriver for the remote end at remote_url.

    Raises:
        ConfigurationError: If remote_url is malformed or timeout is not positive
    """
    return WebDriver(
        DriverConfig(remote_url=remote_url, timeout=timeout),
        http_transport=http_transport,
    )
