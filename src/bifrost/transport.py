"""
Transport - HTTP round trips against the WebDriver remote end.

Owns the remote end URL and a reusable httpx.AsyncClient with a fixed
per-request timeout. Every protocol command goes through `request()`,
which maps failures onto the Bifrost error taxonomy, and responses are
decoded into typed envelopes with `decode()`.
"""

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from bifrost.config import DEFAULT_TIMEOUT
from bifrost.exceptions import (
    ConfigurationError,
    DecodeError,
    ProtocolError,
    RequestConstructionError,
    TransportError,
)
from bifrost.logging import BifrostLogger

logger = logging.getLogger(__name__)
wire = BifrostLogger("bifrost.transport")

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)


def parse_remote_url(remote_url: str) -> httpx.URL:
    """
    Validate the remote end URL.

    Raises:
        ConfigurationError: If the URL is malformed or not http(s)
    """
    try:
        url = httpx.URL(remote_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigurationError(f"malformed remote end URL {remote_url!r}: {e}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"remote end URL must be an absolute http(s) URL: {remote_url!r}")
    return url


class Transport:
    """
    Remote end endpoint plus the HTTP client used to reach it.

    Usage:
        transport = Transport("http://localhost:9515", timeout=30.0)
        response = await transport.request("GET", "/session/abc/url")
        url = transport.decode(response, StringResponse).value
        await transport.close()
    """

    def __init__(
        self,
        remote_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        if timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout}")

        self._remote_url = parse_remote_url(remote_url)
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self._remote_url,
            timeout=timeout,
            transport=http_transport,
        )

    @property
    def remote_url(self) -> str:
        return str(self._remote_url).rstrip("/")

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Send one command and return the response if its status is 200.

        Args:
            method: HTTP method
            path: Path relative to the remote end URL
            payload: JSON body, if the command takes one

        Raises:
            RequestConstructionError: If the payload cannot be serialized
            TransportError: On network failure or timeout
            ProtocolError: If the status code is not 200
        """
        content: bytes | None = None
        headers: dict[str, str] = {}
        if payload is not None:
            try:
                content = json.dumps(payload).encode()
            except (TypeError, ValueError) as e:
                raise RequestConstructionError(f"can't marshal json body: {e}") from e
            headers["Content-Type"] = "application/json; charset=utf-8"

        wire.request(method, path, payload)
        try:
            response = await self._client.request(method, path, content=content, headers=headers)
        except httpx.TimeoutException as e:
            raise TransportError(f"{method} {path} timed out after {self._timeout}s") from e
        except httpx.HTTPError as e:
            raise TransportError(f"got http response error: {e}") from e

        wire.response(method, path, response.status_code)

        # Error bodies are not decoded into WebDriver error objects.
        # https://www.w3.org/TR/webdriver/#errors
        if response.status_code != 200:
            raise ProtocolError(method, str(response.url), response.status_code, response.content)

        return response

    def decode(self, response: httpx.Response, envelope: type[EnvelopeT]) -> EnvelopeT:
        """
        Decode a response body into a typed envelope.

        Raises:
            DecodeError: If the body is not JSON or does not match the envelope
        """
        try:
            return envelope.model_validate_json(response.content)
        except ValidationError as e:
            logger.debug(f"Undecodable response body: {response.content[:200]!r}")
            raise DecodeError(f"can't decode response: {e}", response.content) from e

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
