"""Shared fixtures: an in-memory WebDriver remote end served through httpx.MockTransport."""

import json

import httpx
import pytest

from bifrost.browser import Browser
from bifrost.config import WEB_ELEMENT_IDENTIFIER
from bifrost.driver import DriverConfig, WebDriver

REMOTE_URL = "http://localhost:9515"
SESSION_ID = "15f0a07b906057033a40c9946005c86d"
H1_ELEMENT_ID = "84b10d39-94f5-4768-8457-dd218597a1e5"


class StubRemoteEnd:
    """
    Minimal remote end answering the commands Bifrost issues.

    Set `overrides[(method, path)]` to force a canned response for one command.
    """

    def __init__(self):
        self.session_id = SESSION_ID
        self.current_url = "about:blank"
        self.screenshot = "aGVsbG8="
        self.elements: dict[tuple[str, str], str] = {("tag name", "h1"): H1_ELEMENT_ID}
        self.texts: dict[str, str] = {H1_ELEMENT_ID: "Example Domain"}
        self.windows = 1
        self.clicked: list[str] = []
        self.deleted = False
        self.overrides: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        override = self.overrides.get((request.method, request.url.path))
        if override is not None:
            return override

        parts = request.url.path.strip("/").split("/")

        if parts == ["session"] and request.method == "POST":
            return self._value({"sessionId": self.session_id, "capabilities": {"browserName": "chrome"}})

        if len(parts) < 2 or parts[0] != "session" or parts[1] != self.session_id:
            return self._error(404, "invalid session id")

        command = parts[2:]
        if command == [] and request.method == "DELETE":
            self.deleted = True
            return self._value(None)
        if command == ["url"] and request.method == "POST":
            self.current_url = json.loads(request.content)["url"]
            return self._value(None)
        if command == ["url"] and request.method == "GET":
            return self._value(self.current_url)
        if command == ["element"] and request.method == "POST":
            body = json.loads(request.content)
            element_id = self.elements.get((body["using"], body["value"]))
            if element_id is None:
                return self._error(404, "no such element")
            return self._value({WEB_ELEMENT_IDENTIFIER: element_id})
        if command == ["screenshot"] and request.method == "GET":
            return self._value(self.screenshot)
        if command == ["window", "new"] and request.method == "POST":
            self.windows += 1
            return self._value({"handle": f"window-{self.windows}", "type": "tab"})

        if len(command) == 3 and command[0] == "element":
            element_id, action = command[1], command[2]
            if element_id not in self.texts:
                return self._error(404, "stale element reference")
            if action == "text" and request.method == "GET":
                return self._value(self.texts[element_id])
            if action == "click" and request.method == "POST":
                self.clicked.append(element_id)
                return self._value(None)
            if action == "screenshot" and request.method == "GET":
                return self._value(self.screenshot)

        return self._error(404, "unknown command")

    @staticmethod
    def _value(value) -> httpx.Response:
        return httpx.Response(200, json={"value": value})

    @staticmethod
    def _error(status: int, error: str) -> httpx.Response:
        return httpx.Response(status, json={"value": {"error": error, "message": error}})


@pytest.fixture
def remote() -> StubRemoteEnd:
    return StubRemoteEnd()


@pytest.fixture
def driver(remote: StubRemoteEnd) -> WebDriver:
    return WebDriver(DriverConfig(remote_url=REMOTE_URL, timeout=5.0), http_transport=remote.transport)


@pytest.fixture
def browser(remote: StubRemoteEnd, driver: WebDriver) -> Browser:
    return Browser(remote.session_id, driver.transport)
