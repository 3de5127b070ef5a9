"""
Bifrost Models - Shared Pydantic models.

Request payloads and typed response envelopes for the WebDriver protocol.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bifrost.config import WEB_ELEMENT_IDENTIFIER

# ===== Request Models =====


class Capabilities(BaseModel):
    """
    Capabilities sent on session creation.

    Usage:
        caps = Capabilities.chrome(headless=True)
        payload = caps.payload()
        # {"capabilities": {"alwaysMatch": {"browserName": "chrome", ...}}}
    """

    always_match: dict[str, Any] = Field(default_factory=dict)
    first_match: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def chrome(cls, headless: bool = True, args: list[str] | None = None) -> "Capabilities":
        """Capabilities requesting a Chrome browser with the given flags."""
        chrome_args = list(args or [])
        if headless and "--headless" not in chrome_args:
            chrome_args.append("--headless")

        always_match: dict[str, Any] = {"browserName": "chrome"}
        if chrome_args:
            always_match["goog:chromeOptions"] = {"args": chrome_args}
        return cls(always_match=always_match)

    def headed(self) -> "Capabilities":
        """Copy of these capabilities with Chrome's headless flag removed."""
        always_match = dict(self.always_match)
        options = always_match.get("goog:chromeOptions")
        if isinstance(options, dict) and "args" in options:
            args = [
                arg
                for arg in options["args"]
                if arg != "--headless" and not str(arg).startswith("--headless=")
            ]
            always_match["goog:chromeOptions"] = {**options, "args": args}
        return self.model_copy(update={"always_match": always_match})

    def payload(self) -> dict[str, Any]:
        """Build the New Session request body."""
        capabilities: dict[str, Any] = {"alwaysMatch": self.always_match}
        if self.first_match:
            capabilities["firstMatch"] = self.first_match
        return {"capabilities": capabilities}


# ===== Response Envelopes =====


class NewSessionValue(BaseModel):
    """Payload of a New Session response."""

    session_id: str | None = Field(default=None, alias="sessionId")
    capabilities: dict[str, Any] | None = None


class NewSessionResponse(BaseModel):
    value: NewSessionValue | None = None


class StringResponse(BaseModel):
    """Envelope carrying a string value (URL, text, base64 image)."""

    value: str


class ElementReference(BaseModel):
    """Web element reference, keyed by the web element identifier."""

    model_config = ConfigDict(populate_by_name=True)

    element_id: str | None = Field(default=None, alias=WEB_ELEMENT_IDENTIFIER)


class ElementResponse(BaseModel):
    value: ElementReference | None = None


__all__ = [
    "Capabilities",
    "NewSessionValue",
    "NewSessionResponse",
    "StringResponse",
    "ElementReference",
    "ElementResponse",
]
