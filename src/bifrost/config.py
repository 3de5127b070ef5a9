"""
Bifrost Configuration.

Centralizes default values and protocol constants.
"""

from enum import StrEnum

# Remote end
DEFAULT_REMOTE_URL = "http://localhost:9515"
DEFAULT_TIMEOUT = 60.0

# Environment overrides
ENV_REMOTE_URL = "BIFROST_REMOTE_URL"
ENV_TIMEOUT = "BIFROST_TIMEOUT"

# https://www.w3.org/TR/webdriver/#elements
# The legacy JSON wire protocol used the `ELEMENT` key instead.
WEB_ELEMENT_IDENTIFIER = "element-6066-11e4-a52e-4f735466cecf"


class LocatorStrategy(StrEnum):
    """Keywords used to search for elements in the current browsing context."""

    CSS = "css selector"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    TAG_NAME = "tag name"
    XPATH = "xpath"

