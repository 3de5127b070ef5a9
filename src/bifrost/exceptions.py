"""
Bifrost Exceptions.

Centralized exception hierarchy for the client.
"""


class BifrostError(Exception):
    """Base exception for all Bifrost errors."""
    pass


class RequestConstructionError(BifrostError):
    """Raised when a request cannot be built from the given inputs."""
    pass


class ConfigurationError(RequestConstructionError):
    """Raised when driver configuration is invalid."""
    pass


class TransportError(BifrostError):
    """Raised when the remote end cannot be reached or the request times out."""
    pass


class ProtocolError(BifrostError):
    """Raised when the remote end answers with a status other than 200."""

    def __init__(self, method: str, url: str, status_code: int, body: bytes = b""):
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"{method} {url} returned invalid HTTP status code: {status_code}")


class DecodeError(BifrostError):
    """Raised when a response body (JSON or base64 payload) is malformed."""

    def __init__(self, message: str, body: bytes = b""):
        self.body = body
        super().__init__(message)


class MissingIdentifierError(BifrostError):
    """Raised when a successful response lacks the expected identifier."""
    pass


class EmptyIdentifierError(MissingIdentifierError):
    """Raised when a new session response has no session ID."""
    pass


class MissingElementError(MissingIdentifierError):
    """Raised when a find element response has no web element reference."""
    pass
