import asyncio
import base64
import binascii
import logging
from pathlib import Path

from bifrost.exceptions import DecodeError

logger = logging.getLogger(__name__)


def decode_screenshot(encoded: str) -> bytes:
    """
    Decode a screenshot returned by the remote end.

    WebDriver encodes the canvas as Base64 using the standard alphabet
    defined in RFC 4648.

    Raises:
        DecodeError: If the payload is not valid base64
    """
    try:
        # Line breaks from wrapped output are skipped like RFC 2045 decoders do.
        unwrapped = encoded.replace("\r", "").replace("\n", "")
        return base64.b64decode(unwrapped, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"failed to decode base64 screenshot: {e}", encoded.encode()) from e


async def save_screenshot_async(data: bytes, path: str | Path) -> Path:
    """
    Save screenshot data to a file asynchronously to avoid blocking the event loop.

    Args:
        data: Raw image bytes
        path: Destination path

    Returns:
        The path written to
    """
    path = Path(path)
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    # Run blocking I/O in a separate thread
    await asyncio.to_thread(_write_file, path, data)
    logger.debug(f"Saved screenshot ({len(data)} bytes) to {path}")
    return path


def _write_file(path: Path, data: bytes) -> None:
    """Blocking file write helper."""
    with open(path, "wb") as f:
        f.write(data)
