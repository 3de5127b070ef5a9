"""Bifrost utilities."""

from bifrost.utils.media import decode_screenshot, save_screenshot_async

__all__ = ["decode_screenshot", "save_screenshot_async"]
