"""
Bifrost Browser Module.

Provides session-scoped and element-scoped WebDriver operations.
"""

from bifrost.browser.element import Element
from bifrost.browser.session import Browser

__all__ = [
    "Browser",
    "Element",
]
