"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuild.selector.model import Category

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Raised when a part cannot be appended to a selector."""

    def __init__(self, message: str, category: Category, selector: str = "") -> None:
        self.category = category
        self.selector = selector
        super().__init__(message)


class DuplicateViolation(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, category: Category, selector: str = "") -> None:
        super().__init__(DUPLICATE_MESSAGE, category, selector)


class OrderViolation(SelectorError):
    """A part was appended after a part of a later category."""

    def __init__(self, category: Category, selector: str = "") -> None:
        super().__init__(ORDER_MESSAGE, category, selector)
