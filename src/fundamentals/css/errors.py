"""Selector error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fundamentals.errors import SourceError

if TYPE_CHECKING:
    from fundamentals.css.model import Fragment

DUPLICATE_SINGLETON_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
OUT_OF_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector errors."""


class DuplicateSingletonError(SelectorError):
    """An element, id or pseudo-element was added to a chain that already has one."""

    def __init__(self, fragment: Fragment) -> None:
        super().__init__(DUPLICATE_SINGLETON_MESSAGE)
        self.fragment = fragment


class OutOfOrderError(SelectorError):
    """A fragment was added after a fragment of a higher rank."""

    def __init__(self, fragment: Fragment) -> None:
        super().__init__(OUT_OF_ORDER_MESSAGE)
        self.fragment = fragment


class SelectorParseError(SelectorError, SourceError):
    """Raised when selector text cannot be parsed."""
