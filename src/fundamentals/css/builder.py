"""Immutable CSS selector builder.

Each compound selector can consist of element, id, class, attribute,
pseudo-class and pseudo-element fragments::

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              may occur several times

Compound selectors are joined with the combinators ' ', '+', '~' and '>'.

Every fragment method returns a new ``SelectorChain``; the receiver is never
modified, so a partially built chain can be extended in several directions::

    base = css_selector_builder.element("div").id("main")
    base.class_("container").stringify()  # 'div#main.container'
    base.pseudo_class("hover").stringify()  # 'div#main:hover'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from fundamentals.css.errors import DuplicateSingletonError, OutOfOrderError
from fundamentals.css.model import Combinator, Fragment, FragmentKind

__all__ = [
    "Renderable",
    "SelectorChain",
    "Combination",
    "SelectorBuilder",
    "css_selector_builder",
]


class Renderable(Protocol):
    """Anything that renders to a selector string."""

    def stringify(self) -> str: ...


@dataclass(frozen=True)
class SelectorChain:
    """An ordered, validated sequence of fragments forming a compound selector."""

    fragments: tuple[Fragment, ...] = ()

    @property
    def rank(self) -> int | None:
        """Highest rank in the chain, or None when empty."""
        if not self.fragments:
            return None
        # Ranks never decrease, so the last fragment holds the maximum.
        return self.fragments[-1].rank

    def append(self, fragment: Fragment) -> SelectorChain:
        """Return a new chain with *fragment* appended.

        Raises DuplicateSingletonError if the fragment's kind may occur only
        once and is already present, and OutOfOrderError if its rank is lower
        than the chain's current rank.
        """
        if fragment.kind.unique and any(f.kind is fragment.kind for f in self.fragments):
            raise DuplicateSingletonError(fragment)
        rank = self.rank
        if rank is not None and fragment.rank < rank:
            raise OutOfOrderError(fragment)
        return SelectorChain(fragments=self.fragments + (fragment,))

    def element(self, name: str) -> SelectorChain:
        return self.append(Fragment(FragmentKind.ELEMENT, name))

    def id(self, name: str) -> SelectorChain:
        return self.append(Fragment(FragmentKind.ID, name))

    def class_(self, name: str) -> SelectorChain:
        return self.append(Fragment(FragmentKind.CLASS, name))

    def attr(self, name: str) -> SelectorChain:
        return self.append(Fragment(FragmentKind.ATTRIBUTE, name))

    def pseudo_class(self, name: str) -> SelectorChain:
        return self.append(Fragment(FragmentKind.PSEUDO_CLASS, name))

    def pseudo_element(self, name: str) -> SelectorChain:
        return self.append(Fragment(FragmentKind.PSEUDO_ELEMENT, name))

    def stringify(self) -> str:
        return "".join(f.render() for f in self.fragments)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class Combination:
    """Two selectors joined by a combinator.

    The combinator is always surrounded by single spaces, so the descendant
    combinator renders as three spaces in a row.
    """

    left: Renderable
    combinator: str
    right: Renderable

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


class SelectorBuilder:
    """Facade that starts new selector chains and combines selectors."""

    def element(self, name: str) -> SelectorChain:
        return SelectorChain().element(name)

    def id(self, name: str) -> SelectorChain:
        return SelectorChain().id(name)

    def class_(self, name: str) -> SelectorChain:
        return SelectorChain().class_(name)

    def attr(self, name: str) -> SelectorChain:
        return SelectorChain().attr(name)

    def pseudo_class(self, name: str) -> SelectorChain:
        return SelectorChain().pseudo_class(name)

    def pseudo_element(self, name: str) -> SelectorChain:
        return SelectorChain().pseudo_element(name)

    def combine(
        self, left: Renderable, combinator: Combinator | str, right: Renderable
    ) -> Combination:
        return Combination(left=left, combinator=str(combinator), right=right)


css_selector_builder = SelectorBuilder()
