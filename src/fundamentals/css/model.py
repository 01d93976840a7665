"""Selector model: FragmentKind, Fragment and Combinator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum


class FragmentKind(Enum):
    """Kinds of compound-selector fragments.

    The value is the rank, i.e. the required position inside a compound
    selector: element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def rank(self) -> int:
        return self.value

    @property
    def delimiters(self) -> tuple[str, str]:
        return _DELIMITERS[self]

    @property
    def unique(self) -> bool:
        """True if the kind may occur at most once per compound selector."""
        return self in _UNIQUE_KINDS


_DELIMITERS: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}

_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


@dataclass(frozen=True)
class Fragment:
    """One typed piece of a compound selector, e.g. ``.container``."""

    kind: FragmentKind
    name: str

    @property
    def rank(self) -> int:
        return self.kind.rank

    def render(self) -> str:
        prefix, suffix = self.kind.delimiters
        return f"{prefix}{self.name}{suffix}"


class Combinator(StrEnum):
    """CSS combinators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
