"""Lark-based parser turning selector text back into builder objects.

Accepts what ``stringify`` produces, e.g.::

    div#main.container + table#data ~ tr:nth-of-type(even)   td

Combinators are folded left to right, so ``a > b + c`` becomes
``Combination(Combination(a, ">", b), "+", c)``. The nesting differs from a
right-nested build but renders to the same string.
"""

from __future__ import annotations

import logging
from functools import reduce

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from fundamentals.css.builder import Combination, Renderable, SelectorChain
from fundamentals.css.errors import SelectorParseError
from fundamentals.css.model import Fragment, FragmentKind

__all__ = ["parse_selector"]

logger = logging.getLogger(__name__)

# Pieces of the fragment terminals. Quoted strings may hold any character but
# their own quote; pseudo-class arguments nest parentheses up to three deep.
_QUOTED = "\"[^\"]*\"|'[^']*'"
_ARGUMENT = r"\((?:[^()\"']|" + _QUOTED + r")*\)"
for _ in range(2):
    _ARGUMENT = r"\((?:[^()\"']|" + _QUOTED + "|" + _ARGUMENT + r")*\)"

GRAMMAR = rf"""
start: compound (COMBINATOR compound)*
compound: fragment+
fragment: ELEMENT
        | ID
        | CLASS
        | ATTRIBUTE
        | PSEUDO_CLASS
        | PSEUDO_ELEMENT

COMBINATOR: /\s*[>+~]\s*|\s+/
ELEMENT: /[a-zA-Z*][-\w]*/
ID: /#[-\w]+/
CLASS: /\.[-\w]+/
ATTRIBUTE: /\[(?:[^\]\"']|{_QUOTED})*\]/
PSEUDO_CLASS: /:[-\w]+(?:{_ARGUMENT})?/
PSEUDO_ELEMENT: /::[-\w]+/
"""

# Terminal name -> fragment kind.
_TERMINAL_KINDS: dict[str, FragmentKind] = {
    "ELEMENT": FragmentKind.ELEMENT,
    "ID": FragmentKind.ID,
    "CLASS": FragmentKind.CLASS,
    "ATTRIBUTE": FragmentKind.ATTRIBUTE,
    "PSEUDO_CLASS": FragmentKind.PSEUDO_CLASS,
    "PSEUDO_ELEMENT": FragmentKind.PSEUDO_ELEMENT,
}

_PARSER = Lark(GRAMMAR, parser="lalr", start="start")


class _Compound:
    """Fragments of one compound selector, not yet validated."""

    def __init__(self, fragments: list[Fragment]):
        self.fragments = fragments


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into fragments and combinator tokens."""

    def fragment(self, items: list[Token]) -> Fragment:
        token = items[0]
        kind = _TERMINAL_KINDS[token.type]
        prefix, suffix = kind.delimiters
        raw = str(token)
        return Fragment(kind, raw[len(prefix) : len(raw) - len(suffix)])

    def compound(self, items: list[Fragment]) -> _Compound:
        return _Compound(items)

    def start(self, items: list[object]) -> list[object]:
        return items


def _build_chain(compound: _Compound) -> SelectorChain:
    """Append fragments one by one so the usual ordering rules apply."""
    return reduce(SelectorChain.append, compound.fragments, SelectorChain())


def _assemble(items: list[object]) -> Renderable:
    """Fold ``compound (COMBINATOR compound)*`` into a selector tree."""
    result: Renderable = _build_chain(items[0])  # type: ignore[arg-type]
    for i in range(1, len(items), 2):
        # Whitespace-only combinator token is the descendant combinator.
        symbol = str(items[i]).strip() or " "
        right = _build_chain(items[i + 1])  # type: ignore[arg-type]
        result = Combination(left=result, combinator=symbol, right=right)
    return result


def parse_selector(source: str) -> Renderable:
    """Parse selector text into a SelectorChain or Combination.

    Raises SelectorParseError for malformed text, and DuplicateSingletonError
    or OutOfOrderError when a compound selector breaks the fragment rules.
    """
    logger.debug("Parsing selector %r", source)
    try:
        tree = _PARSER.parse(source.strip())
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise SelectorParseError(str(e), line=line, column=column) from e
    items = SelectorTransformer().transform(tree)
    return _assemble(items)
