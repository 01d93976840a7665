from fundamentals.css.builder import (
    Combination,
    Renderable,
    SelectorBuilder,
    SelectorChain,
    css_selector_builder,
)
from fundamentals.css.errors import (
    DuplicateSingletonError,
    OutOfOrderError,
    SelectorError,
    SelectorParseError,
)
from fundamentals.css.model import Combinator, Fragment, FragmentKind
from fundamentals.css.parser import parse_selector

__all__ = [
    "css_selector_builder",
    "SelectorBuilder",
    "SelectorChain",
    "Combination",
    "Renderable",
    "Combinator",
    "Fragment",
    "FragmentKind",
    "parse_selector",
    "SelectorError",
    "DuplicateSingletonError",
    "OutOfOrderError",
    "SelectorParseError",
]
