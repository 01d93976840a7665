"""Fundamentals: plain objects and JSON, a CSS selector builder, asyncio combinators."""
from __future__ import annotations

# Config
from fundamentals.config import DEFAULT_CONFIG, FundamentalsConfig

# Errors
from fundamentals.errors import SourceError

# Objects
from fundamentals.objects import Rectangle, SerializationError, from_json, to_json

# CSS selectors
from fundamentals.css import (
    Combination,
    Combinator,
    DuplicateSingletonError,
    Fragment,
    FragmentKind,
    OutOfOrderError,
    SelectorBuilder,
    SelectorChain,
    SelectorError,
    SelectorParseError,
    css_selector_builder,
    parse_selector,
)

# Deferred values
from fundamentals.deferred import (
    WrongParameterError,
    chain_results,
    get_fastest,
    process_all,
    will_you_marry_me,
)

__all__ = [
    "FundamentalsConfig",
    "DEFAULT_CONFIG",
    "SourceError",
    "Rectangle",
    "to_json",
    "from_json",
    "SerializationError",
    "css_selector_builder",
    "SelectorBuilder",
    "SelectorChain",
    "Combination",
    "Combinator",
    "Fragment",
    "FragmentKind",
    "parse_selector",
    "SelectorError",
    "DuplicateSingletonError",
    "OutOfOrderError",
    "SelectorParseError",
    "will_you_marry_me",
    "process_all",
    "get_fastest",
    "chain_results",
    "WrongParameterError",
]
