"""JSON serialization for plain objects.

``to_json`` renders compact text like JavaScript's ``JSON.stringify``;
``from_json`` rebuilds an instance of a given class from a JSON object
without running its constructor, so the class's methods work on the result.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from fundamentals.config import DEFAULT_CONFIG, FundamentalsConfig
from fundamentals.objects.errors import SerializationError

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_default(obj: object) -> Any:
    """Fallback encoder for objects the json module does not know."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: object, config: FundamentalsConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    NaN and infinities raise SerializationError; JSON has no spelling for them.
    """
    cfg = config or DEFAULT_CONFIG
    try:
        return json.dumps(
            obj,
            default=_encode_default,
            indent=cfg.json_indent,
            separators=cfg.json_separators,
            sort_keys=cfg.json_sort_keys,
            ensure_ascii=cfg.json_ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* into an instance of *cls*.

    Every key of the JSON object becomes an attribute of the instance.
    ``cls.__init__`` is not called.
    """
    logger.debug("Decoding %s from %d characters of JSON", cls.__name__, len(text))
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(str(e), line=e.lineno, column=e.colno) from e

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    obj = cls.__new__(cls)
    for key, value in data.items():
        try:
            # object.__setattr__ also works on frozen dataclasses.
            object.__setattr__(obj, key, value)
        except (AttributeError, TypeError) as e:
            raise SerializationError(
                f"Cannot set attribute {key!r} on {cls.__name__}: {e}"
            ) from e
    return obj
