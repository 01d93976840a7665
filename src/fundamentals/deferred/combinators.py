"""Combinators over asyncio awaitables.

An awaitable (coroutine, Task or Future) plays the role of a deferred value:
it settles exactly once, either with a result or with an exception.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

__all__ = [
    "YES_MESSAGE",
    "NO_MESSAGE",
    "WRONG_PARAMETER_MESSAGE",
    "WrongParameterError",
    "will_you_marry_me",
    "process_all",
    "get_fastest",
    "chain_results",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

YES_MESSAGE = 'Hooray!!! She said "Yes"!'
NO_MESSAGE = 'Oh no, she said "No".'
WRONG_PARAMETER_MESSAGE = "Wrong parameter is passed! Ask her again."

_MISSING = object()


class WrongParameterError(ValueError):
    """Raised by will_you_marry_me when the answer is not a boolean."""

    def __init__(self, message: str = WRONG_PARAMETER_MESSAGE) -> None:
        super().__init__(message)


async def will_you_marry_me(is_positive_answer: bool | None = None) -> str:
    """Resolve with a fixed message for True or False, fail otherwise."""
    if not isinstance(is_positive_answer, bool):
        raise WrongParameterError()
    return YES_MESSAGE if is_positive_answer else NO_MESSAGE


async def process_all(awaitables: Iterable[Awaitable[T]]) -> list[T]:
    """Wait for every awaitable and return their results in input order.

    Fails with the first exception raised by any input.
    """
    return list(await asyncio.gather(*awaitables))


def _log_late_failure(future: asyncio.Future[Any]) -> None:
    """Retrieve and log the exception of an input that lost the race."""
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.warning("Ignoring failure of a slower awaitable: %r", exc)


async def get_fastest(awaitables: Iterable[Awaitable[T]]) -> T:
    """Settle the same way as the first awaitable to settle.

    If several inputs are already settled, the earliest one in input order
    wins. The other inputs keep running; failures they produce later are
    logged rather than raised.
    """
    futures = [asyncio.ensure_future(aw) for aw in awaitables]
    if not futures:
        raise ValueError("get_fastest() needs at least one awaitable")

    done, _ = await asyncio.wait(futures, return_when=asyncio.FIRST_COMPLETED)
    winner = next(f for f in futures if f in done)
    for future in futures:
        if future is not winner:
            future.add_done_callback(_log_late_failure)
    # result() re-raises the winner's exception, keeping the outcome kind.
    return winner.result()


async def chain_results(
    awaitables: Iterable[Awaitable[T]],
    action: Callable[[T, T], T],
) -> T | None:
    """Fold results with *action*, awaiting inputs strictly one after another.

    The first successful result seeds the accumulator; failed inputs are
    skipped. Returns None when no input succeeds. If *action* raises, the
    error propagates and coroutines not yet awaited are closed.
    """
    remaining = iter(awaitables)
    acc: Any = _MISSING
    try:
        for index, aw in enumerate(remaining):
            try:
                value = await aw
            except Exception as exc:
                logger.debug("Skipping failed awaitable #%d: %r", index, exc)
                continue
            acc = value if acc is _MISSING else action(acc, value)
    finally:
        for leftover in remaining:
            if asyncio.iscoroutine(leftover):
                leftover.close()
    return None if acc is _MISSING else acc
