from fundamentals.deferred.combinators import (
    NO_MESSAGE,
    WRONG_PARAMETER_MESSAGE,
    YES_MESSAGE,
    WrongParameterError,
    chain_results,
    get_fastest,
    process_all,
    will_you_marry_me,
)

__all__ = [
    "will_you_marry_me",
    "process_all",
    "get_fastest",
    "chain_results",
    "WrongParameterError",
    "YES_MESSAGE",
    "NO_MESSAGE",
    "WRONG_PARAMETER_MESSAGE",
]
