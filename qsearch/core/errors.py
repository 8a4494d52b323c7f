# qsearch/core/errors.py
# "No solution" is an ordinary search outcome, so it is a value and never an exception.
from __future__ import annotations
from typing import Any


class SearchExhausted:
    """The frontier ran empty before any goal node was removed from it.

    There is a single shared instance, FAILURE. It is falsy, but unlike the
    empty action list (a valid zero-step solution) it is not a list, so use
    `is_failure(result)` or `result is FAILURE` rather than truthiness.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "SearchExhausted"

    def __reduce__(self):
        return (SearchExhausted, ())


FAILURE = SearchExhausted()


def is_failure(result: Any) -> bool:
    return result is FAILURE
