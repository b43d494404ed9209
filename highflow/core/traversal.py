"""
Traversal modes for decoding.

Each decoding rule reads its bytes unconditionally and hands the construction
of its result to ``cursor.guard(build)``. In ``VALUE`` mode the builder runs and
its result is returned; in ``SKIP`` mode the builder never runs and the shared
``SKIPPED`` placeholder is returned instead. Both modes therefore consume the
same bytes, while skip mode neither allocates nor validates the result.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, TypeVar

from highflow.core.errors import TraversalError

T = TypeVar("T")


class _Skipped:
    __slots__ = ()

    def __repr__(self) -> str:
        return "SKIPPED"

    def __bool__(self) -> bool:
        return False


SKIPPED: Any = _Skipped()


class TraversalMode(Enum):
    VALUE = "value"
    SKIP = "skip"

    def guard(self, build: Callable[[], T]) -> T:
        """
        Wrap the result of ``build`` into this mode's output shape.

        Exceptions raised by ``build`` propagate to the caller, so a failing
        validation in value mode surfaces as an error of the decode call while
        skip mode never sees it.
        """
        if self is TraversalMode.SKIP:
            return SKIPPED
        return build()

    def get(self, output: T) -> T:
        if self is TraversalMode.SKIP or output is SKIPPED:
            raise TraversalError("Unable to get value in skip mode!")
        return output

    def extract(self, output: T) -> T:
        if self is TraversalMode.SKIP or output is SKIPPED:
            raise TraversalError("Unable to extract value in skip mode!")
        return output
