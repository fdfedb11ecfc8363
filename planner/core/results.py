# File: /planner/core/results.py | Version: 1.0 | Title: Typed success/failure envelope for service operations
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """
    Outcome of a service call. Exactly one of `value` (on success) or
    `exception` (on failure) is meaningful.
    """

    succeeded: bool
    value: Optional[T] = None
    exception: Optional[BaseException] = None

    @classmethod
    def succeed(cls, value: Optional[T] = None) -> "ApiResponse[T]":
        return cls(succeeded=True, value=value)

    @classmethod
    def fail(cls, exception: BaseException) -> "ApiResponse[T]":
        return cls(succeeded=False, exception=exception)
