"""Result type returned by the repository.

Every repository call ends in either a ``Success`` carrying the data or a
``Failure`` carrying a message that can be shown to the user as-is.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union


T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful call and its data."""
    data: T


@dataclass(frozen=True)
class Failure:
    """A failed call.

    Attributes:
        message: Human-readable reason for the failure
    """
    message: Optional[str]


ApiResult = Union[Success[T], Failure]
