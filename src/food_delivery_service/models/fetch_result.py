"""Found-or-missing result for repository fetches.

Repositories return one of these instead of ``None`` so that every caller has
to branch on the absent case explicitly.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """A fetch that located the requested record."""

    value: T


@dataclass(frozen=True)
class Missing:
    """A fetch that located nothing for ``key``."""

    key: int


FetchResult = Union[Found[T], Missing]
