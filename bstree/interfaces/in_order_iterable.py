"""
InOrderIterable protocol for ordered structures that support full traversal.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class InOrderIterable(ABC):
    """
    Protocol for data structures that can be walked in ascending key order.

    Implementations must support:
    - Full iteration via __iter__
    - Async full iteration via __aiter__

    Every call returns a fresh iterator, so traversal is restartable.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all keys in ascending order."""
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all keys in ascending order."""
        pass
