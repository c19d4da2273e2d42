"""
OrderedSet abstract base class for sorted collections of unique values.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class OrderedSet(ABC):
    """
    Abstract base class for sorted containers of unique values.

    Provides O(log N) operations for insert, remove and contains,
    and ascending iteration.

    Implementations:
    - AVLTree
    """

    @abstractmethod
    def insert(self, value: Any) -> bool:
        """
        Add a value.

        Args:
            value: The value to add.

        Returns:
            True if the value was not yet present, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, value: Any) -> bool:
        """
        Remove a value.

        Args:
            value: The value to remove.

        Returns:
            True if the value was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """
        Check if a value is present.

        Args:
            value: The value to check.

        Returns:
            True if the value is present, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of values.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def iter(self) -> Iterator[Any]:
        """Return an iterator over all values in ascending order."""
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        return self.iter()
