"""
Common RMQ Interface and Helpers

Every Range-Minimum-Query algorithm in this package follows the same
three-step life cycle:

1. Construct over a (read-only) sequence of totally ordered values
2. process_data() once to build the derived tables
3. query(i, j) any number of times

query(i, j) returns the index of the minimum in data[i..j] (both ends
inclusive). It is only defined for 0 <= i <= j < len(data) and only after
process_data() has run. Ties are resolved towards the lower index, so all
algorithms report the leftmost minimum.
"""

from abc import ABC, abstractmethod
from typing import Sequence


class Rmq(ABC):
    """
    Base class for RMQ algorithms.

    Subclasses keep a reference to the data and never modify it, so one
    array can be shared by any number of instances.
    """

    def __init__(self, data: Sequence):
        """
        Args:
            data: Sequence of totally ordered values
        """
        self.data = data

    @abstractmethod
    def process_data(self):
        """Pre-processes the data to allow queries."""

    @abstractmethod
    def query(self, i: int, j: int) -> int:
        """
        Find the minimum in data[i..j].

        Args:
            i: Left index (inclusive)
            j: Right index (inclusive), i <= j

        Returns:
            Index of the leftmost minimum in the range
        """

    def __len__(self) -> int:
        return len(self.data)


def min_index(data: Sequence, i: int, j: int) -> int:
    """Return whichever of i and j holds the smaller value, lower index on ties."""
    if i > j:
        i, j = j, i
    return j if data[j] < data[i] else i


def log_f(n: int) -> int:
    """Floor of log2(n). log_f(0) is 0."""
    return (n | 1).bit_length() - 1


def log_c(n: int) -> int:
    """Ceil of log2(n) for n >= 1."""
    if n <= 1:
        return 0
    return log_f(n - 1) + 1


def has_plus_minus_property(data: Sequence) -> bool:
    """Check that consecutive entries differ by exactly 1."""
    for i in range(1, len(data)):
        if abs(data[i] - data[i - 1]) != 1:
            return False
    return True
