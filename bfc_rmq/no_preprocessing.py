"""
Baseline RMQ Algorithms

- ReferenceRmq: does nothing at all; used to measure the overhead of
  generating test cases and calling queries
- NoPreprocessing: linear scan over the queried range

Runtime (preprocessing | query):
    ReferenceRmq:    O(1) | O(1)
    NoPreprocessing: O(1) | O(k), k = j - i + 1
"""

from .base import Rmq, min_index


class ReferenceRmq(Rmq):
    """The reference "algorithm". Always answers 0."""

    def process_data(self):
        pass

    def query(self, i: int, j: int) -> int:
        return 0


class NoPreprocessing(Rmq):
    """
    RMQ without pre-processing, iterating over the given range.

    Serves as the correctness oracle for every other algorithm.
    """

    def process_data(self):
        pass

    def query(self, i: int, j: int) -> int:
        data = self.data

        # First entry is default minimum.
        min_idx = i
        for idx in range(i + 1, j + 1):
            min_idx = min_index(data, min_idx, idx)

        return min_idx
