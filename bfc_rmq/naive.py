"""
Naive RMQ: precompute every answer.

Preprocessing: O(n^2) time and space
Query: O(1)
"""

import logging
from typing import List, Sequence

from .base import Rmq, min_index

logger = logging.getLogger(__name__)


class Naive(Rmq):
    """
    RMQ with an almost naive preprocessing.

    table[i][j] holds the answer for [min(i, j), max(i, j)]. Each row is
    filled left to right from the entry before it, and mirrored so the
    table is symmetric.
    """

    def __init__(self, data: Sequence):
        super().__init__(data)
        self.table: List[List[int]] = []

    def process_data(self):
        data = self.data
        n = len(data)

        self.table = [[0] * n for _ in range(n)]
        table = self.table

        for i in range(n):
            # Base case.
            table[i][i] = i

            row = table[i]
            for j in range(i + 1, n):
                min_idx = min_index(data, row[j - 1], j)
                row[j] = min_idx
                table[j][i] = min_idx

        logger.debug(f"Naive table built: {n}x{n}")

    def query(self, i: int, j: int) -> int:
        return self.table[i][j]
