"""
Sparse Table Implementation for O(1) Range Minimum Queries

table[k][i] holds the index of the minimum in data[i .. i + 2^k), clamped
at the end of the data. A query combines two overlapping power-of-two
ranges that together cover [i, j].

Preprocessing: O(n log n)
Query: O(1)
"""

import logging
from typing import List, Sequence

from .base import Rmq, log_f, min_index

logger = logging.getLogger(__name__)


class SparseTable(Rmq):
    """
    Sparse Table for Range Minimum Query (RMQ).

    The height is the first index and the position the second, so every
    row is one contiguous list.
    """

    def __init__(self, data: Sequence):
        super().__init__(data)
        self.table: List[List[int]] = []

    def process_data(self):
        data = self.data
        n = len(data)

        # Height of the table is floor(log n) + 1
        table_height = log_f(n) + 1

        self.table = [list(range(n))]
        for k in range(1, table_height):
            prev = self.table[k - 1]
            half = 1 << (k - 1)
            row = [0] * n

            for i in range(n):
                # Compare M[k - 1, i] and M[k - 1, i + 2^(k-1)], the right
                # index clamped to the data.
                r_idx = min(n - 1, i + half)
                row[i] = min_index(data, prev[i], prev[r_idx])

            self.table.append(row)

        logger.debug(f"Sparse table built: {table_height} rows x {n}")

    def query(self, i: int, j: int) -> int:
        # k = floor(log (j - i))
        k = log_f(j - i)
        row = self.table[k]

        # M[k, i] and M[k, j - 2^k + 1]
        return min_index(self.data, row[i], row[j - (1 << k) + 1])

    @property
    def height(self) -> int:
        return len(self.table)
