"""
RMQ for sequences with the +-1 property (Bender & Farach-Colton)

A sequence [x_1, ..., x_n] has the +-1 property if |x_i - x_{i+1}| = 1 for
all i < n, e.g. the level array of an Euler tour.

The data is cut into blocks. A sparse table over the block minima answers
the part of a query that spans whole blocks. Inside a block the position
of the minimum depends only on the block's sequence of +1/-1 steps (its
class), so all blocks of one class share a single small sparse table.

Preprocessing: O(n)
Query: O(1)

Reference:
    M. A. Bender, M. Farach-Colton: The LCA Problem Revisited.
    LATIN 2000, LNCS 1776, 88-94, 2000.
"""

import logging
from typing import List, Optional, Sequence

from .base import Rmq, has_plus_minus_property, log_f, min_index
from .sparse_table import SparseTable

logger = logging.getLogger(__name__)


class PlusMinus(Rmq):
    """
    RMQ algorithm for sequences that satisfy the +-1 property.

    Results are wrong (not just undefined) for data without that property.
    Pass validate=True to have process_data() check it first.
    """

    def __init__(self, data: Sequence, validate: bool = False):
        super().__init__(data)
        self.validate = validate

        # The paper uses 1/2 log n; we use a power of two so division and
        # modulo become a shift and a mask.
        self.block_size = 0
        self.block_div = 0
        self.block_mod = 0

        # Index of each block's minimum in data (B in the paper).
        self.block_min_idx: List[int] = []

        # RMQ over the block minima (A' in the paper).
        self.table_rmq: Optional[SparseTable] = None

        # Class of each block.
        self.block_cls: List[int] = []

        # One RMQ per class, built the first time the class is seen.
        self.class_rmq: List[Optional[SparseTable]] = []

    def process_data(self):
        data = self.data
        n = len(data)

        if self.validate and not has_plus_minus_property(data):
            raise ValueError("Data does not satisfy the +-1 property")

        if n == 0:
            return

        # Largest power of two not larger than 1/2 log n, i.e. the largest k
        # with 2^(k + 1) <= log n.
        k = max(0, log_f(log_f(n)) - 1)
        self.block_size = 1 << k
        self.block_div = k
        self.block_mod = self.block_size - 1

        block_count = ((n - 1) >> self.block_div) + 1

        self._find_block_minima(block_count)
        self._classify_blocks(block_count)

        logger.debug(
            f"PlusMinus built: n={n}, block_size={self.block_size}, "
            f"blocks={block_count}, classes={self.built_class_count}/{self.class_count}"
        )

    def _find_block_minima(self, block_count: int):
        data = self.data
        n = len(data)

        block_min_val = []
        self.block_min_idx = []

        for b in range(block_count):
            b_sta = b << self.block_div
            b_end = min(b_sta + self.block_size, n)

            cur_idx = b_sta
            for i in range(b_sta + 1, b_end):
                if data[i] < data[cur_idx]:
                    cur_idx = i

            block_min_val.append(data[cur_idx])
            self.block_min_idx.append(cur_idx)

        self.table_rmq = SparseTable(block_min_val)
        self.table_rmq.process_data()

    def _classify_blocks(self, block_count: int):
        data = self.data
        n = len(data)

        self.block_cls = [0] * block_count
        self.class_rmq = [None] * self.class_count

        for b in range(block_count):
            b_sta = b << self.block_div
            b_end = min(b_sta + self.block_size, n)

            # Bit is 1 for a -1 step, 0 for a +1 step; first step is the
            # most significant bit.
            cls = 0
            for i in range(b_sta + 1, b_end):
                cls <<= 1
                if data[i - 1] >= data[i]:
                    cls |= 1

            # A short last block is padded on the right, so it shares its
            # table with full blocks starting with the same steps.
            cls <<= self.block_size - (b_end - b_sta)

            self.block_cls[b] = cls

            if self.class_rmq[cls] is None:
                rmq = SparseTable(data[b_sta:b_end])
                rmq.process_data()
                self.class_rmq[cls] = rmq

    def query(self, i: int, j: int) -> int:
        # Block indices.
        i_b = i >> self.block_div
        j_b = j >> self.block_div

        # Indices inside the blocks.
        i_idx = i & self.block_mod
        j_idx = j & self.block_mod

        if i_b == j_b:
            return self._in_block_min(i_b, i_idx, j_idx)

        i_min = self._in_block_min(i_b, i_idx, self.block_mod)
        j_min = self._in_block_min(j_b, 0, j_idx)
        ij_min = min_index(self.data, i_min, j_min)

        # Adjacent blocks?
        if i_b + 1 == j_b:
            return ij_min

        # Minimum of the blocks strictly between i and j.
        b_idx = self.table_rmq.query(i_b + 1, j_b - 1)
        b_min = self.block_min_idx[b_idx]

        return min_index(self.data, ij_min, b_min)

    def _in_block_min(self, b: int, i: int, j: int) -> int:
        """Minimum of block b between in-block offsets i and j, as an index into data."""
        rmq = self.class_rmq[self.block_cls[b]]
        return (b << self.block_div) + rmq.query(i, j)

    @property
    def class_count(self) -> int:
        """Upper bound on the number of distinct classes."""
        if self.block_size == 0:
            return 0
        return 1 << (self.block_size - 1)

    @property
    def built_class_count(self) -> int:
        """Number of class tables actually built."""
        return sum(1 for rmq in self.class_rmq if rmq is not None)

    def class_table(self, b: int) -> SparseTable:
        """The (shared) class table used for block b."""
        return self.class_rmq[self.block_cls[b]]
