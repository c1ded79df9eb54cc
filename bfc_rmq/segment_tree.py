"""
Segment Tree RMQ

The tree is stored as one flat list of nodes; children are referenced by
their position in that list. Layers are laid out root first, so the
leaves occupy the last n slots.

Preprocessing: O(n)
Query: O(log n), iterative walk without recursion
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .base import Rmq, min_index

logger = logging.getLogger(__name__)

NO_CHILD = -1


@dataclass
class Node:
    """Node of a SegmentTree covering data[fr_idx..to_idx]."""
    left: int = NO_CHILD
    right: int = NO_CHILD
    fr_idx: int = 0
    to_idx: int = 0
    min_idx: int = 0


def tree_size(n: int) -> int:
    """Number of nodes needed for n leaves: n + ceil(n/2) + ceil(n/4) + ... + 1."""
    size = n
    lay_sz = n
    while lay_sz > 1:
        lay_sz = (lay_sz + 1) >> 1
        size += lay_sz
    return size


class SegmentTree(Rmq):
    """
    RMQ backed by a balanced binary tree over the data.

    Each layer pairs up the nodes of the layer below; an odd node out at
    the end of a layer gets a parent with a single (left) child.
    """

    def __init__(self, data: Sequence):
        super().__init__(data)
        self.tree: List[Node] = []

    def process_data(self):
        data = self.data
        n = len(data)

        size = tree_size(n)
        self.tree = [Node() for _ in range(size)]
        tree = self.tree

        # Bottom layer.
        for i in range(n):
            node = tree[size - n + i]
            node.min_idx = i
            node.fr_idx = i
            node.to_idx = i

        # q_size: number of nodes in the layer below
        # q_start: index of that layer's left-most node in tree
        q_size = n
        q_start = size - n
        while q_size > 1:
            cur_lay_size = (q_size + 1) >> 1

            n_ptr = q_start - cur_lay_size
            for q_ptr in range(q_start, q_start + q_size, 2):
                left_node = tree[q_ptr]

                node = tree[n_ptr]
                node.left = q_ptr
                node.fr_idx = left_node.fr_idx
                node.to_idx = left_node.to_idx
                node.min_idx = left_node.min_idx

                # Still one more element?
                if q_ptr + 1 < q_start + q_size:
                    right_node = tree[q_ptr + 1]
                    node.right = q_ptr + 1
                    node.to_idx = right_node.to_idx
                    node.min_idx = min_index(data, node.min_idx, right_node.min_idx)

                n_ptr += 1

            q_size = cur_lay_size
            q_start -= q_size

        logger.debug(f"Segment tree built: {n} leaves, {size} nodes")

    def query(self, i: int, j: int) -> int:
        data = self.data
        tree = self.tree

        min_idx = i
        node_idx = 0

        # Go down until the paths to i and j split.
        while True:
            node = tree[node_idx]

            if node.fr_idx == i and node.to_idx == j:
                return node.min_idx

            left_to = tree[node.left].to_idx
            if j <= left_to:
                node_idx = node.left
            elif i > left_to:
                node_idx = node.right
            else:
                break

        split = tree[node_idx]

        # Go down left searching for i, collecting skipped right children.
        i_node = tree[split.left]
        while i_node.fr_idx != i:
            if i <= tree[i_node.left].to_idx:
                min_idx = min_index(data, min_idx, tree[i_node.right].min_idx)
                i_node = tree[i_node.left]
            else:
                i_node = tree[i_node.right]
        min_idx = min_index(data, min_idx, i_node.min_idx)

        # Go down right searching for j, collecting skipped left children.
        j_node = tree[split.right]
        while j_node.to_idx != j:
            left_child = tree[j_node.left]
            if j <= left_child.to_idx:
                j_node = left_child
            else:
                min_idx = min_index(data, min_idx, left_child.min_idx)
                j_node = tree[j_node.right]
        min_idx = min_index(data, min_idx, j_node.min_idx)

        return min_idx
