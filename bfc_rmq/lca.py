"""
Lowest Common Ancestor using Euler Tour + RMQ

For a tree with Euler tour (e, l, r):

    lca(u, v) = e[rmq.query(min(r[u], r[v]), max(r[u], r[v]))]

where rmq answers minimum queries over the level array l. Since l has the
+-1 property, PlusMinus gives O(n) preprocessing and O(1) queries.

The reduction also runs the other way: the LCA of i and j in the
Cartesian tree of an array is the minimum of the array in [i, j]. LcaRmq
uses this to answer general RMQs in O(n) | O(1).
"""

import logging
from typing import Dict, List, Optional, Sequence, Type

from .base import Rmq
from .plus_minus import PlusMinus
from .tree import EulerTour, Tree

logger = logging.getLogger(__name__)


class Lca:
    """
    Lowest Common Ancestor queries on a rooted tree.

    Features:
    - Works with any Rmq class over the level array
    - One RMQ query per LCA query
    """

    def __init__(self, tree: Tree, rmq_class: Type[Rmq] = PlusMinus):
        """
        Args:
            tree: The rooted tree
            rmq_class: RMQ algorithm used over the Euler tour levels
        """
        self.tree = tree
        self.rmq_class = rmq_class
        self.tour: Optional[EulerTour] = None
        self.rmq: Optional[Rmq] = None

    def process_data(self):
        """Build the Euler tour and the RMQ over its levels."""
        self.tour = self.tree.euler_tour()
        self.rmq = self.rmq_class(self.tour.l)
        self.rmq.process_data()

        logger.debug(
            f"LCA structure ready: {len(self.tree)} nodes, "
            f"tour length {len(self.tour)}, rmq={self.rmq_class.__name__}"
        )

    def query(self, u: int, v: int) -> int:
        """
        Find the Lowest Common Ancestor of u and v.

        Args:
            u: First node ID
            v: Second node ID

        Returns:
            LCA node ID
        """
        if self.rmq is None:
            raise ValueError("LCA structure not initialized. Run process_data first.")

        r = self.tour.r
        i = r[u]
        j = r[v]
        if i > j:
            i, j = j, i

        return self.tour.e[self.rmq.query(i, j)]

    def depth(self, u: int) -> int:
        """Depth of u; the root has depth 0."""
        return self.tour.l[self.tour.r[u]] - 1

    def distance(self, u: int, v: int) -> int:
        """
        Number of edges on the path from u to v.

        distance = depth(u) + depth(v) - 2 * depth(lca(u, v))
        """
        if u == v:
            return 0
        return self.depth(u) + self.depth(v) - 2 * self.depth(self.query(u, v))

    def stats(self) -> Dict:
        """Get statistics about the LCA structure."""
        levels = self.tour.l if self.tour else []
        return {
            'num_nodes': len(self.tree),
            'euler_tour_length': len(levels),
            'max_depth': max(levels) - 1 if levels else 0,
            'rmq': self.rmq_class.__name__,
        }


def cartesian_tree(data: Sequence) -> Tree:
    """
    Build the Cartesian tree of data in O(n).

    Node i stands for data[i]. A node's value is never larger than its
    descendants' values, and among equal values the earlier one is the
    ancestor, so LCAs give the leftmost minimum.
    """
    n = len(data)
    parents: List[Optional[int]] = [None] * n

    # Right spine of the tree built so far.
    stack: List[int] = []
    for i in range(n):
        last = None
        while stack and data[stack[-1]] > data[i]:
            last = stack.pop()

        if last is not None:
            parents[last] = i
        parents[i] = stack[-1] if stack else None
        stack.append(i)

    return Tree.from_parents(parents)


class LcaRmq(Rmq):
    """
    General RMQ via +-1 LCA.

    Preprocessing: O(n)
    Query: O(1)
    """

    def __init__(self, data: Sequence, rmq_class: Type[Rmq] = PlusMinus):
        super().__init__(data)
        self.rmq_class = rmq_class
        self.lca: Optional[Lca] = None

    def process_data(self):
        if len(self.data) == 0:
            return

        self.lca = Lca(cartesian_tree(self.data), self.rmq_class)
        self.lca.process_data()

    def query(self, i: int, j: int) -> int:
        return self.lca.query(i, j)
