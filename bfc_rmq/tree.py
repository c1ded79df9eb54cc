"""
Rooted Trees and Euler Tours

A tree is given by its parent array; the root's parent is None (or -1).
Node IDs are 0..n-1.

The Euler tour (https://en.wikipedia.org/wiki/Euler_tour_technique)
linearizes the tree into:
- e: the node visited at each step of a DFS (length 2n - 1)
- l: the level (depth + 1) at each step; consecutive levels differ by
  exactly 1
- r: for each node, the index of its first occurrence in e
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

NULL_NODE = -1


@dataclass
class EulerTour:
    """Euler tour of a tree."""
    e: List[int] = field(default_factory=list)
    l: List[int] = field(default_factory=list)
    r: List[int] = field(default_factory=list)

    def __len__(self):
        return len(self.e)


class Tree:
    """
    Rooted tree with parent and child lists.

    Cycles are not checked; a parent array with exactly one root and no
    cycles describes a tree.
    """

    def __init__(self):
        """Create an empty tree."""
        self.root: Optional[int] = None
        self.parents: List[Optional[int]] = []
        self.children_lists: List[List[int]] = []

    @classmethod
    def from_parents(cls, parents: Sequence[Optional[int]]) -> "Tree":
        """
        Create a tree from a parent array.

        Args:
            parents: parents[u] is the parent of node u, None or -1 for the root

        Returns:
            Tree instance

        Raises:
            ValueError: if there is no root or more than one root
        """
        tree = cls()
        tree.parents = [None if p is None or p == NULL_NODE else p for p in parents]
        tree.children_lists = [[] for _ in range(len(parents))]

        for u, p in enumerate(tree.parents):
            if p is None:
                if tree.root is not None:
                    raise ValueError(f"Tree has more than one root: {tree.root} and {u}")
                tree.root = u
            else:
                tree.children_lists[p].append(u)

        if parents and tree.root is None:
            raise ValueError("Tree has no root")

        return tree

    def __len__(self) -> int:
        return len(self.parents)

    def parent(self, u: int) -> Optional[int]:
        """Parent of u, None for the root."""
        return self.parents[u]

    def children(self, u: int) -> List[int]:
        """Children of u in insertion order."""
        return self.children_lists[u]

    def euler_tour(self) -> EulerTour:
        """
        Compute an Euler tour with an explicit stack (no recursion), so deep
        trees do not hit the recursion limit.

        Returns:
            EulerTour with len(e) == len(l) == 2n - 1 and len(r) == n
        """
        n = len(self.parents)
        tour = EulerTour(r=[0] * n)

        if n == 0:
            return tour

        e = tour.e
        l = tour.l
        r = tour.r

        # Next child to visit for each node.
        ch_idx = [0] * n
        seen = [False] * n

        stack = [self.root]
        while stack:
            v = stack[-1]

            if not seen[v]:
                seen[v] = True
                r[v] = len(e)
            e.append(v)
            l.append(len(stack))

            children = self.children_lists[v]
            if ch_idx[v] < len(children):
                stack.append(children[ch_idx[v]])
                ch_idx[v] += 1
            else:
                # All children visited, backtrack.
                stack.pop()

        logger.debug(f"Euler tour computed: {n} nodes, {len(e)} steps")
        return tour
