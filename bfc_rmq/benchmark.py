"""
Correctness and Runtime Comparison of RMQ Algorithms

This module provides:
- Seeded generators for random data, +-1 data and random trees
- Verification of one algorithm against another on random queries
- Runtime measurement of preprocessing and queries (in milliseconds)
- A registry to select algorithms by name
"""

import logging
import time
from typing import Dict, List, Optional, Sequence, Tuple, Type

import numpy as np

from .base import Rmq, log_f
from .lca import Lca, LcaRmq
from .naive import Naive
from .no_preprocessing import NoPreprocessing, ReferenceRmq
from .plus_minus import PlusMinus
from .segment_tree import SegmentTree
from .sparse_table import SparseTable
from .tree import Tree

logger = logging.getLogger(__name__)

# (preprocessing ms, query ms)
TimePair = Tuple[float, float]

ALGORITHMS: Dict[str, Type[Rmq]] = {
    'reference': ReferenceRmq,
    'no_preprocessing': NoPreprocessing,
    'naive': Naive,
    'segment_tree': SegmentTree,
    'sparse_table': SparseTable,
    'plus_minus': PlusMinus,
    'lca_rmq': LcaRmq,
}

LABELS: Dict[str, str] = {
    'reference': 'Reference',
    'no_preprocessing': 'No Pre-Processing',
    'naive': 'Naive',
    'segment_tree': 'Segment Tree',
    'sparse_table': 'Sparse Table',
    'plus_minus': 'Plus Minus 1',
    'lca_rmq': 'RMQ via +-1 LCA',
}


def get_algorithm(name: str) -> Type[Rmq]:
    """
    Look up an RMQ algorithm by name.

    Raises:
        ValueError: if the name is unknown
    """
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm '{name}'. Choose from: {', '.join(ALGORITHMS)}"
        ) from None


def make_rng(seed: Optional[int]) -> np.random.Generator:
    return np.random.default_rng(seed)


def _value_range(size: int) -> Tuple[int, int]:
    max_val = max(1, size * log_f(size))
    return max_val, max_val >> 2


def generate_data(size: int, rng: np.random.Generator) -> Tuple[int, ...]:
    """Generate size random integers, roughly a quarter of them negative."""
    max_val, shift = _value_range(size)
    values = rng.integers(0, max_val, size=size) - shift
    return tuple(values.tolist())


def generate_plus_minus(size: int, rng: np.random.Generator) -> Tuple[int, ...]:
    """Generate size integers satisfying the +-1 property (a random walk)."""
    if size == 0:
        return ()

    max_val, shift = _value_range(size)
    start = int(rng.integers(0, max_val)) - shift
    steps = rng.choice(np.array([1, -1]), size=size - 1)

    values = start + np.concatenate(([0], np.cumsum(steps)))
    return tuple(values.tolist())


def generate_tree(size: int, rng: np.random.Generator) -> Tree:
    """
    Generate a random tree with nodes 0..size-1.

    Node IDs are shuffled; every node after the first in that order is
    attached to a random node before it.
    """
    nodes = rng.permutation(size).tolist()
    parents: List[Optional[int]] = [None] * size

    if size > 1:
        picks = rng.integers(0, np.arange(1, size)).tolist()
        for i in range(1, size):
            parents[nodes[i]] = nodes[picks[i - 1]]

    return Tree.from_parents(parents)


def random_index_pairs(rng: np.random.Generator, max_index: int,
                       count: int) -> List[Tuple[int, int]]:
    """
    Draw count pairs of indices i < j < max_index (i == j == 0 if max_index is 1).
    """
    if max_index <= 1:
        return [(0, 0)] * count

    i = rng.integers(0, max_index, size=count)
    j = rng.integers(0, max_index - 1, size=count)
    j = j + (i <= j)

    lo = np.minimum(i, j).tolist()
    hi = np.maximum(i, j).tolist()
    return list(zip(lo, hi))


def _compare(rmq1: Rmq, rmq2: Rmq, data: Sequence,
             rng: np.random.Generator, queries: int) -> bool:
    rmq1.process_data()
    rmq2.process_data()

    for i, j in random_index_pairs(rng, len(data), queries):
        min1 = rmq1.query(i, j)
        min2 = rmq2.query(i, j)

        if data[min1] != data[min2]:
            logger.debug(
                f"Mismatch on [{i}, {j}]: {type(rmq1).__name__} -> {min1}, "
                f"{type(rmq2).__name__} -> {min2}"
            )
            return False

    return True


def verify_algorithms(rmq_class_1: Type[Rmq], rmq_class_2: Type[Rmq],
                      data_size: int, queries: int, seed: int) -> bool:
    """
    Verify that two RMQ algorithms find equal minima on random data.

    Returns:
        True if all queries agree in value
    """
    rng = make_rng(seed)
    data = generate_data(data_size, rng)

    return _compare(rmq_class_1(data), rmq_class_2(data), data, rng, queries)


def verify_plus_minus(rmq_class: Type[Rmq], data_size: int,
                      queries: int, seed: int) -> bool:
    """
    Verify PlusMinus against another RMQ algorithm on random +-1 data.

    Returns:
        True if all queries agree in value
    """
    rng = make_rng(seed)
    data = generate_plus_minus(data_size, rng)

    return _compare(PlusMinus(data), rmq_class(data), data, rng, queries)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def _measure(rmq: Rmq, rng: np.random.Generator, data_size: int,
             queries: int) -> TimePair:
    start = time.perf_counter()
    rmq.process_data()
    p_time = _elapsed_ms(start)

    pairs = random_index_pairs(rng, data_size, queries)
    query = rmq.query

    start = time.perf_counter()
    for i, j in pairs:
        query(i, j)
    q_time = _elapsed_ms(start)

    return p_time, q_time


def get_runtime(rmq_class: Type[Rmq], data_size: int, queries: int,
                seed: int) -> TimePair:
    """
    Measure the runtime of the given algorithm on random data.

    Returns:
        (preprocessing ms, query ms)
    """
    rng = make_rng(seed)
    data = generate_data(data_size, rng)

    return _measure(rmq_class(data), rng, data_size, queries)


def get_plus_minus_runtime(rmq_class: Type[Rmq], data_size: int, queries: int,
                           seed: int) -> TimePair:
    """
    Measure the runtime of the given algorithm on random +-1 data.

    Returns:
        (preprocessing ms, query ms)
    """
    rng = make_rng(seed)
    data = generate_plus_minus(data_size, rng)

    return _measure(rmq_class(data), rng, data_size, queries)


def get_ancestor_runtime(rmq_class: Type[Rmq], tree_size: int, queries: int,
                         seed: int) -> TimePair:
    """
    Measure LCA preprocessing and queries on a random tree, using the given
    RMQ algorithm over the Euler tour.

    Returns:
        (preprocessing ms, query ms)
    """
    rng = make_rng(seed)
    tree = generate_tree(tree_size, rng)
    lca = Lca(tree, rmq_class)

    start = time.perf_counter()
    lca.process_data()
    p_time = _elapsed_ms(start)

    pairs = random_index_pairs(rng, tree_size, queries)

    start = time.perf_counter()
    for u, v in pairs:
        lca.query(u, v)
    q_time = _elapsed_ms(start)

    return p_time, q_time
