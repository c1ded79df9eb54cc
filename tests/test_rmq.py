import numpy as np
import pytest

from bfc_rmq import (LcaRmq, Naive, NoPreprocessing, ReferenceRmq, SegmentTree,
                     SparseTable, log_c, log_f, min_index)
from bfc_rmq.benchmark import generate_data, make_rng
from bfc_rmq.segment_tree import tree_size

ALGORITHMS = [NoPreprocessing, Naive, SegmentTree, SparseTable, LcaRmq]


def build(rmq_class, data):
    rmq = rmq_class(data)
    rmq.process_data()
    return rmq


def leftmost_minima(data):
    """Yield (i, j, index of the leftmost minimum of data[i..j]) for all i <= j."""
    for i in range(len(data)):
        best = i
        for j in range(i, len(data)):
            if data[j] < data[best]:
                best = j
            yield i, j, best


def test_log_helpers():
    assert [log_f(n) for n in [0, 1, 2, 3, 4, 7, 8, 1023, 1024]] == [0, 0, 1, 1, 2, 2, 3, 9, 10]
    assert [log_c(n) for n in [1, 2, 3, 4, 5, 8, 9]] == [0, 1, 2, 2, 3, 3, 4]


def test_min_index_prefers_lower_index():
    data = [3, 1, 1, 0]
    assert min_index(data, 1, 2) == 1
    assert min_index(data, 2, 1) == 1
    assert min_index(data, 0, 3) == 3
    assert min_index(data, 0, 0) == 0


@pytest.mark.parametrize("rmq_class", ALGORITHMS)
def test_known_answers(rmq_class):
    a = [8, 6, 4, 6, 10, 2, 3, 5, 0]
    rmq = build(rmq_class, a)

    assert rmq.query(0, 2) == 2
    assert rmq.query(3, 5) == 5
    assert rmq.query(6, 7) == 6
    assert rmq.query(3, 4) == 3
    assert rmq.query(0, 8) == 8


@pytest.mark.parametrize("rmq_class", ALGORITHMS)
def test_singleton_queries(rmq_class):
    data = [5, -3, 7, 7, 0, 2]
    rmq = build(rmq_class, data)

    for i in range(len(data)):
        assert rmq.query(i, i) == i


@pytest.mark.parametrize("rmq_class", ALGORITHMS)
def test_single_element(rmq_class):
    rmq = build(rmq_class, [42])
    assert rmq.query(0, 0) == 0


@pytest.mark.parametrize("rmq_class", ALGORITHMS)
def test_full_range_is_global_argmin(rmq_class):
    data = [3, 1, 4, 1, 5, 9, 2, 6]
    rmq = build(rmq_class, data)
    assert rmq.query(0, len(data) - 1) == 1


@pytest.mark.parametrize("rmq_class", ALGORITHMS)
def test_ties_resolve_to_leftmost(rmq_class):
    data = [2, 0, 5, 0, 0, 7, 0, 0]
    rmq = build(rmq_class, data)

    for i, j, expected in leftmost_minima(data):
        assert rmq.query(i, j) == expected, (i, j)


@pytest.mark.parametrize("rmq_class", ALGORITHMS)
@pytest.mark.parametrize("size", [2, 3, 5, 17, 64, 100])
def test_all_ranges_on_random_data(rmq_class, size):
    data = generate_data(size, make_rng(size))
    rmq = build(rmq_class, data)

    for i, j, expected in leftmost_minima(data):
        assert rmq.query(i, j) == expected, (i, j)


@pytest.mark.parametrize("rmq_class", [SegmentTree, SparseTable])
def test_values_agree_with_oracle_on_larger_data(rmq_class):
    rng = make_rng(7)
    data = generate_data(3000, rng)
    oracle = build(NoPreprocessing, data)
    rmq = build(rmq_class, data)

    for _ in range(500):
        i, j = sorted(rng.integers(0, len(data), size=2).tolist())
        assert data[rmq.query(i, j)] == data[oracle.query(i, j)]


@pytest.mark.parametrize("rmq_class", ALGORITHMS)
def test_numpy_and_float_data(rmq_class):
    data = np.array([0.5, -1.25, 3.0, -1.25, 2.0])
    rmq = build(rmq_class, data)

    assert rmq.query(0, 4) == 1
    assert rmq.query(2, 4) == 3
    assert rmq.query(2, 2) == 2


def test_data_is_not_modified():
    data = [4, 2, 8, 1, 9, 3]
    snapshot = list(data)

    for rmq_class in ALGORITHMS:
        rmq = build(rmq_class, data)
        rmq.query(0, 5)

    assert data == snapshot


def test_reference_always_answers_zero():
    rmq = build(ReferenceRmq, [3, 2, 1])
    assert rmq.query(1, 2) == 0


def test_segment_tree_size():
    assert [tree_size(n) for n in [1, 2, 3, 4, 5, 8]] == [1, 3, 6, 7, 11, 15]


def test_segment_tree_layout():
    rmq = build(SegmentTree, [5, 3, 9])
    root = rmq.tree[0]

    assert (root.fr_idx, root.to_idx, root.min_idx) == (0, 2, 1)
    left, right = rmq.tree[root.left], rmq.tree[root.right]
    assert (left.fr_idx, left.to_idx) == (0, 1)
    assert (right.fr_idx, right.to_idx) == (2, 2)

    # Leaves are the last n nodes.
    assert [node.min_idx for node in rmq.tree[-3:]] == [0, 1, 2]


def test_sparse_table_rows():
    data = [4, 1, 3, 0, 2]
    rmq = build(SparseTable, data)

    assert rmq.height == 3
    assert rmq.table[0] == [0, 1, 2, 3, 4]
    assert rmq.table[1] == [1, 1, 3, 3, 4]
    assert rmq.table[2] == [3, 3, 3, 3, 4]


def test_naive_table_is_symmetric():
    rmq = build(Naive, [3, 1, 2])
    assert rmq.table == [[0, 1, 1], [1, 1, 1], [1, 1, 2]]
