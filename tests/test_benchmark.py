import pytest

from bfc_rmq import (NoPreprocessing, PlusMinus, Rmq, SegmentTree, SparseTable,
                     has_plus_minus_property)
from bfc_rmq.benchmark import (ALGORITHMS, LABELS, generate_data, generate_plus_minus,
                               generate_tree, get_algorithm, get_ancestor_runtime,
                               get_plus_minus_runtime, get_runtime, make_rng,
                               random_index_pairs, verify_algorithms, verify_plus_minus)


class FirstIndex(Rmq):
    """Deliberately wrong: always answers the left end."""

    def process_data(self):
        pass

    def query(self, i, j):
        return i


def test_generate_data_is_seeded():
    a = generate_data(500, make_rng(1))
    b = generate_data(500, make_rng(1))
    c = generate_data(500, make_rng(2))

    assert len(a) == 500
    assert a == b
    assert a != c
    assert min(a) < 0


def test_generate_plus_minus():
    data = generate_plus_minus(1000, make_rng(4))

    assert len(data) == 1000
    assert has_plus_minus_property(data)
    assert generate_plus_minus(0, make_rng(4)) == ()
    assert len(generate_plus_minus(1, make_rng(4))) == 1


def test_generate_tree():
    tree = generate_tree(200, make_rng(9))

    assert len(tree) == 200
    roots = [u for u in range(200) if tree.parent(u) is None]
    assert roots == [tree.root]

    # Every node reaches the root.
    for u in range(200):
        steps = 0
        while tree.parent(u) is not None:
            u = tree.parent(u)
            steps += 1
            assert steps < 200
        assert u == tree.root


def test_random_index_pairs():
    pairs = random_index_pairs(make_rng(0), 10, 1000)

    assert len(pairs) == 1000
    assert all(0 <= i < j < 10 for i, j in pairs)
    assert random_index_pairs(make_rng(0), 1, 3) == [(0, 0)] * 3


def test_registry():
    assert set(ALGORITHMS) == set(LABELS)
    assert get_algorithm('sparse_table') is SparseTable
    assert get_algorithm('plus_minus') is PlusMinus

    with pytest.raises(ValueError):
        get_algorithm('fenwick')


@pytest.mark.parametrize("name", ['naive', 'segment_tree', 'sparse_table', 'lca_rmq'])
def test_verify_algorithms(name):
    assert verify_algorithms(NoPreprocessing, get_algorithm(name), 300, 500, 17)


def test_verify_detects_wrong_algorithm():
    assert not verify_algorithms(NoPreprocessing, FirstIndex, 300, 500, 17)


@pytest.mark.parametrize("rmq_class", [SparseTable, SegmentTree, NoPreprocessing])
def test_verify_plus_minus(rmq_class):
    assert verify_plus_minus(rmq_class, 2000, 1000, 23)


def test_runtimes():
    for time_pair in [
        get_runtime(SparseTable, 500, 1000, 1),
        get_plus_minus_runtime(PlusMinus, 500, 1000, 1),
        get_ancestor_runtime(PlusMinus, 500, 1000, 1),
    ]:
        assert len(time_pair) == 2
        assert all(t >= 0 for t in time_pair)
