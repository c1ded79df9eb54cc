"""
Range Minimum Queries and Lowest Common Ancestors

Implementation of the RMQ algorithms presented in:

    M. A. Bender, M. Farach-Colton: The LCA Problem Revisited.
    LATIN 2000, LNCS 1776, 88-94, 2000.
"""

from .base import Rmq, has_plus_minus_property, log_c, log_f, min_index
from .lca import Lca, LcaRmq, cartesian_tree
from .naive import Naive
from .no_preprocessing import NoPreprocessing, ReferenceRmq
from .plus_minus import PlusMinus
from .segment_tree import SegmentTree
from .sparse_table import SparseTable
from .tree import NULL_NODE, EulerTour, Tree

__version__ = "1.0.0"

__all__ = [
    'Rmq',
    'ReferenceRmq',
    'NoPreprocessing',
    'Naive',
    'SegmentTree',
    'SparseTable',
    'PlusMinus',
    'LcaRmq',
    'Lca',
    'Tree',
    'EulerTour',
    'NULL_NODE',
    'cartesian_tree',
    'min_index',
    'log_f',
    'log_c',
    'has_plus_minus_property',
]
