"""
Benchmark Pipeline - Compare RMQ and LCA Algorithms

Runs every selected RMQ algorithm on the same seeded random data, prints
preprocessing (P) and query (Q) times relative to the reference algorithm,
and checks correctness (C) against a slower algorithm. Then does the same
for LCA queries on a random tree with different RMQs over the Euler tour.

Usage:
    python -m bfc_rmq
    python -m bfc_rmq --size 5000 --queries 200000 --algorithms sparse_table plus_minus
    python -m bfc_rmq --config my_config.yaml --verbose
"""

import argparse
import logging
import os
from typing import Dict, List, Optional

import yaml

from .benchmark import (
    LABELS,
    TimePair,
    get_algorithm,
    get_ancestor_runtime,
    get_plus_minus_runtime,
    get_runtime,
    verify_algorithms,
    verify_plus_minus,
)
from .no_preprocessing import NoPreprocessing, ReferenceRmq
from .sparse_table import SparseTable
from .timing import format_duration

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"


class BenchmarkPipeline:
    """
    Benchmark pipeline for RMQ and LCA algorithms.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config = self._load_config(config_path)
        self.results: Dict[str, Dict] = {}

    def _load_config(self, config_path: Optional[str]) -> Dict:
        """Load configuration, falling back to the defaults."""
        config = self._default_config()

        if config_path is None:
            if not os.path.exists(DEFAULT_CONFIG_PATH):
                logger.warning("No config file found, using defaults")
                return config
            config_path = DEFAULT_CONFIG_PATH
        elif not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, 'r') as f:
            loaded = yaml.safe_load(f) or {}

        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")

        benchmark = loaded.get('benchmark', {})
        if not isinstance(benchmark, dict):
            raise ValueError(f"'benchmark' section in {config_path} must be a mapping")

        config['benchmark'].update(benchmark)
        self._validate(config)

        logger.info(f"Loaded config from {config_path}")
        return config

    @staticmethod
    def _default_config() -> Dict:
        """Default configuration."""
        return {
            'benchmark': {
                'data_size': 2000,
                'queries': 100000,
                'verify_queries': 2000,
                'seed': 19082017,
                'naive_max_size': 3000,
                'tree_size': 20000,
                'algorithms': [
                    'no_preprocessing',
                    'naive',
                    'segment_tree',
                    'sparse_table',
                    'plus_minus',
                    'lca_rmq',
                ],
                'lca_algorithms': [
                    'segment_tree',
                    'sparse_table',
                    'plus_minus',
                ],
            }
        }

    @staticmethod
    def _validate(config: Dict):
        benchmark = config['benchmark']

        for key in ('data_size', 'queries', 'verify_queries', 'tree_size', 'naive_max_size'):
            value = benchmark[key]
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"Config value '{key}' must be a non-negative integer, got {value!r}")

        for key in ('data_size', 'tree_size'):
            if benchmark[key] < 1:
                raise ValueError(f"Config value '{key}' must be at least 1")

        for name in benchmark['algorithms'] + benchmark['lca_algorithms']:
            get_algorithm(name)

    def apply_overrides(self, **overrides):
        """Override config values, ignoring the ones set to None."""
        for key, value in overrides.items():
            if value is not None:
                self.config['benchmark'][key] = value
        self._validate(self.config)

    def run_rmq(self) -> Dict[str, Dict]:
        """
        Time and verify each selected RMQ algorithm.

        Returns:
            {name: {'time': (P, Q) relative to reference, 'correct': bool or None}}
        """
        cfg = self.config['benchmark']
        size = cfg['data_size']
        queries = cfg['queries']
        seed = cfg['seed']

        print(f"   Size: {size}")
        print(f"Queries: {queries}")
        print()

        ref_time = get_runtime(ReferenceRmq, size, queries, seed)
        self._print_result('Reference', ref_time)
        print()

        results = {}
        for name in cfg['algorithms']:
            if name == 'reference':
                continue
            if name == 'naive' and size > cfg['naive_max_size']:
                logger.warning(f"Skipping naive: size {size} > naive_max_size {cfg['naive_max_size']}")
                continue

            logger.info(f"Running {name}...")
            rmq_class = get_algorithm(name)

            if name == 'plus_minus':
                time_pair = get_plus_minus_runtime(rmq_class, size, queries, seed)
                correct = verify_plus_minus(SparseTable, size, cfg['verify_queries'], seed)
            else:
                time_pair = get_runtime(rmq_class, size, queries, seed)
                correct = None
                if name != 'no_preprocessing':
                    correct = verify_algorithms(
                        NoPreprocessing, rmq_class, size, cfg['verify_queries'], seed
                    )

            rel_time = (time_pair[0] - ref_time[0], time_pair[1] - ref_time[1])
            self._print_result(LABELS[name], rel_time, correct)
            print()

            results[name] = {'time': rel_time, 'correct': correct}

        self.results['rmq'] = results
        return results

    def run_lca(self) -> Dict[str, Dict]:
        """
        Time LCA queries with each selected RMQ algorithm.

        Returns:
            {name: {'time': (P, Q) relative to reference}}
        """
        cfg = self.config['benchmark']
        size = cfg['tree_size']
        queries = cfg['queries']
        seed = cfg['seed']

        print()
        print(" --- --- Testing LCA Algorithms. --- ---")
        print(f"   Size: {size}")
        print()

        ref_time = get_ancestor_runtime(ReferenceRmq, size, queries, seed)
        self._print_result('Reference', ref_time)
        print()

        results = {}
        for name in cfg['lca_algorithms']:
            if name == 'reference':
                continue
            if name == 'naive' and 2 * size - 1 > cfg['naive_max_size']:
                logger.warning(f"Skipping naive: tour length exceeds naive_max_size {cfg['naive_max_size']}")
                continue

            logger.info(f"Running LCA with {name}...")
            time_pair = get_ancestor_runtime(get_algorithm(name), size, queries, seed)

            rel_time = (time_pair[0] - ref_time[0], time_pair[1] - ref_time[1])
            self._print_result(LABELS[name], rel_time)
            print()

            results[name] = {'time': rel_time}

        self.results['lca'] = results
        return results

    @staticmethod
    def _print_result(label: str, time_pair: TimePair, correct: Optional[bool] = None):
        print(f"*** {label} ***")
        print(f"P: {format_duration(time_pair[0])}")
        print(f"Q: {format_duration(time_pair[1])}")
        if correct is not None:
            print(f"C: {'Yes' if correct else 'No'}")

    def all_correct(self) -> bool:
        """True unless some verified algorithm disagreed with its reference."""
        return all(
            result['correct'] is not False
            for result in self.results.get('rmq', {}).values()
        )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Benchmark Range Minimum Query and LCA algorithms')
    parser.add_argument('--config', type=str, default=None,
                        help=f'Path to YAML config (default: {DEFAULT_CONFIG_PATH} if present)')
    parser.add_argument('--size', type=int, dest='data_size',
                        help='Number of elements in the RMQ data')
    parser.add_argument('--queries', type=int,
                        help='Number of timed queries')
    parser.add_argument('--seed', type=int,
                        help='Random seed')
    parser.add_argument('--tree-size', type=int, dest='tree_size',
                        help='Number of nodes of the LCA tree')
    parser.add_argument('--algorithms', nargs='+',
                        help='RMQ algorithms to run')
    parser.add_argument('--skip-lca', action='store_true',
                        help='Do not run the LCA benchmark')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        pipeline = BenchmarkPipeline(args.config)
        pipeline.apply_overrides(
            data_size=args.data_size,
            queries=args.queries,
            seed=args.seed,
            tree_size=args.tree_size,
            algorithms=args.algorithms,
        )
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    pipeline.run_rmq()
    if not args.skip_lca:
        pipeline.run_lca()

    return 0 if pipeline.all_correct() else 1


if __name__ == "__main__":
    raise SystemExit(main())
