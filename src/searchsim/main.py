#!/usr/bin/env python3
"""
===============================================================================
SEARCHSIM - MAIN ENTRY POINT
===============================================================================
Search & sorting benchmark over a synthetic document corpus.

USAGE:
    searchsim                          # Interactive prompts (TTY only)
    searchsim --fixed                  # Reproducible search run, all CPUs
    searchsim --docs 2000 --cpu pro    # Non-interactive, all algorithms
    searchsim --docs 500 --algorithms quick_sort merge_sort --stats range
    searchsim --fixed --output-dir out --plot

MODES:
    interactive  Prompt for document count, keyword and CPU choice; run all
                 five algorithms on that CPU; print Mean/Best/Worst per
                 algorithm and an ASCII bar chart.
    fixed        Seeded corpus (default seed 1234); linear and binary search
                 on every CPU profile; linear trials scan a reshuffled
                 copy; Mean/StdDev table plus sample checks.
    batch        Any run driven by flags / config without prompts.

CPU SCALING:
    adjusted = measured / factor   (Basic 1.0, Mid 2.0, Pro 3.5)
===============================================================================
"""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, Tuple

import numpy as np

from searchsim.core.config import BenchmarkConfig, InvalidConfiguration, load_config
from searchsim.core.constants import DEFAULT_SEED, INTERACTIVE_TRIALS, NOT_FOUND
from searchsim.core.documents import Corpus, generate_corpus
from searchsim.algorithms.search import binary_search, linear_search_count
from searchsim.performance.benchmarks import Benchmark, BenchmarkResult
from searchsim.performance.cpu_profiles import CPUProfile
from searchsim.reporting.report import format_report, write_artifacts

logger = logging.getLogger('searchsim')


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def prompt_parameters(config: BenchmarkConfig,
                      input_fn: Callable[[str], str] = input) -> BenchmarkConfig:
    """
    Ask for document count, keyword and CPU choice on the console.

    Raises:
        InvalidConfiguration: If the document count is not an integer or
                              the CPU choice names no profile.
    """
    print("=== Search & Sorting Benchmark Tool ===")
    raw_count = input_fn("Enter number of documents: ").strip()
    try:
        config.doc_count = int(raw_count)
    except ValueError as exc:
        raise InvalidConfiguration(f"Document count must be an integer, got {raw_count!r}") from exc
    config.keyword = input_fn("Enter keyword to search: ")
    choice = input_fn(f"Choose CPU type: {CPUProfile.menu()} ").strip()
    config.cpu_profiles = [CPUProfile.from_choice(choice).label]
    return config


def run_benchmark(config: BenchmarkConfig,
                  target: Optional[str] = None) -> Tuple[Corpus, List[BenchmarkResult]]:
    """
    Validate *config*, generate the corpus and run the benchmark suite.

    A single numpy Generator seeded from config.seed drives both corpus
    generation and any per-trial shuffling.
    """
    config.validate()
    logger.debug("Run configuration: %s", config.to_dict())
    rng = np.random.default_rng(config.seed)

    logger.info("Generating %d documents (seed=%s)", config.doc_count, config.seed)
    corpus = generate_corpus(
        config.doc_count,
        keyword=config.keyword,
        rng=rng,
        keyword_probability=config.keyword_probability,
        min_words=config.min_words,
        max_words=config.max_words,
        vocabulary=config.vocabulary,
    )
    results = Benchmark.run_suite(corpus, config, rng=rng, target=target)
    logger.info("Benchmarks complete: %d timing series", len(results))
    return corpus, results


def sample_checks(corpus: Corpus, keyword: str, target: str) -> List[str]:
    """Sanity lines printed after a fixed run."""
    matches = linear_search_count(corpus.documents, keyword)
    index = binary_search(corpus.sorted_titles, target)
    found = "exists" if index != NOT_FOUND else "NOT FOUND"
    return [
        "Sample checks:",
        f' - Documents containing "{keyword}": {matches}',
        f" - Binary search target title ({found}): {target}",
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='searchsim',
        description='Search & sorting benchmark over synthetic documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  searchsim                              Interactive prompts
  searchsim --fixed                      Reproducible search benchmark
  searchsim --docs 2000 --cpu pro        All algorithms on the Pro CPU
  searchsim --fixed --output-dir out     Also write CSV/Markdown report
        """
    )
    parser.add_argument('--config', type=str, default=None,
                        help='Path to benchmark config YAML')
    parser.add_argument('--interactive', action='store_true',
                        help='Prompt for parameters even when stdin is not a TTY')
    parser.add_argument('--fixed', action='store_true',
                        help='Seeded linear/binary search run on every CPU profile')
    parser.add_argument('--docs', type=int, default=None,
                        help='Number of documents to generate')
    parser.add_argument('--keyword', type=str, default=None,
                        help='Keyword injected into titles and searched for')
    parser.add_argument('--cpu', nargs='+', default=None,
                        help='CPU profile(s): 1/2/3 or basic/mid/pro')
    parser.add_argument('--trials', type=int, default=None,
                        help='Trials per algorithm and CPU')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for the corpus')
    parser.add_argument('--algorithms', nargs='+', default=None,
                        help='Algorithms to run (e.g. linear_search quick_sort)')
    parser.add_argument('--stats', choices=['stddev', 'range'], default=None,
                        help='Report mean/stddev or mean/best/worst')
    parser.add_argument('--shuffle', action='store_true',
                        help='Shuffle a private corpus copy between linear search trials')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Write results.csv and report.md here')
    parser.add_argument('--plot', action='store_true',
                        help='Also write a PNG bar chart (needs --output-dir)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Debug logging')
    return parser


def apply_overrides(config: BenchmarkConfig, args: argparse.Namespace) -> BenchmarkConfig:
    if args.docs is not None:
        config.doc_count = args.docs
    if args.keyword is not None:
        config.keyword = args.keyword
    if args.cpu is not None:
        config.cpu_profiles = list(args.cpu)
    if args.trials is not None:
        config.trials = args.trials
    if args.seed is not None:
        config.seed = args.seed
    if args.algorithms is not None:
        config.algorithms = list(args.algorithms)
    if args.stats is not None:
        config.stats_mode = args.stats
    if args.shuffle:
        config.shuffle_linear = True
    if args.output_dir is not None:
        config.output_dir = args.output_dir
    if args.plot:
        config.plot = True
    return config


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    """
    Main entry point.  Parses command line arguments and runs the
    requested mode.  Returns the process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = BenchmarkConfig.from_dict(load_config(args.config))
        interactive = args.interactive or (
            not args.fixed and args.docs is None and sys.stdin.isatty())

        if args.fixed:
            config.algorithms = ["LinearSearch", "BinarySearch"]
            config.stats_mode = "stddev"
            config.shuffle_linear = True
            if config.seed is None:
                config.seed = DEFAULT_SEED
        elif interactive:
            prompt_parameters(config, input_fn)
            config.trials = INTERACTIVE_TRIALS
            config.stats_mode = "range"
            config.seed = None

        apply_overrides(config, args)

        started = time.perf_counter()
        corpus, results = run_benchmark(config)
    except (InvalidConfiguration, FileNotFoundError) as exc:
        logger.error("Invalid configuration: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except RecursionError:
        # quick sort on an already ordered corpus recurses once per document
        logger.error("Recursion limit exceeded (sorted input to QuickSort?)")
        print("error: recursion limit exceeded; the corpus is too large for "
              "QuickSort on already ordered titles", file=sys.stderr)
        return 1

    if args.fixed:
        print(f"Search Engine Simulation over {len(corpus)} documents")
        print(f'Linear Search: substring match ("{config.keyword}")')
        print("Binary Search: exact match (title chosen from documents)")
        print(f"Trials per CPU/algorithm: {config.trials}")
        print()

    print(format_report(results, config.stats_mode, config.chart_width))

    if args.fixed:
        binary = next((r for r in results if r.algorithm == "BinarySearch"), None)
        target = binary.detail["target"] if binary else corpus.middle_title()
        print()
        print("\n".join(sample_checks(corpus, config.keyword, target)))

    if config.output_dir:
        paths = write_artifacts(results, config.output_dir, config.stats_mode,
                                config.chart_width, plot=config.plot)
        for kind, path in sorted(paths.items()):
            print(f"  {kind}: {path}")
    elif config.plot:
        logger.warning("--plot ignored without --output-dir")

    logger.info("Total wall time: %.3f s", time.perf_counter() - started)
    return 0


if __name__ == '__main__':
    sys.exit(main())
