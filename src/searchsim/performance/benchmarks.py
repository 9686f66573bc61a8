"""
benchmarks.py - Timing harness for the search and sort algorithms

Wraps each algorithm call in a trial loop, measures wall-clock time with
``time.perf_counter`` (monotonic, sub-microsecond), then scales every
measured duration by the chosen CPU profile.  The scaled durations form a
timing series that the reporting layer summarises.

Trial isolation
---------------
Sorts mutate their input, so every sort trial receives a brand-new
unsorted copy of the corpus built *outside* the timed region.  Without
this, trial 2 onwards would be sorting an already sorted list and the
numbers would measure a different workload.

Scenarios
---------
    LinearSearch  - count titles containing the keyword (full scan)
    BinarySearch  - exact lookup of an existing title in the sorted copy
    BubbleSort    - O(n^2) reference sort
    QuickSort     - Lomuto quicksort
    MergeSort     - top-down merge sort
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import numpy as np

from searchsim.algorithms.search import binary_search, linear_search_count
from searchsim.algorithms.sorting import SORT_ALGORITHMS
from searchsim.core.config import BenchmarkConfig, InvalidConfiguration
from searchsim.core.constants import NOT_FOUND, get_algorithm_name
from searchsim.core.documents import Corpus
from searchsim.performance.cpu_profiles import CPUProfile
from searchsim.reporting.statistics import TimingSummary, summarize

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Timing series and context for one (algorithm, CPU profile) pair."""
    algorithm: str
    cpu: str
    doc_count: int
    timings: np.ndarray                     # adjusted seconds, one per trial
    raw_timings: np.ndarray                 # measured seconds before scaling
    detail: Dict[str, Any] = field(default_factory=dict)

    def summary(self) -> TimingSummary:
        return summarize(self.timings)


class Benchmark:
    """
    Search/sort benchmarking harness.

    All public methods are static; state lives in the Corpus and the
    random source passed in by the caller.
    """

    # ---- Core measurement helpers ----------------------------------------

    @staticmethod
    def measure(
        operation: Callable,
        trials: int,
        setup: Optional[Callable[[], Any]] = None,
    ) -> Tuple[np.ndarray, Any]:
        """
        Run *operation* *trials* times and return raw durations in seconds.

        When *setup* is given it is called before each trial, outside the
        timed region, and its return value is passed to *operation*.

        Returns
        -------
        (times, last_result)
            times is a float64 array of length *trials*; last_result is
            what the final trial returned.
        """
        if isinstance(trials, bool) or not isinstance(trials, (int, np.integer)) or trials <= 0:
            raise InvalidConfiguration(f"Trial count must be a positive integer, got {trials!r}")

        times = np.empty(int(trials), dtype=np.float64)
        result = None
        for i in range(int(trials)):
            if setup is not None:
                arg = setup()
                t0 = time.perf_counter()
                result = operation(arg)
                t1 = time.perf_counter()
            else:
                t0 = time.perf_counter()
                result = operation()
                t1 = time.perf_counter()
            times[i] = t1 - t0

        if not np.any(times):
            logger.warning(
                "All %d trials measured 0 s; the workload is too small for the "
                "clock resolution", trials,
            )
        return times, result

    @staticmethod
    def time_function(
        operation: Callable,
        trials: int,
        cpu: Union[CPUProfile, int, str],
        setup: Optional[Callable[[], Any]] = None,
    ) -> np.ndarray:
        """Time *operation* and return the CPU-adjusted timing series."""
        profile = CPUProfile.from_choice(cpu)
        raw, _ = Benchmark.measure(operation, trials, setup=setup)
        return profile.adjust(raw)

    @staticmethod
    def _result(algorithm: str, cpu: CPUProfile, corpus: Corpus,
                raw: np.ndarray, detail: Dict[str, Any]) -> BenchmarkResult:
        return BenchmarkResult(
            algorithm=algorithm,
            cpu=cpu.label,
            doc_count=len(corpus),
            timings=cpu.adjust(raw),
            raw_timings=raw,
            detail=detail,
        )

    # ---- Benchmark scenarios --------------------------------------------

    @staticmethod
    def benchmark_linear_search(
        corpus: Corpus,
        keyword: str,
        trials: int,
        cpu: Union[CPUProfile, int, str],
        rng: Optional[np.random.Generator] = None,
        shuffle: bool = False,
    ) -> BenchmarkResult:
        """
        Time a full substring scan for *keyword*.

        With *shuffle*, each trial scans a private copy of the corpus
        shuffled by *rng*; the canonical order is never touched and the
        match count is unaffected.
        """
        profile = CPUProfile.from_choice(cpu)
        if shuffle:
            if rng is None:
                raise ValueError("shuffle=True requires a random source")

            def shuffled_copy():
                docs = corpus.working_copy()
                rng.shuffle(docs)
                return docs

            raw, matches = Benchmark.measure(
                lambda docs: linear_search_count(docs, keyword), trials, setup=shuffled_copy,
            )
        else:
            documents = corpus.documents
            raw, matches = Benchmark.measure(
                lambda: linear_search_count(documents, keyword), trials,
            )
        return Benchmark._result("LinearSearch", profile, corpus, raw,
                                 {"keyword": keyword, "matches": matches})

    @staticmethod
    def benchmark_binary_search(
        corpus: Corpus,
        target: str,
        trials: int,
        cpu: Union[CPUProfile, int, str],
    ) -> BenchmarkResult:
        """Time an exact lookup of *target* in the corpus's sorted titles."""
        profile = CPUProfile.from_choice(cpu)
        sorted_titles = corpus.sorted_titles
        raw, index = Benchmark.measure(lambda: binary_search(sorted_titles, target), trials)
        if index == NOT_FOUND:
            logger.debug("Binary search target not in corpus: %r", target)
        return Benchmark._result("BinarySearch", profile, corpus, raw,
                                 {"target": target, "index": index})

    @staticmethod
    def benchmark_sort(
        corpus: Corpus,
        algorithm: str,
        trials: int,
        cpu: Union[CPUProfile, int, str],
    ) -> BenchmarkResult:
        """Time one sort algorithm on a fresh unsorted copy per trial."""
        profile = CPUProfile.from_choice(cpu)
        name = get_algorithm_name(algorithm)
        if name not in SORT_ALGORITHMS:
            raise InvalidConfiguration(f"{name} is not a sort algorithm")
        sort_fn = SORT_ALGORITHMS[name]

        raw, ordered = Benchmark.measure(sort_fn, trials, setup=corpus.working_copy)

        verified = [d.title for d in ordered] == list(corpus.sorted_titles)
        if not verified:
            logger.error("%s produced an out-of-order result", name)
        return Benchmark._result(name, profile, corpus, raw, {"verified": verified})

    @staticmethod
    def benchmark_algorithm(
        algorithm: str,
        corpus: Corpus,
        cpu: Union[CPUProfile, int, str],
        trials: int,
        keyword: Optional[str] = None,
        target: Optional[str] = None,
        rng: Optional[np.random.Generator] = None,
        shuffle: bool = False,
    ) -> BenchmarkResult:
        """
        Benchmark any algorithm by name.

        keyword defaults to the corpus keyword; target defaults to the
        middle title of the sorted order.
        """
        name = get_algorithm_name(algorithm)
        if name == "LinearSearch":
            kw = corpus.keyword if keyword is None else keyword
            return Benchmark.benchmark_linear_search(corpus, kw, trials, cpu,
                                                     rng=rng, shuffle=shuffle)
        if name == "BinarySearch":
            tgt = corpus.middle_title() if target is None else target
            return Benchmark.benchmark_binary_search(corpus, tgt, trials, cpu)
        return Benchmark.benchmark_sort(corpus, name, trials, cpu)

    # ---- Orchestration ---------------------------------------------------

    @staticmethod
    def run_suite(
        corpus: Corpus,
        config: BenchmarkConfig,
        rng: Optional[np.random.Generator] = None,
        target: Optional[str] = None,
    ) -> List[BenchmarkResult]:
        """
        Run every configured algorithm under every configured CPU profile.

        Parameters
        ----------
        corpus : Corpus
            Corpus generated for this run.
        config : BenchmarkConfig
            Validated run parameters.
        rng : numpy Generator, optional
            The run's random source, used for linear-search shuffling.
        target : str, optional
            Binary-search target.  Defaults to documents[seed % n] for a
            seeded run, otherwise the middle sorted title.

        Returns
        -------
        list of BenchmarkResult, algorithm-major order.
        """
        if target is None:
            target = (corpus.target_for_seed(config.seed) if config.seed is not None
                      else corpus.middle_title())

        results: List[BenchmarkResult] = []
        for algorithm in config.algorithms:
            for cpu in config.cpu_profiles:
                logger.info("Running %s on %s CPU (%d docs, %d trials)",
                            algorithm, cpu, len(corpus), config.trials)
                results.append(Benchmark.benchmark_algorithm(
                    algorithm, corpus, cpu, config.trials,
                    keyword=config.keyword, target=target,
                    rng=rng, shuffle=config.shuffle_linear,
                ))
        return results
