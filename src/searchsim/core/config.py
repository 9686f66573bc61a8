"""
===============================================================================
SEARCHSIM - Benchmark Configuration
===============================================================================
Loads benchmark parameters from YAML and validates them before any corpus
is generated or any trial is timed.  A run either starts with a fully valid
configuration or does not start at all.

YAML layout (see config/benchmark_config.yaml)::

    corpus:
      doc_count: 1000
      keyword: KEYWORD42
      keyword_probability: 0.08
      min_words: 3
      max_words: 5
      seed: 1234
      vocabulary: [alpha, beta, ...]
    benchmark:
      trials: 10
      cpu_profiles: [Basic, Mid, Pro]
      algorithms: [LinearSearch, BinarySearch, ...]
      shuffle_linear: false
    report:
      stats_mode: stddev
      chart_width: 50
      output_dir: null
      plot: false
===============================================================================
"""

import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from searchsim.core.constants import (
    ALGORITHM_NAMES, BAR_CHART_WIDTH, DEFAULT_DOC_COUNT, DEFAULT_KEYWORD,
    DEFAULT_SEED, DEFAULT_TRIALS, KEYWORD_PROBABILITY, MAX_TITLE_WORDS,
    MIN_TITLE_WORDS, STATS_MODES, VOCABULARY, get_algorithm_name,
)

logger = logging.getLogger(__name__)

# config/benchmark_config.yaml at the repository root
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "benchmark_config.yaml"


class InvalidConfiguration(ValueError):
    """Raised when benchmark parameters cannot produce a meaningful run."""


@dataclass
class BenchmarkConfig:
    """
    Parameters for one benchmark run.

    Attributes:
        doc_count: Number of documents to generate (> 0).
        keyword: Marker injected into a fraction of titles and searched for
                 by the linear scan.  May be empty.
        trials: Timed executions per (algorithm, CPU profile) pair (> 0).
        seed: Seed for the run's single random source.  None gives a fresh,
              non-reproducible corpus.
        cpu_profiles: Names of the simulated CPUs to report against.
        keyword_probability: Chance that a title carries the keyword.
        min_words: Fewest vocabulary words in a title.
        max_words: Most vocabulary words in a title (inclusive).
        vocabulary: Words titles are built from.
        algorithms: Algorithms to benchmark, in report order.
        shuffle_linear: Shuffle a private copy of the corpus between linear
                        search trials.
        stats_mode: 'stddev' (mean/stddev) or 'range' (mean/best/worst).
        chart_width: Full-scale bar length of the ASCII chart.
        output_dir: Where to write CSV/Markdown artifacts, or None.
        plot: Also render a PNG bar chart into output_dir.
    """
    doc_count: int = DEFAULT_DOC_COUNT
    keyword: str = DEFAULT_KEYWORD
    trials: int = DEFAULT_TRIALS
    seed: Optional[int] = DEFAULT_SEED
    cpu_profiles: List[str] = field(default_factory=lambda: ["Basic", "Mid", "Pro"])
    keyword_probability: float = KEYWORD_PROBABILITY
    min_words: int = MIN_TITLE_WORDS
    max_words: int = MAX_TITLE_WORDS
    vocabulary: List[str] = field(default_factory=lambda: list(VOCABULARY))
    algorithms: List[str] = field(default_factory=lambda: list(ALGORITHM_NAMES))
    shuffle_linear: bool = False
    stats_mode: str = "stddev"
    chart_width: int = BAR_CHART_WIDTH
    output_dir: Optional[str] = None
    plot: bool = False

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "BenchmarkConfig":
        """Build a config from the nested YAML mapping; missing keys keep defaults."""
        corpus = _section(config, "corpus")
        bench = _section(config, "benchmark")
        report = _section(config, "report")

        defaults = cls()
        return cls(
            doc_count=corpus.get("doc_count", defaults.doc_count),
            keyword=str(corpus.get("keyword", defaults.keyword) or ""),
            trials=bench.get("trials", defaults.trials),
            seed=corpus.get("seed", defaults.seed),
            cpu_profiles=_as_list(bench.get("cpu_profiles", defaults.cpu_profiles), "cpu_profiles"),
            keyword_probability=_as_float(corpus.get("keyword_probability",
                                                     defaults.keyword_probability),
                                          "keyword_probability"),
            min_words=corpus.get("min_words", defaults.min_words),
            max_words=corpus.get("max_words", defaults.max_words),
            vocabulary=_as_list(corpus.get("vocabulary", defaults.vocabulary), "vocabulary"),
            algorithms=_as_list(bench.get("algorithms", defaults.algorithms), "algorithms"),
            shuffle_linear=bool(bench.get("shuffle_linear", defaults.shuffle_linear)),
            stats_mode=str(report.get("stats_mode", defaults.stats_mode)),
            chart_width=report.get("chart_width", defaults.chart_width),
            output_dir=report.get("output_dir", defaults.output_dir),
            plot=bool(report.get("plot", defaults.plot)),
        )

    def validate(self) -> "BenchmarkConfig":
        """
        Check every parameter and normalise algorithm / CPU names.

        Returns:
            self, so calls can be chained.

        Raises:
            InvalidConfiguration: On the first invalid parameter.
        """
        # Import here to avoid a circular import (cpu_profiles raises
        # InvalidConfiguration from this module).
        from searchsim.performance.cpu_profiles import CPUProfile

        if not _is_positive_int(self.doc_count):
            raise InvalidConfiguration(
                f"Document count must be a positive integer, got {self.doc_count!r}"
            )
        if not _is_positive_int(self.trials):
            raise InvalidConfiguration(
                f"Trial count must be a positive integer, got {self.trials!r}"
            )
        if (not isinstance(self.keyword_probability, (int, float))
                or isinstance(self.keyword_probability, bool)
                or not 0.0 <= self.keyword_probability <= 1.0):
            raise InvalidConfiguration(
                f"keyword_probability must lie in [0, 1], got {self.keyword_probability}"
            )
        if not (_is_positive_int(self.min_words) and _is_positive_int(self.max_words)
                and self.min_words <= self.max_words):
            raise InvalidConfiguration(
                f"Invalid title word range: {self.min_words!r}..{self.max_words!r}"
            )
        if not self.vocabulary:
            raise InvalidConfiguration("Vocabulary must contain at least one word")
        if isinstance(self.vocabulary, str) or not all(isinstance(w, str) for w in self.vocabulary):
            raise InvalidConfiguration(f"Vocabulary must be a list of words, got {self.vocabulary!r}")
        if self.seed is not None and not isinstance(self.seed, int):
            raise InvalidConfiguration(f"Seed must be an integer or null, got {self.seed!r}")
        if self.stats_mode not in STATS_MODES:
            raise InvalidConfiguration(
                f"Unknown stats mode: {self.stats_mode}. Valid: {list(STATS_MODES)}"
            )
        if not _is_positive_int(self.chart_width):
            raise InvalidConfiguration(
                f"Chart width must be a positive integer, got {self.chart_width!r}"
            )
        if not self.cpu_profiles:
            raise InvalidConfiguration("At least one CPU profile is required")
        if not self.algorithms:
            raise InvalidConfiguration("At least one algorithm is required")

        self.cpu_profiles = [CPUProfile.from_choice(c).label for c in self.cpu_profiles]
        try:
            self.algorithms = [get_algorithm_name(a) for a in self.algorithms]
        except ValueError as exc:
            raise InvalidConfiguration(str(exc)) from exc
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = config.get(name) or {}
    if not isinstance(value, dict):
        raise InvalidConfiguration(f"Config section '{name}' must be a mapping")
    return value


def _as_list(value: Any, name: str) -> List[Any]:
    """A bare scalar in YAML means a one-item list."""
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return [value]
    raise InvalidConfiguration(f"'{name}' must be a list, got {value!r}")


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise InvalidConfiguration(f"'{name}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"'{name}' must be a number, got {value!r}") from exc


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load benchmark configuration from a YAML file.

    Args:
        config_path: Path to YAML config.  Defaults to
                     config/benchmark_config.yaml; when that default file is
                     absent (e.g. a non-editable install) an empty mapping is
                     returned and built-in defaults apply.

    Returns:
        Dictionary of configuration sections

    Raises:
        FileNotFoundError: If an explicitly given path does not exist.
        InvalidConfiguration: If the file is not valid YAML or does not hold
                              a mapping.
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.debug("No default config at %s; using built-in defaults",
                         DEFAULT_CONFIG_PATH)
            return {}
        config_path = DEFAULT_CONFIG_PATH

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.info("Loading configuration from: %s", config_path)
    with open(config_path, 'r') as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise InvalidConfiguration(f"{config_path} is not valid YAML: {exc}") from exc

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise InvalidConfiguration(f"{config_path} must contain a YAML mapping")
    return config
