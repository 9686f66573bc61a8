"""
===============================================================================
SEARCHSIM - Benchmark Constants
===============================================================================
Central repository for the fixed parameters of the search/sort benchmark:
the title vocabulary, corpus generation defaults, simulated CPU speed
factors, and reporting widths.

All durations are in seconds.
===============================================================================
"""


# =============================================================================
# CORPUS GENERATION
# =============================================================================
VOCABULARY = (
    "alpha", "beta", "gamma", "delta", "search", "query", "page",
    "index", "node", "cloud", "data", "info", "doc",
)
MIN_TITLE_WORDS = 3
MAX_TITLE_WORDS = 5                    # inclusive
KEYWORD_PROBABILITY = 0.08             # ~8% of titles carry the keyword
DOC_ID_WIDTH = 4                       # " (doc0007)"
DEFAULT_KEYWORD = "KEYWORD42"
DEFAULT_DOC_COUNT = 1000
DEFAULT_SEED = 1234

# =============================================================================
# BENCHMARK
# =============================================================================
DEFAULT_TRIALS = 10
INTERACTIVE_TRIALS = 5
NOT_FOUND = -1

# Simulated CPU speed factors.  Measured time is DIVIDED by the factor,
# so a larger factor means a faster machine.
CPU_FACTOR_BASIC = 1.0
CPU_FACTOR_MID = 2.0
CPU_FACTOR_PRO = 3.5

# =============================================================================
# REPORTING
# =============================================================================
BAR_CHART_WIDTH = 50
BAR_CHAR = "#"
LABEL_WIDTH = 15
STATS_MODES = ("stddev", "range")

ALGORITHM_NAMES = (
    "LinearSearch", "BinarySearch", "BubbleSort", "QuickSort", "MergeSort",
)


def get_algorithm_name(name: str) -> str:
    """
    Resolve a user-supplied algorithm name to its canonical spelling.

    Args:
        name: Algorithm name, case-insensitive, with or without separators
              (e.g. 'quick_sort', 'QuickSort', 'quick-sort').

    Returns:
        Canonical algorithm name from ALGORITHM_NAMES

    Raises:
        ValueError: If the name is not recognized
    """
    lookup = {n.lower(): n for n in ALGORITHM_NAMES}
    key = name.replace("_", "").replace("-", "").replace(" ", "").lower()
    if key not in lookup:
        raise ValueError(f"Unknown algorithm: {name}. Valid: {list(ALGORITHM_NAMES)}")
    return lookup[key]
