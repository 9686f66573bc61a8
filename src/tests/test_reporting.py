"""
===============================================================================
SEARCHSIM - Statistics & Reporting Test Suite
===============================================================================
Tests for timing summaries (population stddev), the results table, the
per-algorithm stats line, the 50-column ASCII bar chart, and the optional
CSV / Markdown / PNG artifacts.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import math

import numpy as np
import pandas as pd
import pytest

from searchsim.performance.benchmarks import BenchmarkResult
from searchsim.reporting.report import (
    RANGE_COLUMNS, STDDEV_COLUMNS, bar_chart_lines, chart_values, format_report,
    format_stats_line, format_table, results_table, write_artifacts,
)
from searchsim.reporting.statistics import summarize


def make_result(algorithm, cpu, timings, doc_count=100):
    t = np.asarray(timings, dtype=float)
    return BenchmarkResult(algorithm=algorithm, cpu=cpu, doc_count=doc_count,
                           timings=t, raw_timings=t)


@pytest.fixture
def results():
    return [
        make_result("LinearSearch", "Basic", [0.004, 0.006]),
        make_result("MergeSort", "Basic", [0.010, 0.010]),
        make_result("BubbleSort", "Basic", [0.050, 0.030]),
    ]


# =============================================================================
# Statistics
# =============================================================================

class TestSummarize:

    def test_population_stddev(self):
        s = summarize([1.0, 2.0, 3.0, 4.0])
        assert s.mean == pytest.approx(2.5)
        assert s.std == pytest.approx(math.sqrt(1.25))
        assert (s.best, s.worst) == (1.0, 4.0)
        assert s.median == pytest.approx(2.5)
        assert s.trials == 4

    def test_single_trial_has_zero_spread(self):
        s = summarize(np.array([0.25]))
        assert s.std == 0.0
        assert s.best == s.worst == s.mean == 0.25

    def test_empty_series_raises(self):
        with pytest.raises(ValueError):
            summarize([])


# =============================================================================
# Tables and lines
# =============================================================================

class TestTables:

    def test_stddev_table(self, results):
        df = results_table(results, "stddev")
        assert list(df.columns) == STDDEV_COLUMNS
        assert len(df) == 3
        assert df.loc[0, "Mean(s)"] == pytest.approx(0.005)
        assert df.loc[0, "StdDev(s)"] == pytest.approx(0.001)
        assert df.loc[2, "DocCount"] == 100

    def test_range_table(self, results):
        df = results_table(results, "range")
        assert list(df.columns) == RANGE_COLUMNS
        assert df.loc[2, "Best(s)"] == pytest.approx(0.030)
        assert df.loc[2, "Worst(s)"] == pytest.approx(0.050)

    def test_unknown_mode_raises(self, results):
        with pytest.raises(ValueError):
            results_table(results, "median")

    def test_format_table_six_decimals(self, results):
        text = format_table(results_table(results))
        lines = text.splitlines()
        assert "Mean(s)" in lines[0] and "StdDev(s)" in lines[0]
        assert set(lines[1]) == {"-"}
        assert "0.005000" in text
        assert len(lines) == 5

    def test_format_empty_table(self):
        assert format_table(pd.DataFrame(columns=STDDEV_COLUMNS)) == "(no results)"

    def test_stats_line(self):
        line = format_stats_line("LinearSearch", summarize([0.1, 0.2, 0.3]))
        assert line == "LinearSearch    Mean=0.200000 Best=0.100000 Worst=0.300000"


# =============================================================================
# Bar chart
# =============================================================================

class TestBarChart:

    def test_largest_value_spans_full_width(self):
        lines = bar_chart_lines({"QuickSort": 2.0, "MergeSort": 1.0})
        assert lines[0].count("#") == 50
        assert lines[1].count("#") == 25
        assert lines[0].endswith("(2.000000 s)")

    def test_bar_length_is_rounded(self):
        lines = bar_chart_lines({"A": 3.0, "B": 1.0})
        # 1/3 * 50 = 16.67 -> 17
        assert lines[1].count("#") == 17

    def test_label_column(self):
        (line,) = bar_chart_lines({"LinearSearch": 1.0}, width=10)
        assert line == "LinearSearch    | ########## (1.000000 s)"

    def test_empty_mapping(self):
        assert bar_chart_lines({}) == []

    def test_all_zero_values_draw_empty_bars(self):
        lines = bar_chart_lines({"A": 0.0, "B": 0.0})
        assert all("#" not in line for line in lines)

    def test_chart_values_labels(self, results):
        assert list(chart_values(results)) == ["LinearSearch", "MergeSort", "BubbleSort"]
        mixed = results + [make_result("MergeSort", "Pro", [0.002])]
        assert "MergeSort/Pro" in chart_values(mixed)
        assert chart_values(results)["MergeSort"] == pytest.approx(0.010)


# =============================================================================
# Full report and artifacts
# =============================================================================

class TestReport:

    def test_stddev_report_has_table_and_chart(self, results):
        text = format_report(results, "stddev")
        assert "StdDev(s)" in text
        assert "--- Performance Comparison (Bar Chart) ---" in text
        assert "#" * 50 in text

    def test_range_report_uses_stats_lines(self, results):
        text = format_report(results, "range", title="Benchmark")
        assert text.startswith("Benchmark")
        assert "BubbleSort      Mean=0.040000 Best=0.030000 Worst=0.050000" in text

    def test_write_artifacts(self, results, tmp_path):
        paths = write_artifacts(results, str(tmp_path / "out"))
        assert set(paths) == {"csv", "markdown"}
        df = pd.read_csv(paths["csv"])
        assert list(df.columns) == STDDEV_COLUMNS
        with open(paths["markdown"]) as fh:
            md = fh.read()
        assert "| LinearSearch | Basic | 100 |" in md
        assert "#" * 50 in md

    def test_write_artifacts_with_plot(self, results, tmp_path):
        paths = write_artifacts(results, str(tmp_path), plot=True)
        assert os.path.getsize(paths["plot"]) > 0
        with open(paths["markdown"]) as fh:
            assert "timing_bar.png" in fh.read()
