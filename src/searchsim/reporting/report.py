"""
Reporting helpers: results table, per-algorithm stats lines, ASCII bar chart,
and optional on-disk artifacts (CSV, Markdown, PNG).

Console output is the only thing the core produces; nothing written here is
ever read back by the program.
"""

import logging
import os
from typing import Dict, List, Mapping, Optional, Sequence

import pandas as pd

from searchsim.core.constants import BAR_CHAR, BAR_CHART_WIDTH, LABEL_WIDTH
from searchsim.performance.benchmarks import BenchmarkResult
from searchsim.reporting.statistics import TimingSummary

logger = logging.getLogger(__name__)

STDDEV_COLUMNS = ["Algorithm", "CPU", "DocCount", "Mean(s)", "StdDev(s)"]
RANGE_COLUMNS = ["Algorithm", "CPU", "DocCount", "Mean(s)", "Best(s)", "Worst(s)"]


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def results_table(results: Sequence[BenchmarkResult], stats_mode: str = "stddev") -> pd.DataFrame:
    """
    One row per (algorithm, CPU) result.

    stats_mode 'stddev' gives Mean/StdDev columns, 'range' gives
    Mean/Best/Worst.
    """
    if stats_mode not in ("stddev", "range"):
        raise ValueError(f"Unknown stats mode: {stats_mode}")

    rows = []
    for r in results:
        s = r.summary()
        row = {"Algorithm": r.algorithm, "CPU": r.cpu, "DocCount": r.doc_count, "Mean(s)": s.mean}
        if stats_mode == "stddev":
            row["StdDev(s)"] = s.std
        else:
            row["Best(s)"] = s.best
            row["Worst(s)"] = s.worst
        rows.append(row)

    columns = STDDEV_COLUMNS if stats_mode == "stddev" else RANGE_COLUMNS
    return pd.DataFrame(rows, columns=columns)


def format_table(df: pd.DataFrame) -> str:
    """Fixed-width text rendering with 6-decimal seconds."""
    if df.empty:
        return "(no results)"
    body = df.to_string(index=False, float_format=lambda v: f"{v:.6f}")
    width = max(len(line) for line in body.splitlines())
    header, *rows = body.splitlines()
    return "\n".join([header, "-" * width, *rows])


def format_stats_line(algorithm: str, summary: TimingSummary) -> str:
    """'LinearSearch    Mean=0.000123 Best=0.000100 Worst=0.000150'"""
    return (f"{algorithm:<{LABEL_WIDTH}} Mean={summary.mean:.6f} "
            f"Best={summary.best:.6f} Worst={summary.worst:.6f}")


# ---------------------------------------------------------------------------
# ASCII bar chart
# ---------------------------------------------------------------------------

def chart_values(results: Sequence[BenchmarkResult], stat: str = "mean") -> Dict[str, float]:
    """
    Map each result to one scalar for the bar chart.

    Labels are the algorithm name, suffixed with the CPU when a run covers
    more than one profile.
    """
    multi_cpu = len({r.cpu for r in results}) > 1
    values: Dict[str, float] = {}
    for r in results:
        label = f"{r.algorithm}/{r.cpu}" if multi_cpu else r.algorithm
        values[label] = getattr(r.summary(), stat)
    return values


def bar_chart_lines(
    values: Mapping[str, float],
    width: int = BAR_CHART_WIDTH,
    char: str = BAR_CHAR,
) -> List[str]:
    """
    Render one bar per entry, scaled so the largest value spans *width*.

    Bar length is round(value / max * width).  When every value is zero
    all bars are empty.
    """
    if not values:
        return []
    peak = max(values.values())
    label_width = max(LABEL_WIDTH, max(len(k) for k in values))
    lines = []
    for label, value in values.items():
        length = int(round(value / peak * width)) if peak > 0 else 0
        lines.append(f"{label:<{label_width}} | {char * max(0, length)} ({value:.6f} s)")
    return lines


# ---------------------------------------------------------------------------
# Full console report
# ---------------------------------------------------------------------------

def format_report(
    results: Sequence[BenchmarkResult],
    stats_mode: str = "stddev",
    chart_width: int = BAR_CHART_WIDTH,
    title: Optional[str] = None,
) -> str:
    """Results table (or stats lines in range mode) followed by the bar chart."""
    lines: List[str] = []
    if title:
        lines += [title, ""]

    if stats_mode == "range":
        multi_cpu = len({r.cpu for r in results}) > 1
        for r in results:
            label = f"{r.algorithm}/{r.cpu}" if multi_cpu else r.algorithm
            lines.append(format_stats_line(label, r.summary()))
    else:
        lines.append(format_table(results_table(results, stats_mode)))

    chart = bar_chart_lines(chart_values(results), width=chart_width)
    if chart:
        lines += ["", "--- Performance Comparison (Bar Chart) ---", *chart]
    return "\n".join(lines)


def print_report(results: Sequence[BenchmarkResult], stats_mode: str = "stddev",
                 chart_width: int = BAR_CHART_WIDTH, title: Optional[str] = None) -> None:
    print(format_report(results, stats_mode, chart_width, title))


# ---------------------------------------------------------------------------
# Artifacts
# ---------------------------------------------------------------------------

def build_markdown_report(df: pd.DataFrame, chart: Sequence[str],
                          doc_count: int, trials: int, plot_name: Optional[str] = None) -> str:
    lines = [
        "# Search & Sort Benchmark Report",
        "",
        f"- Documents: `{doc_count}`",
        f"- Trials per algorithm/CPU: `{trials}`",
        "- CPU scaling: measured time divided by profile factor",
        "",
        "## Results",
        "",
        "| " + " | ".join(df.columns) + " |",
        "|" + "|".join("---:" if c not in ("Algorithm", "CPU") else "---" for c in df.columns) + "|",
    ]
    for _, row in df.iterrows():
        cells = [f"{v:.6f}" if isinstance(v, float) else str(v) for v in row.tolist()]
        lines.append("| " + " | ".join(cells) + " |")

    lines += ["", "## Mean Time", "", "```", *chart, "```"]
    if plot_name:
        lines += ["", f"![Mean time]({plot_name})"]
    lines.append("")
    return "\n".join(lines)


def write_artifacts(
    results: Sequence[BenchmarkResult],
    output_dir: str,
    stats_mode: str = "stddev",
    chart_width: int = BAR_CHART_WIDTH,
    plot: bool = False,
) -> Dict[str, str]:
    """
    Write results.csv, report.md and (with *plot*) timing_bar.png.

    Returns
    -------
    dict mapping artifact kind ('csv', 'markdown', 'plot') to its path.
    """
    os.makedirs(output_dir, exist_ok=True)
    df = results_table(results, stats_mode)
    values = chart_values(results)
    paths: Dict[str, str] = {}

    csv_path = os.path.join(output_dir, "results.csv")
    df.to_csv(csv_path, index=False)
    paths["csv"] = csv_path

    plot_name = None
    if plot:
        # matplotlib is only needed for the PNG
        from searchsim.reporting.plot_utils import plot_timing_bar

        plot_name = "timing_bar.png"
        paths["plot"] = os.path.join(output_dir, plot_name)
        plot_timing_bar(values, "Mean Time per Algorithm", paths["plot"])

    doc_count = results[0].doc_count if results else 0
    trials = results[0].summary().trials if results else 0
    md_path = os.path.join(output_dir, "report.md")
    with open(md_path, "w") as fh:
        fh.write(build_markdown_report(df, bar_chart_lines(values, width=chart_width),
                                       doc_count, trials, plot_name))
    paths["markdown"] = md_path

    logger.info("Report artifacts written to %s", output_dir)
    return paths
