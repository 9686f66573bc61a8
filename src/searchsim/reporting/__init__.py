"""
reporting - Summaries and output

    statistics - Mean, population stddev, best/worst, median of a series
    report     - Results table, stats lines, ASCII bar chart, artifacts
    plot_utils - Optional matplotlib bar chart
"""
