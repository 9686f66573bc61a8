"""
searchsim - Search & sort benchmarking over synthetic document corpora

Generates synthetic document titles, times textbook search (linear, binary)
and sort (bubble, quick, merge) algorithms over them, scales the measured
times by a simulated CPU factor, and reports the results as a table and an
ASCII bar chart.

Subpackages:
    core        -- constants, configuration, corpus generation
    algorithms  -- search and sort implementations
    performance -- CPU profiles and the benchmark harness
    reporting   -- statistics, text/Markdown reports, plots
"""

__version__ = "0.1.0"
