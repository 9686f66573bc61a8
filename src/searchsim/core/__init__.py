"""
===============================================================================
SEARCHSIM - Core Module
===============================================================================
Shared building blocks for every benchmark run.

Submodules:
    constants -- Vocabulary, default sizes, CPU factors, report widths
    config    -- YAML loading, BenchmarkConfig, InvalidConfiguration
    documents -- Document / Corpus types and the synthetic corpus generator
===============================================================================
"""
