"""
===============================================================================
SEARCHSIM - Algorithms Module
===============================================================================
Reference search and sort implementations measured by the benchmark.

Submodules:
    search  -- Linear substring count, binary exact-match search
    sorting -- Bubble sort, Lomuto quicksort, top-down merge sort
===============================================================================
"""
