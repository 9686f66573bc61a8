"""
Search algorithms over a document corpus.

    linear_search_count -- O(n*m) substring scan, always visits every title
    binary_search       -- O(log n) exact match on a sorted title sequence
"""

from typing import Iterable, Sequence

from searchsim.core.constants import NOT_FOUND


def linear_search_count(documents: Iterable, keyword: str) -> int:
    """
    Count documents whose title contains *keyword*.

    Case-sensitive, exact-character substring test.  There is no early
    exit: the scan cost is the same whether or not anything matches.
    Items may be Documents or bare title strings.
    """
    count = 0
    for doc in documents:
        title = getattr(doc, "title", doc)
        if keyword in title:
            count += 1
    return count


def binary_search(sorted_titles: Sequence[str], target: str) -> int:
    """
    Iterative bisection for an exact title.

    Precondition: *sorted_titles* is in ascending codepoint order.  This is
    not checked; an unsorted input gives an unspecified result.

    Returns:
        Index of *target*, or NOT_FOUND (-1).
    """
    lo, hi = 0, len(sorted_titles) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        probe = sorted_titles[mid]
        if probe == target:
            return mid
        if probe < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return NOT_FOUND
