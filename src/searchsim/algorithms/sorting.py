"""
Textbook in-place sorts, ordered by document title.

All three take a mutable list of Documents (or bare strings) and reorder it
in place using default string ordering.  They are reference
implementations kept deliberately plain, because the benchmark measures
exactly these algorithms:

    bubble_sort -- O(n^2), n-1 full passes, no early-exit optimisation
    quick_sort  -- Lomuto partition, last element as pivot; O(n^2) on
                   sorted input (recursion depth grows with n)
    merge_sort  -- top-down, midpoint split, stable, O(n log n)
"""

from typing import Callable, Dict, List, Optional


def title_of(item) -> str:
    """Sort key: a Document's title, or the item itself if it is a string."""
    return getattr(item, "title", item)


def bubble_sort(items: List, key: Callable = title_of) -> List:
    n = len(items)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if key(items[j]) > key(items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _partition(items: List, low: int, high: int, key: Callable) -> int:
    """Lomuto partition of items[low..high] around items[high]."""
    pivot = key(items[high])
    i = low - 1
    for j in range(low, high):
        if key(items[j]) <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(items: List, low: int = 0, high: Optional[int] = None,
               key: Callable = title_of) -> List:
    """
    Recursive quicksort of items[low..high] (inclusive bounds).

    No randomised pivot: an already sorted range recurses n levels deep,
    so very large sorted inputs can exceed the interpreter recursion limit.
    """
    if high is None:
        high = len(items) - 1
    if low < high:
        pi = _partition(items, low, high, key)
        quick_sort(items, low, pi - 1, key)
        quick_sort(items, pi + 1, high, key)
    return items


def _merge(items: List, left: int, mid: int, right: int, key: Callable) -> None:
    """Merge sorted runs items[left..mid] and items[mid+1..right]."""
    left_buf = items[left:mid + 1]
    right_buf = items[mid + 1:right + 1]
    i = j = 0
    k = left
    while i < len(left_buf) and j < len(right_buf):
        # <= keeps equal keys in left-buffer order (stability)
        if key(left_buf[i]) <= key(right_buf[j]):
            items[k] = left_buf[i]
            i += 1
        else:
            items[k] = right_buf[j]
            j += 1
        k += 1
    while i < len(left_buf):
        items[k] = left_buf[i]
        i += 1
        k += 1
    while j < len(right_buf):
        items[k] = right_buf[j]
        j += 1
        k += 1


def merge_sort(items: List, left: int = 0, right: Optional[int] = None,
               key: Callable = title_of) -> List:
    """Top-down merge sort of items[left..right] (inclusive bounds)."""
    if right is None:
        right = len(items) - 1
    if left < right:
        mid = (left + right) // 2
        merge_sort(items, left, mid, key)
        merge_sort(items, mid + 1, right, key)
        _merge(items, left, mid, right, key)
    return items


SORT_ALGORITHMS: Dict[str, Callable[[List], List]] = {
    "BubbleSort": bubble_sort,
    "QuickSort": quick_sort,
    "MergeSort": merge_sort,
}
