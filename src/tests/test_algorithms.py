"""
===============================================================================
SEARCHSIM - Search & Sort Algorithm Test Suite
===============================================================================
Correctness tests for the five benchmarked algorithms: the eight-name
worked example, binary search over every title, linear search counts
against the injection probability, cross-algorithm agreement, sorting
idempotence, and merge sort stability.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dataclasses import dataclass

import numpy as np
import pytest

from searchsim.algorithms.search import binary_search, linear_search_count
from searchsim.algorithms.sorting import (
    SORT_ALGORITHMS, bubble_sort, merge_sort, quick_sort,
)
from searchsim.core.constants import NOT_FOUND
from searchsim.core.documents import Document, generate_corpus


NAMES = ["bob", "alice", "eve", "dan", "carl", "gina", "frank", "hank"]
NAMES_SORTED = ["alice", "bob", "carl", "dan", "eve", "frank", "gina", "hank"]


@pytest.fixture
def corpus():
    return generate_corpus(300, keyword="KEYWORD42", seed=11)


# =============================================================================
# Worked example
# =============================================================================

class TestEightNameExample:

    def test_merge_sort_orders_names(self):
        assert merge_sort(list(NAMES)) == NAMES_SORTED

    def test_binary_search_hits_and_misses(self):
        ordered = merge_sort(list(NAMES))
        assert binary_search(ordered, "eve") == 4
        assert binary_search(ordered, "zara") == NOT_FOUND
        assert NOT_FOUND == -1

    @pytest.mark.parametrize("name", sorted(SORT_ALGORITHMS))
    def test_every_sort_orders_names(self, name):
        assert SORT_ALGORITHMS[name](list(NAMES)) == NAMES_SORTED


# =============================================================================
# Binary search
# =============================================================================

class TestBinarySearch:

    def test_finds_every_title(self, corpus):
        titles = corpus.sorted_titles
        for i, t in enumerate(titles):
            assert binary_search(titles, t) == i

    def test_impossible_id_not_found(self, corpus):
        assert binary_search(corpus.sorted_titles, "alpha beta gamma (doc99999999)") == NOT_FOUND

    def test_empty_and_bounds(self):
        assert binary_search([], "x") == NOT_FOUND
        assert binary_search(["m"], "a") == NOT_FOUND
        assert binary_search(["m"], "z") == NOT_FOUND
        assert binary_search(["a", "m", "z"], "z") == 2


# =============================================================================
# Linear search
# =============================================================================

class TestLinearSearch:

    def test_counts_substrings(self):
        docs = [Document("alpha node"), Document("node data"), Document("cloud")]
        assert linear_search_count(docs, "node") == 2
        assert linear_search_count(docs, "zzz") == 0

    def test_case_sensitive(self):
        docs = [Document("Node"), Document("node")]
        assert linear_search_count(docs, "node") == 1

    def test_empty_keyword_matches_everything(self):
        assert linear_search_count(["a", "b", "c"], "") == 3

    def test_all_or_nothing_injection(self):
        all_in = generate_corpus(400, keyword="KEYWORD42", seed=5, keyword_probability=1.0)
        none_in = generate_corpus(400, keyword="KEYWORD42", seed=5, keyword_probability=0.0)
        assert linear_search_count(all_in, "KEYWORD42") == 400
        assert linear_search_count(none_in, "KEYWORD42") == 0

    def test_count_tracks_probability_across_seeds(self):
        """
        With p = 0.08 over 1000 documents the count is Binomial(1000, 0.08):
        mean 80, sigma ~8.6.  Each seed must land within ~4.5 sigma and the
        average over seeds within a tighter band.
        """
        counts = []
        for seed in range(10):
            c = generate_corpus(1000, keyword="KEYWORD42", seed=seed, keyword_probability=0.08)
            counts.append(linear_search_count(c, "KEYWORD42"))
        assert all(40 <= k <= 120 for k in counts), counts
        assert 65 <= np.mean(counts) <= 95, counts


# =============================================================================
# Sorting
# =============================================================================

class TestSorting:

    def test_cross_algorithm_agreement(self, corpus):
        outputs = {
            name: [d.title for d in fn(corpus.working_copy())]
            for name, fn in SORT_ALGORITHMS.items()
        }
        expected = list(corpus.sorted_titles)
        for name, titles in outputs.items():
            assert titles == expected, name

    @pytest.mark.parametrize("name", sorted(SORT_ALGORITHMS))
    def test_idempotent_on_sorted_input(self, name, corpus):
        once = SORT_ALGORITHMS[name](corpus.working_copy())
        before = [d.title for d in once]
        twice = SORT_ALGORITHMS[name](list(once))
        assert [d.title for d in twice] == before

    @pytest.mark.parametrize("name", sorted(SORT_ALGORITHMS))
    def test_sorts_in_place(self, name):
        items = list(NAMES)
        result = SORT_ALGORITHMS[name](items)
        assert result is items
        assert items == NAMES_SORTED

    @pytest.mark.parametrize("items", [[], ["only"]])
    def test_trivial_inputs(self, items):
        assert bubble_sort(list(items)) == items
        assert quick_sort(list(items)) == items
        assert merge_sort(list(items)) == items

    def test_does_not_touch_canonical_corpus(self, corpus):
        before = corpus.titles
        quick_sort(corpus.working_copy())
        assert corpus.titles == before

    def test_reverse_sorted_input(self):
        items = list(reversed(NAMES_SORTED))
        assert bubble_sort(list(items)) == NAMES_SORTED
        assert quick_sort(list(items)) == NAMES_SORTED
        assert merge_sort(list(items)) == NAMES_SORTED

    def test_partial_range(self):
        items = ["z", "c", "b", "a", "y"]
        quick_sort(items, 1, 3)
        assert items == ["z", "a", "b", "c", "y"]
        items = ["z", "c", "b", "a", "y"]
        merge_sort(items, 1, 3)
        assert items == ["z", "a", "b", "c", "y"]

    def test_merge_sort_is_stable(self):

        @dataclass
        class Tagged:
            title: str
            tag: int

        items = [Tagged("b", 0), Tagged("a", 1), Tagged("b", 2), Tagged("a", 3), Tagged("b", 4)]
        merge_sort(items)
        assert [(t.title, t.tag) for t in items] == [
            ("a", 1), ("a", 3), ("b", 0), ("b", 2), ("b", 4),
        ]
