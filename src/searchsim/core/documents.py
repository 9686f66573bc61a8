"""
===============================================================================
SEARCHSIM - Synthetic Document Corpus
===============================================================================
Generates the collection of synthetic document titles every benchmark runs
over.  Each title is a handful of words drawn uniformly from a small
vocabulary, optionally followed by the search keyword, and always followed
by a zero-padded sequential id:

    "query node data (doc0000)"
    "cloud alpha index page KEYWORD42 (doc0001)"

The id suffix makes every title unique, so binary search has exactly one
match per title and the sort algorithms never see duplicate keys.

All randomness comes from one injected numpy Generator.  Passing the same
seed reproduces the same corpus; passing seed=None gives a fresh one.
===============================================================================
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from searchsim.core.config import InvalidConfiguration
from searchsim.core.constants import (
    DEFAULT_KEYWORD, DOC_ID_WIDTH, KEYWORD_PROBABILITY, MAX_TITLE_WORDS,
    MIN_TITLE_WORDS, VOCABULARY,
)

logger = logging.getLogger(__name__)


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass(frozen=True)
class Document:
    """A synthetic document.  Only the title is modelled."""
    title: str


class Corpus:
    """
    Canonical, generation-ordered document collection for one run.

    The document order never changes after construction; sort benchmarks
    work on :meth:`working_copy` lists.  A lexicographically sorted copy of
    the titles is derived once for binary search.

    Parameters
    ----------
    documents : sequence of Document
        Documents in generation order.
    keyword : str
        The keyword injected during generation (informational).
    """

    def __init__(self, documents: Sequence[Document], keyword: str = "") -> None:
        self._documents: Tuple[Document, ...] = tuple(documents)
        self.keyword = keyword
        self._sorted_titles: Tuple[str, ...] = tuple(sorted(d.title for d in self._documents))

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self):
        return iter(self._documents)

    def __getitem__(self, index: int) -> Document:
        return self._documents[index]

    @property
    def documents(self) -> Tuple[Document, ...]:
        return self._documents

    @property
    def titles(self) -> List[str]:
        return [d.title for d in self._documents]

    @property
    def sorted_titles(self) -> Tuple[str, ...]:
        """Titles in codepoint order; the binary search precondition."""
        return self._sorted_titles

    def working_copy(self) -> List[Document]:
        """Fresh mutable list in generation order, for one sort trial."""
        return list(self._documents)

    def middle_title(self) -> str:
        """Title at the middle of the sorted order (always present)."""
        if not self._sorted_titles:
            raise IndexError("Corpus is empty")
        return self._sorted_titles[len(self._sorted_titles) // 2]

    def target_for_seed(self, seed: int) -> str:
        """Deterministic existing title for a seeded run: documents[|seed| % n]."""
        if not self._documents:
            raise IndexError("Corpus is empty")
        return self._documents[abs(seed) % len(self._documents)].title


# =============================================================================
# GENERATION
# =============================================================================

def format_doc_id(index: int, width: int = DOC_ID_WIDTH) -> str:
    """Return the unique title suffix for document *index*, e.g. ' (doc0007)'."""
    return f" (doc{index:0{width}d})"


def random_title(
    index: int,
    rng: np.random.Generator,
    keyword: str = "",
    keyword_probability: float = 0.0,
    min_words: int = MIN_TITLE_WORDS,
    max_words: int = MAX_TITLE_WORDS,
    vocabulary: Sequence[str] = VOCABULARY,
) -> str:
    """
    Build one title.

    The keyword draw is made for every title, even when *keyword* is empty,
    so the random stream (and therefore the corpus) depends only on the
    seed and the size parameters.
    """
    n_words = int(rng.integers(min_words, max_words + 1))
    picks = rng.integers(0, len(vocabulary), size=n_words)
    words = [vocabulary[int(k)] for k in picks]

    if rng.random() < keyword_probability and keyword:
        words.append(keyword)

    return " ".join(words) + format_doc_id(index)


def generate_corpus(
    n: int,
    keyword: str = DEFAULT_KEYWORD,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    keyword_probability: float = KEYWORD_PROBABILITY,
    min_words: int = MIN_TITLE_WORDS,
    max_words: int = MAX_TITLE_WORDS,
    vocabulary: Sequence[str] = VOCABULARY,
) -> Corpus:
    """
    Generate *n* synthetic documents.

    Args:
        n: Number of documents; must be positive.
        keyword: Marker appended to roughly keyword_probability of titles.
        rng: Random source.  When omitted, np.random.default_rng(seed) is used.
        seed: Seed for the default random source; ignored when rng is given.
        keyword_probability: Per-title chance of carrying the keyword.
        min_words, max_words: Inclusive range of vocabulary words per title.
        vocabulary: Words titles are drawn from.

    Returns:
        Corpus of n uniquely titled documents in generation order.

    Raises:
        InvalidConfiguration: For a non-positive n or unusable parameters.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
        raise InvalidConfiguration(f"Document count must be a positive integer, got {n!r}")
    if not 0.0 <= keyword_probability <= 1.0:
        raise InvalidConfiguration(
            f"keyword_probability must lie in [0, 1], got {keyword_probability}"
        )
    if min_words < 1 or max_words < min_words:
        raise InvalidConfiguration(f"Invalid title word range: {min_words}..{max_words}")
    if not vocabulary:
        raise InvalidConfiguration("Vocabulary must contain at least one word")

    if rng is None:
        rng = np.random.default_rng(seed)

    documents = [
        Document(random_title(i, rng, keyword, keyword_probability,
                              min_words, max_words, vocabulary))
        for i in range(int(n))
    ]
    logger.debug("Generated %d documents (keyword=%r, p=%.3f)",
                 len(documents), keyword, keyword_probability)
    return Corpus(documents, keyword=keyword)
