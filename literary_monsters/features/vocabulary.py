"""
Bag-of-words vocabulary and vectorizer.

This module provides:
- a VectorizerConfig holding the tokenization options
- a TermVectorizer that counts terms across documents, maps each term
  to a contiguous integer index, trims the vocabulary by occurrence
  counts, and converts documents into index sequences, bag-of-words
  pairs, dense vectors, and count vectors.

Index 0 is always held by an "unknown" sentinel term, and every
out-of-vocabulary token maps to it. Indices are rebuilt from the full
count table after every ingest or trim, so indices handed out before
such a call must not be reused afterwards.

A TermVectorizer is plain mutable state owned by its caller; it is not
safe to mutate from several threads at once.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np


logger = logging.getLogger(__name__)

UNKNOWN_TERM = "\u22b9"
UNKNOWN_INDEX = 0

# Runs of these characters are replaced by a single space in word mode.
PUNCTUATION_PATTERN = re.compile(r"[!_.\n':;,?]+")
WHITESPACE_PATTERN = re.compile(r"\s+")

BagOfWords = List[Tuple[int, int]]


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VectorizerConfig:
    """
    Tokenization options, fixed for the lifetime of a vectorizer.

    Attributes
    ----------
    stop_words : FrozenSet[str]
        Terms excluded from counting and lookups.
    ignore_case : bool
        Lowercase documents before tokenizing.
    char_level : bool
        Tokenize by single character instead of by word.
    """

    stop_words: FrozenSet[str] = frozenset()
    ignore_case: bool = False
    char_level: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.stop_words, str):
            raise TypeError(
                "stop_words must be a collection of terms, not a single string: "
                f"{self.stop_words!r}"
            )
        object.__setattr__(self, "stop_words", frozenset(self.stop_words or ()))
        object.__setattr__(self, "ignore_case", bool(self.ignore_case))
        object.__setattr__(self, "char_level", bool(self.char_level))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "VectorizerConfig":
        """
        Build a config from a mapping such as the "vectorizer" section of
        config/data.yaml. Unknown keys are ignored.
        """
        data = data or {}
        return cls(
            stop_words=data.get("stop_words") or (),
            ignore_case=data.get("ignore_case", False),
            char_level=data.get("char_level", False),
        )


# ---------------------------------------------------------------------------
# Vectorizer
# ---------------------------------------------------------------------------


class TermVectorizer:
    """
    Incrementally built term vocabulary with bag-of-words conversions.

    A fresh instance only knows the unknown sentinel (index 0, count 1).
    Terms are indexed in order of first occurrence, walking the count
    table from the start every time the vocabulary changes.
    """

    def __init__(self, config: Optional[VectorizerConfig] = None) -> None:
        self.config = config or VectorizerConfig()
        self._counts: Counter = Counter({UNKNOWN_TERM: 1})
        self._terms: Dict[str, int] = {}
        self._indices: Dict[int, str] = {}
        self._reindex()

    # -- introspection -----------------------------------------------------

    @property
    def vocab_size(self) -> int:
        return len(self._terms)

    @property
    def terms(self) -> Mapping[str, int]:
        """Read-only term -> index view."""
        return MappingProxyType(self._terms)

    @property
    def indices(self) -> Mapping[int, str]:
        """Read-only index -> term view."""
        return MappingProxyType(self._indices)

    @property
    def counts(self) -> Counter:
        """Copy of the cumulative term counts, sentinel included."""
        return Counter(self._counts)

    def __len__(self) -> int:
        return self.vocab_size

    def __contains__(self, term: object) -> bool:
        return term in self._terms

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vocab_size={self.vocab_size}, "
            f"char_level={self.config.char_level}, ignore_case={self.config.ignore_case})"
        )

    # -- tokenization ------------------------------------------------------

    def tokenize(self, document: str) -> List[str]:
        """
        Split a document into tokens according to the config.

        Word mode strips the punctuation set ``! _ . \\n ' : ; , ?``, splits
        on whitespace and drops empty tokens. Char mode keeps every
        character. Stop words are removed in both modes.

        Parameters
        ----------
        document : str
            Raw document text.

        Returns
        -------
        List[str]
            Tokens in document order.
        """
        if self.config.ignore_case:
            document = document.lower()

        if self.config.char_level:
            tokens = list(document)
        else:
            stripped = PUNCTUATION_PATTERN.sub(" ", document)
            tokens = [t for t in WHITESPACE_PATTERN.split(stripped) if t]

        if self.config.stop_words:
            tokens = [t for t in tokens if t not in self.config.stop_words]
        return tokens

    # -- vocabulary building -----------------------------------------------

    def _reindex(self) -> None:
        self._terms = {term: idx for idx, term in enumerate(self._counts)}
        self._indices = {idx: term for term, idx in self._terms.items()}

    def ingest(self, document: str) -> None:
        """
        Add the document's token counts to the vocabulary and rebuild
        the index mapping. Can be called repeatedly.
        """
        self._counts.update(self.tokenize(document))
        self._reindex()

    def ingest_many(self, documents: Iterable[str]) -> None:
        """
        Ingest several documents, rebuilding the index mapping once at
        the end. The resulting state matches calling `ingest` on each
        document in turn.

        Counts are only applied once every document has been tokenized,
        so an error raised by a document or by the iterable leaves the
        vocabulary unchanged.
        """
        batch: Counter = Counter()
        for document in documents:
            batch.update(self.tokenize(document))
        self._counts.update(batch)
        self._reindex()

    def trim(
        self,
        min_count: Optional[int] = None,
        max_count: Optional[int] = None,
    ) -> Tuple[int, int]:
        """
        Drop terms whose count falls outside the inclusive range
        [min_count, max_count] and rebuild the index mapping.

        Surviving terms keep their relative order. The unknown sentinel
        is never dropped, so it keeps index 0.

        Parameters
        ----------
        min_count : Optional[int]
            Lowest number of occurrences to keep. None disables the bound.
        max_count : Optional[int]
            Highest number of occurrences to keep. None disables the bound.

        Returns
        -------
        Tuple[int, int]
            Vocabulary size before and after trimming.
        """
        size_before = len(self._counts)

        kept: Counter = Counter()
        for term, count in self._counts.items():
            if term != UNKNOWN_TERM:
                if min_count is not None and count < min_count:
                    continue
                if max_count is not None and count > max_count:
                    continue
            kept[term] = count

        self._counts = kept
        self._reindex()

        size_after = len(self._counts)
        logger.info("Vocabulary size before trim: %d, after trim: %d", size_before, size_after)
        return size_before, size_after

    # -- conversions -------------------------------------------------------

    def _lookup(self, tokens: Iterable[str]) -> List[int]:
        return [self._terms.get(t, UNKNOWN_INDEX) for t in tokens]

    def to_indices(self, document: str) -> List[int]:
        """
        Map each token of the document to its index, in token order.
        Out-of-vocabulary tokens map to the unknown sentinel (0).
        """
        return self._lookup(self.tokenize(document))

    def to_bag_of_words(self, document: str) -> BagOfWords:
        """
        Convert a document to (index, count) pairs sorted by index.

        All out-of-vocabulary tokens are pooled under index 0.
        """
        index_counts = Counter(self._lookup(self.tokenize(document)))
        return sorted(index_counts.items())

    def to_dense_vector(self, bag_of_words: Sequence[Tuple[int, int]]) -> np.ndarray:
        """
        Expand (index, count) pairs into a vector of length vocab_size + 1.

        Parameters
        ----------
        bag_of_words : Sequence[Tuple[int, int]]
            Pairs as produced by `to_bag_of_words` on the current vocabulary.

        Returns
        -------
        np.ndarray
            Float vector with `count` at each `index` and zeros elsewhere.

        Raises
        ------
        ValueError
            If an index falls outside the vector, typically because the
            pairs were built before the vocabulary was trimmed.
        """
        vec = np.zeros(self.vocab_size + 1)
        for idx, count in bag_of_words:
            if not 0 <= idx < len(vec):
                raise ValueError(
                    f"Index {idx} is outside a dense vector of length {len(vec)}; "
                    "the bag of words does not match the current vocabulary."
                )
            vec[idx] = count
        return vec

    def to_count_vector(self, document: str) -> List[int]:
        """
        Count of every vocabulary term within the document, in index order.
        """
        token_counts = Counter(self.tokenize(document))
        return [token_counts[term] for term in self._terms]

    def to_terms(self, indices: Iterable[int]) -> str:
        """
        Map indices back to text. Unknown indices become the sentinel term.
        Characters are concatenated in char mode, words are space-joined.
        """
        terms = [self._indices.get(int(i), UNKNOWN_TERM) for i in indices]
        separator = "" if self.config.char_level else " "
        return separator.join(terms)

    def __call__(self, document: str):
        if self.config.char_level:
            return self.to_indices(document)
        return self.to_bag_of_words(document)
