"""
Segmentation search for wordbreak.

Decides whether a string can be split into a sequence of dictionary
words. Each suffix start position of the string gets one slot in a memo
table; the table is filled from the end of the string towards the start,
so every position is expanded once and no recursion is involved.
"""

import logging
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Protocol

from wordbreak.trie import Trie

logger = logging.getLogger(__name__)


# =============================================================================
# Types
# =============================================================================

class Resolution(Enum):
    """Memo slot state: can the suffix starting here be fully segmented."""
    UNRESOLVED = 0
    RESOLVABLE = 1
    UNRESOLVABLE = 2


class Lexicon(Protocol):
    """Read interface shared by Trie and CompiledDictionary."""

    def prefix_lengths(self, text: str, start: int = 0) -> Iterator[int]:
        ...


def build_trie(words: Iterable[str]) -> Trie[str, bool]:
    """
    Build a membership trie over words.

    Empty entries are skipped: a zero-length word can never match a
    non-empty piece of the input.
    """
    trie: Trie[str, bool] = Trie()
    skipped = 0
    for word in words:
        if not word:
            skipped += 1
            continue
        trie.insert(word, True)
    if skipped:
        logger.debug("Skipped %d empty dictionary entries", skipped)
    logger.debug("Built trie with %d words", len(trie))
    return trie


# =============================================================================
# Segmenter
# =============================================================================

class Segmenter:
    """
    Word segmentation against one fixed lexicon.

    The lexicon is only read, so one Segmenter can serve many queries,
    including from several threads at once. Every query allocates its own
    memo table.

    Example:
        >>> seg = Segmenter.from_words({"apple", "pen"})
        >>> seg.can_segment("applepenapple")
        True
        >>> seg.segment("applepenapple")
        ['apple', 'pen', 'apple']
    """

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Segmenter":
        """Create a segmenter over a fresh trie of words."""
        return cls(build_trie(words))

    def resolve(self, text: str) -> List[Resolution]:
        """
        Fill the memo table for text.

        Slot i tells whether text[i:] can be segmented; slot len(text) is
        the empty suffix and always RESOLVABLE. Candidate words starting
        at i are tried shortest first and the first one whose remainder
        is resolvable settles the slot.

        Args:
            text: String to segment

        Returns:
            List of len(text) + 1 resolved slots
        """
        n = len(text)
        memo = [Resolution.UNRESOLVED] * (n + 1)
        memo[n] = Resolution.RESOLVABLE

        for position in range(n - 1, -1, -1):
            result = Resolution.UNRESOLVABLE
            for length in self.lexicon.prefix_lengths(text, position):
                if memo[position + length] is Resolution.RESOLVABLE:
                    result = Resolution.RESOLVABLE
                    break
            memo[position] = result

        logger.debug("Resolved %d positions, segmentable=%s",
                     n, memo[0] is Resolution.RESOLVABLE)
        return memo

    def can_segment(self, text: str) -> bool:
        """Check if text splits completely into lexicon words."""
        return self.resolve(text)[0] is Resolution.RESOLVABLE

    def segment(self, text: str) -> Optional[List[str]]:
        """
        Return one segmentation of text.

        At each step the shortest word whose remainder is resolvable is
        taken.

        Returns:
            List of words covering text, [] for the empty string, or
            None if text cannot be segmented
        """
        memo = self.resolve(text)
        if memo[0] is not Resolution.RESOLVABLE:
            return None

        words = []
        position = 0
        while position < len(text):
            for length in self.lexicon.prefix_lengths(text, position):
                if memo[position + length] is Resolution.RESOLVABLE:
                    break
            words.append(text[position:position + length])
            position += length
        return words


def can_segment(text: str, dictionary: Iterable[str]) -> bool:
    """
    Check if text can be split into a sequence of dictionary words.

    Matching is exact: case and whitespace are significant. The empty
    string is always segmentable.

    Example:
        >>> can_segment("cars", {"car", "ca", "rs"})
        True
        >>> can_segment("catsandog", {"cats", "dog", "sand", "and", "cat"})
        False
    """
    return Segmenter.from_words(dictionary).can_segment(text)
