"""
Dictionary loading for wordbreak.

Two kinds of dictionary source are supported:
- Plain word lists: UTF-8 text, one word per line. Loaded into the
  in-memory Trie.
- Compiled dictionaries (.dic): a marisa_trie.Trie saved to disk. Compact,
  memory-mapped on load, and read-only, which suits large word lists that
  are shared by many queries.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Set, Union

import marisa_trie

from wordbreak.constants import COMMENT_PREFIX, COMPILED_SUFFIX
from wordbreak.segmenter import build_trie
from wordbreak.trie import Trie

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ============================================================================
# Compiled Dictionary
# ============================================================================

class CompiledDictionary:
    """
    Read-only word dictionary backed by marisa_trie.

    Offers the same read interface as Trie (membership, prefix checks and
    prefix_lengths) so a Segmenter can use either.
    """

    def __init__(self, trie: marisa_trie.Trie):
        self._trie = trie
        self._max_length = max((len(k) for k in trie.iterkeys()), default=0)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "CompiledDictionary":
        """Compile words, skipping empty entries."""
        return cls(marisa_trie.Trie([w for w in words if w]))

    @classmethod
    def load(cls, path: PathLike, mmap: bool = True) -> "CompiledDictionary":
        """
        Load a compiled dictionary from disk.

        Args:
            path: Path to the .dic file
            mmap: Memory-map the file instead of reading it into memory

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not a valid compiled dictionary
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Dictionary not found at {path}")

        trie = marisa_trie.Trie()
        try:
            if mmap:
                trie.mmap(str(path))
            else:
                trie.load(str(path))
        except RuntimeError as e:
            raise ValueError(f"Invalid compiled dictionary {path}: {e}") from e
        logger.info("Loaded compiled dictionary %s (%d words)", path, len(trie))
        return cls(trie)

    def save(self, path: PathLike) -> Path:
        """Save to path, creating parent directories. Returns the path."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._trie.save(str(path))
        return path

    def has_prefix(self, prefix: str) -> bool:
        """Check if any word starts with the given prefix."""
        return self._trie.has_keys_with_prefix(prefix)

    def prefix_lengths(self, text: str, start: int = 0) -> Iterator[int]:
        """Yield lengths of words that are prefixes of text[start:], shortest first."""
        window = text[start:start + self._max_length]
        return iter(sorted(len(p) for p in self._trie.prefixes(window) if p))

    def __contains__(self, word: str) -> bool:
        return word in self._trie

    def __len__(self) -> int:
        return len(self._trie)

    def __iter__(self) -> Iterator[str]:
        return iter(self._trie.keys())


# ============================================================================
# Word Lists
# ============================================================================

def read_word_list(path: PathLike) -> Set[str]:
    """
    Read a word list file.

    Surrounding whitespace is stripped from each line; blank lines and
    comment lines are skipped. Case is kept as written.

    Raises:
        FileNotFoundError: If the file doesn't exist
        UnicodeDecodeError: If the file is not UTF-8
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found at {path}")

    words = set()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word and not word.startswith(COMMENT_PREFIX):
                words.add(word)

    logger.info("Loaded %d words from %s", len(words), path)
    return words


def load_lexicon(path: PathLike) -> Union[Trie, CompiledDictionary]:
    """
    Load a dictionary file, picking the format from its suffix.

    .dic files are opened as CompiledDictionary, anything else is read as
    a word list into a Trie.
    """
    path = Path(path)
    if path.suffix == COMPILED_SUFFIX:
        return CompiledDictionary.load(path)
    return build_trie(read_word_list(path))
