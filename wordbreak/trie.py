"""
Prefix trie for dictionary word lookup.

The trie maps sequences of symbols (characters, for words) to a value.
Lookups cost O(len(key)) regardless of how many keys are stored, and a
single walk from a start position reports every stored word that begins
there, which is what the segmentation search needs.

Nodes are created lazily on insert and never removed. Lookups never
mutate the trie, so a built trie can be shared between threads.
"""

from typing import Dict, Generic, Hashable, Iterable, Iterator, Optional, Sequence, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# Marks a node that only exists as an inner prefix of longer keys
_MISSING = object()


class TrieNode(Generic[K, V]):
    """Single node in the prefix trie."""

    __slots__ = ("children", "value")

    def __init__(self):
        self.children: Dict[K, "TrieNode[K, V]"] = {}
        self.value = _MISSING

    @property
    def is_terminal(self) -> bool:
        """True if an inserted key ends at this node."""
        return self.value is not _MISSING


class Trie(Generic[K, V]):
    """
    Generic prefix trie.

    Example:
        >>> trie = Trie()
        >>> trie.insert("car", True)
        >>> trie.get("car")
        True
        >>> trie.get("ca") is None
        True
    """

    def __init__(self):
        self.root: TrieNode[K, V] = TrieNode()
        self._size = 0

    def insert(self, key: Iterable[K], value: V) -> None:
        """
        Store value under key, replacing any previous value.

        The empty key is allowed and stores the value at the root.
        """
        node = self.root
        for symbol in key:
            child = node.children.get(symbol)
            if child is None:
                child = TrieNode()
                node.children[symbol] = child
            node = child
        if not node.is_terminal:
            self._size += 1
        node.value = value

    def get(self, key: Iterable[K], default: Optional[V] = None) -> Optional[V]:
        """
        Look up the value stored under key.

        Args:
            key: Symbols to follow from the root
            default: Returned when key was never inserted

        Returns:
            The stored value, or default if the walk falls off the trie
            or ends on a node that is only a prefix of longer keys.
        """
        node = self._walk(key)
        if node is None or not node.is_terminal:
            return default
        return node.value

    def has_prefix(self, prefix: Iterable[K]) -> bool:
        """Check if any inserted key starts with prefix."""
        return self._walk(prefix) is not None

    def prefix_lengths(self, key: Sequence[K], start: int = 0) -> Iterator[int]:
        """
        Yield lengths of the stored keys that are prefixes of key[start:].

        Lengths come out shortest first. The empty key is never reported.

        Example:
            >>> trie = Trie()
            >>> for w in ("ca", "car", "rs"):
            ...     trie.insert(w, True)
            >>> list(trie.prefix_lengths("cars"))
            [2, 3]
            >>> list(trie.prefix_lengths("cars", 2))
            [2]
        """
        node = self.root
        for i in range(start, len(key)):
            node = node.children.get(key[i])
            if node is None:
                return
            if node.is_terminal:
                yield i + 1 - start

    def __contains__(self, key: Iterable[K]) -> bool:
        node = self._walk(key)
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        return self._size

    def _walk(self, key: Iterable[K]) -> Optional[TrieNode[K, V]]:
        node = self.root
        for symbol in key:
            node = node.children.get(symbol)
            if node is None:
                return None
        return node
