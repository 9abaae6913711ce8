"""
wordbreak: dictionary word segmentation

Decides whether a string can be split into a sequence of dictionary words,
using a prefix trie and a memoized search over split points.

Basic Usage:
    import wordbreak

    wordbreak.can_segment("applepenapple", {"apple", "pen"})   # True
    wordbreak.segment("applepenapple", {"apple", "pen"})       # ['apple', 'pen', 'apple']
"""

from contextlib import contextmanager
from typing import Iterable, List, Optional, Union

from wordbreak.constants import DEFAULT_TIMEOUT, MAX_WORKERS
from wordbreak.dictionary import CompiledDictionary
from wordbreak.segmenter import Resolution, Segmenter
from wordbreak.trie import Trie, TrieNode

__version__ = "0.1.0"

DictionaryLike = Union[Iterable[str], Trie, CompiledDictionary, Segmenter]


# =============================================================================
# Exceptions
# =============================================================================

class SegmentationTimeoutError(Exception):
    """Raised when async segmentation times out."""
    pass


class TextTooLongError(ValueError):
    """Raised when input text exceeds maximum length."""
    pass


# =============================================================================
# Main API
# =============================================================================

def _as_segmenter(dictionary: DictionaryLike) -> Segmenter:
    if isinstance(dictionary, str):
        raise TypeError("dictionary must be a collection of words, not a str")
    if isinstance(dictionary, Segmenter):
        return dictionary
    if isinstance(dictionary, (Trie, CompiledDictionary)):
        return Segmenter(dictionary)
    return Segmenter.from_words(dictionary)


def _check_text(text: str, max_length: Optional[int]) -> None:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")
    if max_length is not None and len(text) > max_length:
        raise TextTooLongError(
            f"text has {len(text)} characters, limit is {max_length}"
        )


def can_segment(
    text: str,
    dictionary: DictionaryLike,
    max_length: Optional[int] = None,
) -> bool:
    """
    Check if text can be split into a sequence of dictionary words.

    This is the main entry point.

    Args:
        text: String to segment. Case and whitespace are significant.
        dictionary: Iterable of words, or a prebuilt Trie,
            CompiledDictionary or Segmenter
        max_length: Reject longer inputs instead of searching them

    Returns:
        True if every character of text is covered by consecutive
        dictionary words. The empty string is always segmentable.

    Raises:
        TypeError: If text is not a string, or dictionary is a single str
        TextTooLongError: If text is longer than max_length

    Example:
        >>> import wordbreak
        >>> wordbreak.can_segment("cars", {"car", "ca", "rs"})
        True
        >>> wordbreak.can_segment("a", {"apple", "banana"})
        False
    """
    _check_text(text, max_length)
    return _as_segmenter(dictionary).can_segment(text)


def segment(
    text: str,
    dictionary: DictionaryLike,
    max_length: Optional[int] = None,
) -> Optional[List[str]]:
    """
    Split text into dictionary words.

    Only one segmentation is returned even when several exist; shorter
    words are preferred from left to right.

    Args:
        text: String to segment
        dictionary: Iterable of words, or a prebuilt Trie,
            CompiledDictionary or Segmenter
        max_length: Reject longer inputs instead of searching them

    Returns:
        List of words, or None if text cannot be segmented

    Example:
        >>> wordbreak.segment("cars", {"car", "ca", "rs"})
        ['ca', 'rs']
    """
    _check_text(text, max_length)
    return _as_segmenter(dictionary).segment(text)


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Async API
# =============================================================================

# Thread pool for async operations
_executor = None
_executor_lock = None

def _get_executor():
    """Get or create the thread pool executor."""
    global _executor, _executor_lock
    import threading
    from concurrent.futures import ThreadPoolExecutor

    if _executor_lock is None:
        _executor_lock = threading.Lock()

    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(max_workers=MAX_WORKERS, thread_name_prefix="wordbreak")

    return _executor


async def can_segment_async(
    text: str,
    dictionary: DictionaryLike,
    timeout: float = DEFAULT_TIMEOUT,
    max_length: Optional[int] = None,
) -> bool:
    """
    Check segmentability in a worker thread.

    The timeout stops the wait, not the search: a timed-out search keeps
    its worker busy until it finishes. Use max_length to bound the work.

    Raises:
        SegmentationTimeoutError: If the search exceeds timeout
        TextTooLongError: If text is longer than max_length

    Example:
        >>> import asyncio
        >>> asyncio.run(wordbreak.can_segment_async("applepen", {"apple", "pen"}))
        True
    """
    import asyncio

    _check_text(text, max_length)
    loop = asyncio.get_running_loop()
    executor = _get_executor()

    try:
        future = loop.run_in_executor(executor, can_segment, text, dictionary)
        return await asyncio.wait_for(future, timeout=timeout)
    except asyncio.TimeoutError:
        raise SegmentationTimeoutError(f"Segmentation timed out after {timeout}s")


async def segment_async(
    text: str,
    dictionary: DictionaryLike,
    timeout: float = DEFAULT_TIMEOUT,
    max_length: Optional[int] = None,
) -> Optional[List[str]]:
    """
    Split text into dictionary words in a worker thread.

    Raises:
        SegmentationTimeoutError: If the search exceeds timeout
        TextTooLongError: If text is longer than max_length
    """
    import asyncio

    _check_text(text, max_length)
    loop = asyncio.get_running_loop()
    executor = _get_executor()

    try:
        future = loop.run_in_executor(executor, segment, text, dictionary)
        return await asyncio.wait_for(future, timeout=timeout)
    except asyncio.TimeoutError:
        raise SegmentationTimeoutError(f"Segmentation timed out after {timeout}s")


def shutdown():
    """
    Shutdown the thread pool executor.

    Call this when your application is shutting down to cleanly
    release resources.
    """
    global _executor
    if _executor is not None:
        _executor.shutdown(wait=True)
        _executor = None


# =============================================================================
# Session Context (for batch processing)
# =============================================================================

@contextmanager
def session_context(dictionary: DictionaryLike):
    """
    Context manager for batch segmentation against one dictionary.

    Builds the lexicon once and yields a Segmenter that can be queried
    repeatedly, also from several threads.

    Example:
        >>> with wordbreak.session_context({"apple", "pen"}) as seg:
        ...     results = [seg.can_segment(t) for t in ("pen", "penapple", "pine")]
        >>> results
        [True, True, False]
    """
    yield _as_segmenter(dictionary)


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Data structures
    "Trie",
    "TrieNode",
    "Segmenter",
    "Resolution",
    "CompiledDictionary",
    # Sync API
    "can_segment",
    "segment",
    "get_version",
    # Async API
    "can_segment_async",
    "segment_async",
    "shutdown",
    # Batch processing
    "session_context",
    # Exceptions
    "SegmentationTimeoutError",
    "TextTooLongError",
    # Version
    "__version__",
]
