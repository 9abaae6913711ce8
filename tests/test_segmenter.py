import random

import pytest

from wordbreak.segmenter import Resolution, Segmenter, build_trie, can_segment


def naive_can_segment(text, dictionary):
    """Unmemoized reference search."""
    if not text:
        return True
    return any(
        text[:end] in dictionary and naive_can_segment(text[end:], dictionary)
        for end in range(1, len(text) + 1)
    )


@pytest.mark.parametrize("text, dictionary, expected", [
    ("applepenapple", ["apple", "pen"], True),
    ("catsandog", ["cats", "dog", "sand", "and", "cat"], False),
    ("cars", ["car", "ca", "rs"], True),
    ("", ["apple", "pen"], True),
    ("apple", [], False),
    ("a", ["a"], True),
    ("b", ["a"], False),
    ("a", ["apple", "banana"], False),
    ("abcdefghijklmnoqrstuv", ["a", "bc", "def", "ghij", "klmno", "pqrst"], False),
    ("abcdefghijklmnopqrst", ["a", "bc", "def", "ghij", "klmno", "pqrst"], True),
    ("ab" * 100, ["a", "b", "ab"], True),
    ("a" * 100, ["b"], False),
    ("pineapplepenapple", ["apple", "pen", "applepen", "pine", "pineapple"], True),
    ("abcd", ["a", "abc", "b", "cd"], True),
])
def test_scenarios(text, dictionary, expected):
    assert can_segment(text, dictionary) is expected


def test_long_inputs_do_not_hit_recursion_limit():
    assert can_segment("abc" * 1000, {"a", "ab", "abc"})
    assert not can_segment("x" * 1000, {"a", "ab", "abc"})
    assert can_segment("a" * 20000, {"a"})


def test_empty_string_with_empty_dictionary():
    assert can_segment("", set())


def test_case_and_whitespace_are_significant():
    assert not can_segment("Apple", {"apple"})
    assert not can_segment("apple pen", {"apple", "pen"})
    assert can_segment("apple pen", {"apple", " pen"})


def test_non_ascii_text():
    assert can_segment("今日は天気", {"今日", "は", "天気"})
    assert not can_segment("今日は天気", {"今日", "天気"})


def test_empty_entry_is_ignored():
    trie = build_trie(["", "a"])
    assert len(trie) == 1
    assert can_segment("", {""})
    assert not can_segment("b", {"", "a"})
    assert can_segment("aa", {"", "a"})


def test_resolve_memo_table():
    memo = Segmenter.from_words({"car", "ca", "rs"}).resolve("cars")
    assert len(memo) == 5
    assert Resolution.UNRESOLVED not in memo
    assert memo[0] is Resolution.RESOLVABLE
    assert memo[1] is Resolution.UNRESOLVABLE
    assert memo[2] is Resolution.RESOLVABLE
    assert memo[4] is Resolution.RESOLVABLE


def test_memo_is_not_shared_between_calls():
    seg = Segmenter.from_words({"ab", "c"})
    assert seg.resolve("abc") is not seg.resolve("abc")
    assert seg.can_segment("abc")
    assert not seg.can_segment("abd")
    assert seg.can_segment("cab")


def test_segment_prefers_shortest_words():
    seg = Segmenter.from_words({"car", "ca", "rs", "s"})
    assert seg.segment("cars") == ["ca", "rs"]


def test_segment_backs_off_dead_ends():
    seg = Segmenter.from_words({"cats", "dog", "sand", "and", "cat"})
    assert seg.segment("catsanddog") == ["cat", "sand", "dog"]
    assert seg.segment("catsandog") is None


def test_segment_empty_string():
    assert Segmenter.from_words(set()).segment("") == []


def test_segment_covers_text():
    seg = Segmenter.from_words({"a", "b", "ab"})
    text = "ab" * 50
    parts = seg.segment(text)
    assert "".join(parts) == text
    assert all(p in {"a", "b", "ab"} for p in parts)


# =============================================================================
# Randomized properties
# =============================================================================

ALPHABET = "abc"


def random_case(rng):
    dictionary = {
        "".join(rng.choice(ALPHABET) for _ in range(rng.randint(1, 3)))
        for _ in range(rng.randint(0, 5))
    }
    text = "".join(rng.choice(ALPHABET) for _ in range(rng.randint(0, 12)))
    return text, dictionary


def test_agrees_with_naive_search():
    rng = random.Random(1234)
    for _ in range(500):
        text, dictionary = random_case(rng)
        assert can_segment(text, dictionary) is naive_can_segment(text, dictionary)


def test_empty_dictionary_rejects_non_empty_text():
    rng = random.Random(7)
    for _ in range(50):
        text, _ = random_case(rng)
        assert can_segment(text, set()) is (text == "")


def test_dictionary_words_are_segmentable():
    rng = random.Random(99)
    for _ in range(200):
        _, dictionary = random_case(rng)
        for word in dictionary:
            assert can_segment(word, dictionary)


def test_monotonic_under_dictionary_growth():
    rng = random.Random(2024)
    for _ in range(300):
        text, dictionary = random_case(rng)
        if not can_segment(text, dictionary):
            continue
        _, extra = random_case(rng)
        assert can_segment(text, dictionary | extra)


def test_concatenated_words_are_segmentable():
    rng = random.Random(5)
    for _ in range(200):
        _, dictionary = random_case(rng)
        if not dictionary:
            continue
        words = sorted(dictionary)
        text = "".join(rng.choice(words) for _ in range(rng.randint(0, 6)))
        assert can_segment(text, dictionary)
