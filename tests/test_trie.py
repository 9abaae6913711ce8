import pytest

from wordbreak.trie import Trie


@pytest.fixture
def words():
    trie = Trie()
    for w in ("car", "ca", "rs", "cart"):
        trie.insert(w, True)
    return trie


def test_get_inserted_key(words):
    assert words.get("car") is True
    assert words.get("cart") is True


def test_inner_prefix_is_absent():
    trie = Trie()
    trie.insert("apple", 1)
    assert trie.get("app") is None
    assert trie.has_prefix("app")
    assert "app" not in trie


def test_missing_edge_is_absent(words):
    assert words.get("cat") is None
    assert words.get("x") is None
    assert words.get("cartwheel") is None


def test_default_returned_when_absent(words):
    assert words.get("dog", False) is False


def test_insert_overwrites_value():
    trie = Trie()
    trie.insert("key", 1)
    trie.insert("key", 2)
    assert trie.get("key") == 2
    assert len(trie) == 1


def test_empty_key_sets_root_value():
    trie = Trie()
    assert trie.get("") is None
    trie.insert("", "root")
    assert trie.get("") == "root"
    assert trie.root.value == "root"
    assert len(trie) == 1


def test_none_is_a_storable_value():
    trie = Trie()
    trie.insert("nothing", None)
    assert "nothing" in trie
    assert trie.get("nothing", "absent") is None


def test_non_character_symbols():
    trie = Trie()
    trie.insert((1, 2, 3), "a")
    trie.insert([1, 2], "b")
    assert trie.get((1, 2, 3)) == "a"
    assert trie.get((1, 2)) == "b"
    assert trie.get((1,)) is None


def test_len_counts_complete_keys(words):
    assert len(words) == 4
    assert len(Trie()) == 0


def test_has_prefix(words):
    assert words.has_prefix("")
    assert words.has_prefix("c")
    assert words.has_prefix("cart")
    assert not words.has_prefix("carts")


def test_prefix_lengths_shortest_first(words):
    assert list(words.prefix_lengths("cartwheel")) == [2, 3, 4]


def test_prefix_lengths_from_offset(words):
    assert list(words.prefix_lengths("cars", 2)) == [2]
    assert list(words.prefix_lengths("cars", 4)) == []


def test_prefix_lengths_skips_empty_key():
    trie = Trie()
    trie.insert("", True)
    trie.insert("a", True)
    assert list(trie.prefix_lengths("aa")) == [1]


def test_lookups_do_not_grow_trie(words):
    before = len(words.root.children)
    words.get("zebra")
    words.has_prefix("zz")
    list(words.prefix_lengths("zzz"))
    assert len(words.root.children) == before
