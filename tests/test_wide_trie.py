import pytest

from wide_trie import AlphabetError, DEFAULT_RADIX, WideTrie


def occupied(node):
    return [chr(c) for c, child in enumerate(node.children) if child is not None]


def test_default_radix():
    t = WideTrie()
    assert t.radix == DEFAULT_RADIX
    t.put("ÿ", 1)
    assert t.get("ÿ") == 1


def test_invalid_radix():
    with pytest.raises(ValueError):
        WideTrie(radix=0)


def test_out_of_alphabet_put_fails_fast():
    t = WideTrie(radix=128)
    t.put("ab", 1)
    with pytest.raises(AlphabetError, match="outside the alphabet"):
        t.put("abé", 2)
    # Nothing is built for a rejected key.
    assert occupied(t._find_node("ab")) == []
    assert len(t) == 1


def test_alphabet_error_is_value_error():
    with pytest.raises(ValueError):
        WideTrie(radix=2).put("a", 1)


def test_out_of_alphabet_reads_are_absent():
    t = WideTrie(radix=128)
    t.put("ab", 1)
    assert t.get("é") is None
    assert "é" not in t
    assert t.delete("é") is False
    assert t.longest_prefix_of("abé") == "ab"
    assert list(t.keys_with_prefix("é")) == []
    assert list(t.keys_that_match("aé")) == []
    assert not t.starts_with("é")


def test_small_radix():
    t = WideTrie(radix=ord("c") + 1)
    for key in ["cab", "abc", "bca", "c"]:
        t.put(key, key)
    assert list(t.keys()) == ["abc", "bca", "c", "cab"]
    assert list(t.keys_that_match("..a")) == ["bca"]


def test_root_is_created_lazily():
    t = WideTrie()
    assert t._root is None
    t.put("a", 1)
    assert t._root is not None


def test_delete_prunes_dead_branch():
    t = WideTrie()
    t.put("abc", 1)
    t.put("abd", 2)
    t.delete("abd")
    assert t._find_node("abd") is None
    assert occupied(t._find_node("ab")) == ["c"]

    t.delete("abc")
    assert t._root is None
    assert len(t) == 0


def test_delete_keeps_node_with_value():
    t = WideTrie()
    t.put("app", 1)
    t.put("apple", 2)
    t.delete("apple")
    node = t._find_node("app")
    assert node is not None
    assert node.is_end
    assert occupied(node) == []


def test_delete_keeps_routing_node():
    t = WideTrie()
    t.put("app", 1)
    t.put("apple", 2)
    t.delete("app")
    node = t._find_node("app")
    assert node is not None
    assert not node.is_end
    assert node.value is None
    assert occupied(node) == ["l"]
    assert t.get("apple") == 2


def test_delete_missing_key_leaves_structure():
    t = WideTrie()
    t.put("abc", 1)
    assert t.delete("ab") is False
    assert t.delete("abcd") is False
    assert t.get("abc") == 1
    assert occupied(t._find_node("ab")) == ["c"]
