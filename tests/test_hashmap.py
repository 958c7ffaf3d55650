import pytest

from lotuskit.hashmap import Hashmap, string_hash


def test_core_test_name_lookup():
    hmap = Hashmap(10)
    hmap.set("Name", "D34D0S")
    assert hmap.get("Name") == "D34D0S"


def test_missing_key_returns_none():
    assert Hashmap(10).get("missing") is None


def test_anagrams_share_a_hash():
    assert string_hash("ab") == string_hash("ba")


def test_colliding_keys_both_retrievable():
    hmap = Hashmap(10)
    assert hmap.set("ab", 1) is True
    assert hmap.set("ba", 2) is True
    assert hmap.get("ab") == 1
    assert hmap.get("ba") == 2
    assert len(hmap) == 2


def test_update_existing_key_returns_false():
    hmap = Hashmap(10)
    hmap.set("k", "one")
    assert hmap.set("k", "two") is False
    assert hmap["k"] == "two"
    assert len(hmap) == 1


def test_none_value_rejected():
    with pytest.raises(ValueError):
        Hashmap(4).set("k", None)


def test_full_map_raises():
    hmap = Hashmap(1)
    hmap.set("a", 1)
    with pytest.raises(OverflowError):
        hmap.set("b", 2)


def test_probing_never_uses_slot_zero():
    hmap = Hashmap(2)
    assert string_hash("a") % 2 == string_hash("c") % 2 == 1
    hmap.set("a", 1)
    with pytest.raises(OverflowError):
        hmap.set("c", 2)


def test_remove_key():
    hmap = Hashmap(10)
    hmap.set("x", 5)
    hmap.remove("x")
    assert hmap.get("x") is None
    assert len(hmap) == 0
    assert "x" not in hmap


def test_remove_missing_raises():
    with pytest.raises(KeyError):
        Hashmap(10).remove("nope")


def test_getitem_missing_raises():
    with pytest.raises(KeyError):
        Hashmap(10)["nope"]


def test_iteration_yields_keys():
    hmap = Hashmap(10)
    hmap.set("ab", 1)
    hmap.set("ba", 2)
    assert sorted(hmap) == ["ab", "ba"]