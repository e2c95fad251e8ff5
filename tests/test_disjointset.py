import pytest

from solvedkit.disjointset import DisjointSet, accounts_merge, group_duplicate_contacts


def _normalise(groups):
    return sorted(sorted(group) for group in groups)


def test_fresh_forest_has_singletons():
    forest = DisjointSet(4)
    assert _normalise(forest.sets()) == [[0], [1], [2], [3]]
    assert len(forest) == 4


def test_merge_joins_roots():
    forest = DisjointSet(5)
    forest.merge(0, 3)
    forest.merge(3, 4)
    assert forest.find(0) == forest.find(4)
    assert forest.find(1) != forest.find(0)
    assert len(forest.sets()) == 3


def test_merge_same_set_is_noop():
    forest = DisjointSet(3)
    forest.merge(0, 1)
    before = _normalise(forest.sets())
    forest.merge(1, 0)
    forest.merge(2, 2)
    assert _normalise(forest.sets()) == before


def test_sets_partition_all_elements():
    forest = DisjointSet(10)
    for a, b in [(0, 9), (2, 4), (4, 6), (9, 5)]:
        forest.merge(a, b)
    members = sorted(x for group in forest.sets() for x in group)
    assert members == list(range(10))
    for group in forest.sets():
        assert len({forest.find(x) for x in group}) == 1


def test_empty_forest():
    assert DisjointSet(0).sets() == []


def test_find_out_of_range():
    forest = DisjointSet(2)
    with pytest.raises(IndexError):
        forest.find(2)
    with pytest.raises(IndexError):
        forest.find(-1)


def test_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_group_duplicate_contacts():
    records = [
        ["John", "john@example.com", "john.doe@example.com"],
        ["Dan", "dan@example.com", "phone-a"],
        ["john123", "phone-b", "jdoe@example.com"],
        ["john1985", "phone-b", "john.doe@example.com"],
    ]
    assert _normalise(group_duplicate_contacts(records)) == [[0, 2, 3], [1]]


def test_group_duplicate_contacts_without_overlap():
    records = [["a", "a@example.com"], ["b", "b@example.com"]]
    assert _normalise(group_duplicate_contacts(records)) == [[0], [1]]


def test_accounts_merge():
    accounts = [
        ["John", "johnsmith@example.com", "john00@example.com"],
        ["John", "johnnybravo@example.com"],
        ["John", "johnsmith@example.com", "john_newyork@example.com"],
        ["Mary", "mary@example.com"],
    ]
    result = sorted(accounts_merge(accounts))
    assert result == [
        ["John", "john00@example.com", "john_newyork@example.com", "johnsmith@example.com"],
        ["John", "johnnybravo@example.com"],
        ["Mary", "mary@example.com"],
    ]


def test_accounts_merge_deduplicates_and_sorts():
    accounts = [["Ann", "z@example.com", "a@example.com", "z@example.com"]]
    result = accounts_merge(accounts)
    assert len(result) == 1
    assert result[0][1:] == sorted(set(accounts[0][1:]))