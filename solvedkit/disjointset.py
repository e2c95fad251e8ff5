"""Disjoint-set forest and the record-merging problems built on it."""

from __future__ import annotations

from collections.abc import Hashable, Sequence


class DisjointSet:
    """Union by rank over the integers ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        while self._parent[x] != x:
            x = self._parent[x]
        return x

    def merge(self, a: int, b: int) -> None:
        """Join the sets holding ``a`` and ``b``."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return
        if self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            if self._rank[root_a] == self._rank[root_b]:
                self._rank[root_b] += 1
            self._parent[root_a] = root_b

    def sets(self) -> list[list[int]]:
        """All sets, each listing its members in ascending order."""
        groups: dict[int, list[int]] = {}
        for x in range(len(self._parent)):
            groups.setdefault(self.find(x), []).append(x)
        return list(groups.values())


def group_duplicate_contacts(records: Sequence[Sequence[Hashable]]) -> list[list[int]]:
    """Group record indices that share any contact detail.

    Each record starts with a name, which is ignored; the remaining fields
    (e-mail addresses, phone numbers) link records together.
    """
    forest = DisjointSet(len(records))
    first_seen: dict[Hashable, int] = {}
    for index, record in enumerate(records):
        for detail in record[1:]:
            if detail in first_seen:
                forest.merge(index, first_seen[detail])
            else:
                first_seen[detail] = index
    return forest.sets()


def accounts_merge(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts sharing an e-mail address.

    Every result is the owning account's name followed by its sorted,
    distinct e-mail addresses.
    """
    forest = DisjointSet(len(accounts))
    owner: dict[str, int] = {}
    for index, account in enumerate(accounts):
        for email in account[1:]:
            if email in owner:
                forest.merge(owner[email], index)
            owner[email] = index

    emails: dict[int, set[str]] = {}
    for index, account in enumerate(accounts):
        emails.setdefault(forest.find(index), set()).update(account[1:])

    return [[accounts[root][0], *sorted(found)] for root, found in emails.items()]