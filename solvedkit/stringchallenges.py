"""Short string challenges: deletions, permutations and letter checks."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import groupby
from string import ascii_lowercase
from typing import Optional


def alternating_deletions(s: str) -> int:
    """Deletions needed so that no two neighbouring characters are equal."""
    return sum(len(list(run)) - 1 for _, run in groupby(s))


def bigger_is_greater(word: str) -> Optional[str]:
    """Smallest rearrangement of ``word`` greater than it, or ``None``."""
    chars = list(word)
    pivot = next(
        (index for index in range(len(chars) - 1, 0, -1) if chars[index] > chars[index - 1]),
        None,
    )
    if pivot is None:
        return None
    head = chars[pivot - 1]
    swap = min(
        (index for index in range(pivot, len(chars)) if chars[index] > head),
        key=lambda index: chars[index],
    )
    chars[pivot - 1], chars[swap] = chars[swap], chars[pivot - 1]
    chars[pivot:] = sorted(chars[pivot:])
    return "".join(chars)


def _steps(s: str) -> list[int]:
    return [abs(ord(b) - ord(a)) for a, b in zip(s, s[1:])]


def is_funny(s: str) -> bool:
    """Whether neighbour differences read the same forwards and on the reversed string."""
    return _steps(s) == _steps(s[::-1])


def can_form_palindrome(s: str) -> bool:
    """Whether the characters of ``s`` can be arranged into a palindrome."""
    odd = sum(1 for count in Counter(s).values() if count % 2)
    return odd == len(s) % 2


def gem_stones(rocks: Sequence[str]) -> int:
    """Number of lowercase letters found in every rock."""
    return sum(1 for letter in ascii_lowercase if all(letter in rock for rock in rocks))


def _is_palindrome(s: str) -> bool:
    return s == s[::-1]


def palindrome_index(s: str) -> int:
    """Index whose removal makes ``s`` a palindrome, or ``-1`` if it already is one."""
    last = len(s) - 1
    for a in range(len(s) // 2):
        b = last - a
        if s[a] != s[b]:
            return a if _is_palindrome(s[:a] + s[a + 1 :]) else b
    return -1


def is_pangram(s: str) -> bool:
    """Whether ``s`` uses every letter of the alphabet, ignoring case."""
    return set(ascii_lowercase) <= set(s.lower())


def share_substring(a: str, b: str) -> bool:
    """Whether the two strings have a character in common."""
    return not set(a).isdisjoint(b)