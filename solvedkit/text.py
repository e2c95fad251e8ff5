"""Word and character puzzles over strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import product

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_MAX_TITLE_LENGTH = 7
_MAX_WORD_LENGTH = 30


def _letter_index(ch: str) -> int:
    if not "a" <= ch <= "z":
        raise ValueError(f"unsupported character {ch!r}: only a-z is allowed")
    return ord(ch) - ord("a")


def letter_combinations(digits: str) -> list[str]:
    """Every string the phone keypad can spell for ``digits``."""
    if not digits:
        return []
    groups = []
    for digit in digits:
        if not "0" <= digit <= "9":
            raise ValueError(f"unsupported keypad digit {digit!r}")
        groups.append(_KEYPAD[int(digit)])
    return ["".join(letters) for letters in product(*groups)]


def title_to_number(title: str) -> int:
    """Column number of a spreadsheet column title such as ``"AB"``."""
    if len(title) > _MAX_TITLE_LENGTH:
        raise ValueError(f"column titles longer than {_MAX_TITLE_LENGTH} letters are not supported")
    number = 0
    for ch in title:
        if not "A" <= ch <= "Z":
            raise ValueError(f"unsupported character {ch!r}: only A-Z is allowed")
        number = number * 26 + ord(ch) - ord("A") + 1
    return number


def common_chars(words: Sequence[str]) -> list[str]:
    """Letters found in every word, repeated as often as they all share them."""
    if not words:
        return []
    for ch in words[0]:
        _letter_index(ch)
    common = Counter(words[0])
    for word in words[1:]:
        common &= Counter(word)
    return sorted(common.elements())


def _parenthesis_pairs(n: int) -> list[tuple[str, bool]]:
    """Strings of ``n`` pairs, flagged when they begin with a bare ``()``."""
    if n == 2:
        return [("(())", False), ("()()", True)]
    result: list[tuple[str, bool]] = []
    for text, starts_with_pair in _parenthesis_pairs(n - 1):
        result.append(("(" + text + ")", False))
        result.append(("()" + text, True))
        if not starts_with_pair:
            result.append((text + "()", False))
    return result


def generate_parenthesis(n: int) -> list[str]:
    """Balanced strings of ``n`` pairs built by wrapping and prefixing/suffixing ``()``.

    From four pairs on, arrangements such as ``(())(())`` are not produced.
    """
    if n <= 0:
        return []
    if n == 1:
        return ["()"]
    return [text for text, _ in _parenthesis_pairs(n)]


def _count_key(word: str) -> str:
    counts = [0] * 26
    for ch in word:
        counts[_letter_index(ch)] += 1
    return "".join(f"{rep}{letter}" for letter, rep in enumerate(counts) if rep)


def _base25_key(word: str) -> int:
    letters = sorted(_letter_index(ch) for ch in word)
    return sum(letter * 25**position for position, letter in enumerate(letters))


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group words made of the same letters, keyed by their letter counts."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault(_count_key(word), []).append(word)
    return list(groups.values())


def group_anagrams_by_length(strs: Sequence[str]) -> list[list[str]]:
    """Group anagrams by first splitting on length, then on a base-25 letter sum."""
    by_length: dict[int, list[str]] = {}
    for word in strs:
        by_length.setdefault(len(word), []).append(word)
    result: list[list[str]] = []
    for words in by_length.values():
        groups: dict[int, list[str]] = {}
        for word in words:
            groups.setdefault(_base25_key(word), []).append(word)
        result.extend(groups.values())
    return result


def length_of_longest_substring(s: str) -> int:
    """Length of the longest run of ``s`` with no repeated character."""
    best = 0
    start = 0
    last_seen: dict[str, int] = {}
    for index, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best


def longest_word(words: Sequence[str]) -> str:
    """Longest word whose every prefix is also in ``words``.

    Ties go to the alphabetically smallest word; ``""`` when there is none.
    """
    by_length: dict[int, list[str]] = {}
    for word in words:
        if len(word) > _MAX_WORD_LENGTH:
            raise ValueError(f"words longer than {_MAX_WORD_LENGTH} letters are not supported")
        by_length.setdefault(len(word), []).append(word)
    dictionary = set(words)

    for length in sorted(by_length, reverse=True):
        if length == 0:
            continue
        for word in sorted(by_length[length]):
            if length == 1 or all(word[:k] in dictionary for k in range(1, length)):
                return word
    return ""


def repeated_substring_pattern(s: str) -> bool:
    """Whether ``s`` is a shorter string repeated two or more times."""
    size = len(s)
    return any(
        size % width == 0 and s[:width] * (size // width) == s
        for width in range(1, size // 2 + 1)
    )


def frequency_sort(s: str) -> str:
    """Characters of ``s`` grouped, most frequent first; ties by code point."""
    counts = Counter(s)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return "".join(ch * count for ch, count in ordered)