import pytest

from solvedkit.text import (
    common_chars,
    frequency_sort,
    generate_parenthesis,
    group_anagrams,
    group_anagrams_by_length,
    length_of_longest_substring,
    letter_combinations,
    longest_word,
    repeated_substring_pattern,
    title_to_number,
)


def _normalise(groups):
    return sorted(sorted(group) for group in groups)


def test_letter_combinations_two_digits():
    assert letter_combinations("23") == ["ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf"]


def test_letter_combinations_single_and_empty():
    assert letter_combinations("2") == ["a", "b", "c"]
    assert letter_combinations("7") == ["p", "q", "r", "s"]
    assert letter_combinations("") == []


def test_letter_combinations_rejects_non_digit():
    with pytest.raises(ValueError):
        letter_combinations("2a")


@pytest.mark.parametrize(
    "title, number",
    [("", 0), ("A", 1), ("C", 3), ("AB", 28), ("ZY", 701)],
)
def test_title_to_number(title, number):
    assert title_to_number(title) == number


def test_title_to_number_errors():
    with pytest.raises(ValueError):
        title_to_number("ABCDEFGH")
    with pytest.raises(ValueError):
        title_to_number("ab")


def test_common_chars():
    assert common_chars(["bella", "label", "roller"]) == ["e", "l", "l"]
    assert common_chars(["cool", "lock", "cook"]) == ["c", "o"]
    assert common_chars([]) == []


def test_common_chars_single_word_keeps_all_letters_sorted():
    assert common_chars(["cab"]) == ["a", "b", "c"]


def test_generate_parenthesis_small():
    assert generate_parenthesis(0) == []
    assert generate_parenthesis(1) == ["()"]
    assert generate_parenthesis(2) == ["(())", "()()"]


def test_generate_parenthesis_three():
    assert sorted(generate_parenthesis(3)) == sorted(
        ["((()))", "()(())", "(())()", "(()())", "()()()"]
    )


@pytest.mark.parametrize("n", [3, 4, 5])
def test_generate_parenthesis_outputs_are_balanced(n):
    for text in generate_parenthesis(n):
        assert len(text) == 2 * n
        depth = 0
        for ch in text:
            depth += 1 if ch == "(" else -1
            assert depth >= 0
        assert depth == 0


def test_generate_parenthesis_misses_split_nesting():
    assert "(())(())" not in generate_parenthesis(4)


@pytest.mark.parametrize("grouper", [group_anagrams, group_anagrams_by_length])
def test_group_anagrams(grouper):
    result = grouper(["eat", "tea", "tan", "ate", "nat", "bat"])
    assert _normalise(result) == [["ate", "eat", "tea"], ["bat"], ["nat", "tan"]]


@pytest.mark.parametrize("grouper", [group_anagrams, group_anagrams_by_length])
def test_group_anagrams_distinct_words(grouper):
    words = ["cab", "tin", "pew", "duh", "may", "ill", "buy", "bar", "max", "doc"]
    assert _normalise(grouper(words)) == sorted([word] for word in words)


@pytest.mark.parametrize("grouper", [group_anagrams, group_anagrams_by_length])
def test_group_anagrams_with_empty_strings(grouper):
    result = grouper(["", "cab", "", "", "abc"])
    assert _normalise(result) == [["", "", ""], ["abc", "cab"]]


def test_group_anagrams_rejects_uppercase():
    with pytest.raises(ValueError):
        group_anagrams(["Eat"])


def test_length_of_longest_substring_source_case():
    assert length_of_longest_substring("dvdf") == 3


@pytest.mark.parametrize(
    "s, expected",
    [("", 0), ("abcabcbb", 3), ("bbbbb", 1), ("pwwkew", 3), ("bbbba", 2), ("b", 1)],
)
def test_length_of_longest_substring_more(s, expected):
    assert length_of_longest_substring(s) == expected


def test_longest_word():
    assert longest_word(["w", "wo", "wor", "worl", "world"]) == "world"
    assert longest_word(["a", "banana", "app", "appl", "ap", "apply", "apple"]) == "apple"


def test_longest_word_falls_back_to_single_letter():
    words = [
        "ts", "e", "x", "pbhj", "opto", "xhigy", "erikz", "pbh", "opt", "erikzb", "eri",
        "erik", "xlye", "xhig", "optoj", "optoje", "xly", "pb", "xhi", "x", "o",
    ]
    assert longest_word(words) == "e"


def test_longest_word_empty_and_too_long():
    assert longest_word([]) == ""
    with pytest.raises(ValueError):
        longest_word(["a" * 31])


@pytest.mark.parametrize(
    "s, expected",
    [
        ("aaaaaaaaaa", True),
        ("abab", True),
        ("aba", False),
        ("abcabcabcabc", True),
        ("babbabbabbabbab", True),
        ("aabaaba", False),
        ("", False),
    ],
)
def test_repeated_substring_pattern(s, expected):
    assert repeated_substring_pattern(s) is expected


def test_frequency_sort_source_cases():
    assert frequency_sort("tree") == "eert"
    assert frequency_sort("cccaaa") == "aaaccc"
    assert frequency_sort("Aabb") == "bbAa"


def test_frequency_sort_keeps_characters():
    text = "mississippi"
    assert sorted(frequency_sort(text)) == sorted(text)