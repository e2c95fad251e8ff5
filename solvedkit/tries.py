"""Prefix trees over lowercase words and dictionaries built on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from string import ascii_lowercase
from typing import Optional


def _letter(ch: str) -> str:
    if not "a" <= ch <= "z":
        raise ValueError(f"unsupported character {ch!r}: only a-z is allowed")
    return ch


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    is_word: bool = False


def _insert(root: _Node, word: str) -> None:
    node = root
    for ch in word:
        node = node.children.setdefault(_letter(ch), _Node())
    if word:
        node.is_word = True


def _walk(root: _Node, word: str) -> Optional[_Node]:
    node = root
    for ch in word:
        child = node.children.get(_letter(ch))
        if child is None:
            return None
        node = child
    return node


class WordDictionary:
    """Words that can be searched with ``.`` standing for any letter."""

    def __init__(self) -> None:
        self._root = _Node()

    def add_word(self, word: str) -> None:
        """Add a lowercase word; the empty word is ignored."""
        _insert(self._root, word)

    def search(self, word: str) -> bool:
        """Whether a stored word matches the pattern ``word``."""
        return bool(word) and self._match(self._root, word)

    def _match(self, node: _Node, word: str) -> bool:
        head, rest = word[0], word[1:]
        if head == ".":
            candidates = list(node.children.values())
        else:
            child = node.children.get(_letter(head))
            candidates = [child] if child is not None else []
        for child in candidates:
            if not rest:
                if child.is_word:
                    return True
            elif self._match(child, rest):
                return True
        return False


class MagicDictionary:
    """Answers whether a word is exactly one letter away from a stored word."""

    def __init__(self) -> None:
        self._variants: set[str] = set()

    def build_dict(self, words: list[str]) -> None:
        """Store every one-letter change of each word."""
        for word in words:
            for index, original in enumerate(word):
                for letter in ascii_lowercase:
                    if letter != original:
                        self._variants.add(word[:index] + letter + word[index + 1 :])

    def search(self, word: str) -> bool:
        """Whether changing exactly one letter of ``word`` gives a stored word."""
        return word in self._variants


class Trie:
    """A prefix tree of lowercase words."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add a word; the empty word is ignored."""
        _insert(self._root, word)

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted."""
        if not word:
            return False
        node = _walk(self._root, word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word begins with a non-empty ``prefix``."""
        if not prefix:
            return False
        return _walk(self._root, prefix) is not None

    def _shortest_word_prefix(self, text: str) -> Optional[str]:
        node = self._root
        for index, ch in enumerate(text):
            child = node.children.get(_letter(ch))
            if child is None:
                return None
            if child.is_word:
                return text[: index + 1]
            node = child
        return None


def replace_words(roots: list[str], sentence: str) -> str:
    """Replace each word of ``sentence`` by the shortest root it starts with."""
    trie = Trie()
    for root in roots:
        trie.insert(root)
    words = sentence.split(" ")
    return " ".join(trie._shortest_word_prefix(word) or word for word in words)


def replace_words_by_length(roots: list[str], sentence: str) -> str:
    """Same as ``replace_words`` but looks roots up by length in plain sets."""
    by_length: dict[int, set[str]] = {}
    for root in roots:
        by_length.setdefault(len(root), set()).add(root)
    longest = max(by_length, default=0)

    def shorten(word: str) -> str:
        for length in range(1, min(longest + 1, len(word))):
            if word[:length] in by_length.get(length, ()):
                return word[:length]
        return word

    return " ".join(shorten(word) for word in sentence.split(" "))