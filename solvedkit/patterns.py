"""Text scanning challenges solved with regular expressions."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence

_LINK_OPEN = re.compile(r'< *a *href *= *"', re.IGNORECASE)
_LINK_CLOSE = re.compile(r"< */ *a *>", re.IGNORECASE)

_DOMAIN = re.compile(r"http://([a-z0-9]+[.]{1}[a-z0-9\-\.]*[a-z0-9]+)+")
_DOMAIN_PREFIXES = ("www", "ww2")

_WORD = re.compile(r"[0-9A-Za-z_]+")

_LANGUAGES = frozenset(
    "C:CPP:JAVA:PYTHON:PERL:PHP:RUBY:CSHARP:HASKELL:CLOJURE:BASH:SCALA:ERLANG:"
    "CLISP:LUA:BRAINFUCK:JAVASCRIPT:GO:D:OCAML:R:PASCAL:SBCL:DART:GROOVY:OBJECTIVEC".split(":")
)

_PHONE = re.compile(r"([0-9]+)[\- ]([0-9]+)[\- ]([0-9]+)")

_SUMMARY = re.compile(r'<[ ]*div[ ]*class[ ]*=[ ]*"[ ]*summary[ ]*"[ ]*>', re.IGNORECASE)
_H3_OPEN = re.compile(r"<[ ]*h3[ ]*>", re.IGNORECASE)
_H3_CLOSE = re.compile(r"<[ ]*/[ ]*h3[ ]*>", re.IGNORECASE)
_ASKED_SPAN = re.compile(r"asked[ ]*<[ ]*span[ ]+title[ ]*=[ ]*", re.IGNORECASE)
_QUESTION_LINK = re.compile(r"<[ ]*a[ ]+href[ ]*=[ ]*['|\"]", re.IGNORECASE)
_QUESTIONS = "/questions/"

_UTOPIAN_ID = re.compile(r"^[a-z]{0,3}[0-9]{2,8}[A-Z]{3,}")


def _find(text: str, sub: str, start: int = 0) -> int:
    index = text.find(sub, start)
    if index < 0:
        raise ValueError(f"expected {sub!r} after position {start}")
    return index


def _search(pattern: re.Pattern[str], text: str, start: int) -> re.Match[str]:
    match = pattern.search(text, start)
    if match is None:
        raise ValueError(f"expected a match of {pattern.pattern!r} after position {start}")
    return match


def detect_html_links(lines: Iterable[str]) -> list[tuple[str, str]]:
    """Each anchor of an HTML document as ``(url, text)``, both stripped.

    When the anchor's content holds nested tags, the text before the first
    closing tag is used; a self-closing element gives empty text.
    """
    doc = "".join(line + " " for line in lines)
    links: list[tuple[str, str]] = []
    for opening in _LINK_OPEN.finditer(doc):
        start = opening.end()
        quote = _find(doc, '"', start)
        url = doc[start:quote]
        tag_end = _find(doc, ">", quote)
        closing = _search(_LINK_CLOSE, doc, tag_end)
        content = doc[tag_end + 1 : closing.start()]

        inner_close = content.find("</")
        if inner_close >= 0:
            last_gt = content.rfind(">", 1, inner_close)
            if last_gt < 0:
                last_gt = min(inner_close - 1, 0)
            content = content[last_gt + 1 : inner_close]
        elif "/>" in content:
            content = ""
        links.append((url.strip(), content.strip()))
    return links


def detect_domains(lines: Iterable[str]) -> list[str]:
    """Sorted domain names of the ``http://`` links in the text.

    A leading ``www.`` or ``ww2.`` is dropped after the distinct hosts are
    collected, so a bare and a prefixed host both appear.
    """
    text = "".join(line + "\n" for line in lines)
    hosts = {match.group(1) for match in _DOMAIN.finditer(text)}
    return sorted(host[4:] if host.startswith(_DOMAIN_PREFIXES) else host for host in hosts)


def count_words(lines: Iterable[str], queries: Iterable[str]) -> list[int]:
    """How often each query occurs as a whole word, ignoring case."""
    counts = Counter(
        word.lower() for line in lines for word in _WORD.findall(line)
    )
    return [counts[query.lower()] for query in queries]


def count_inner_substrings(lines: Iterable[str], queries: Iterable[str]) -> list[int]:
    """For each query, the number of words holding it strictly inside.

    Only the first occurrence of the query in a word is considered; it must
    neither start nor end the word.
    """
    words = [word for line in lines for word in _WORD.findall(line)]
    results = []
    for query in queries:
        size = len(query)
        count = 0
        for word in words:
            if len(word) > size:
                position = word.find(query)
                if 0 < position < len(word) - size:
                    count += 1
        results.append(count)
    return results


def validate_languages(lines: Iterable[str]) -> list[bool]:
    """Whether the second space-separated field of each line is a known language."""
    results = []
    for line in lines:
        parts = line.split(" ")
        results.append(len(parts) >= 2 and parts[1] in _LANGUAGES)
    return results


def identify_comments(lines: Iterable[str]) -> list[str]:
    """Comments of a C-like source, in order; block comments keep their newlines."""
    comments: list[str] = []
    in_block = False
    pending: list[str] = []

    for raw in lines:
        line = raw.strip()
        line_comment = line.find("//")
        block_start = line.find("/*")

        if in_block:
            block_end = line.find("*/")
            if block_end < 0:
                pending.append(line + "\n")
                continue
            pending.append(line[: block_end + 2])
            comments.append("".join(pending))
            in_block = False
            pending = []

        if line_comment >= 0 and (block_start < 0 or line_comment < block_start):
            comments.append(line[line_comment:])
            continue

        if block_start >= 0:
            pending.append(line[block_start:] + "\n")
            in_block = True
            block_end = line.find("*/")
            if block_end >= 0:
                if block_end + 2 < block_start:
                    raise ValueError(f"comment closes before it opens: {line!r}")
                in_block = False
                comments.append(line[block_start : block_end + 2])
                pending = []
                if line_comment >= 0:
                    comments.append(line[line_comment:])
    return comments


def saying_hi(lines: Iterable[str]) -> list[str]:
    """Lines starting with ``hi `` (any case) not followed by ``d``."""
    selected = []
    for line in lines:
        lowered = line.lower()
        if lowered.startswith("hi ") and len(lowered) >= 4 and lowered[3] != "d":
            selected.append(line)
    return selected


def split_number(line: str) -> tuple[str, str, str]:
    """Country code, local area code and number of a phone number."""
    match = _PHONE.search(line)
    if match is None:
        raise ValueError(f"not a phone number: {line!r}")
    return match.group(1), match.group(2), match.group(3)


def _title_and_id(header: str) -> tuple[str, str]:
    link = _QUESTION_LINK.search(header)
    if link is not None:
        start_id = _find(header, _QUESTIONS, link.end()) + len(_QUESTIONS)
        end_id = _find(header, "/", start_id)
        start_title = _find(header, ">", end_id) + 1
        end_title = _find(header, "<", end_id)
        return header[start_title:end_title], header[start_id:end_id]

    start_title = header.find("[") + 1
    end_title = _find(header, "]")
    start_id = _find(header, _QUESTIONS) + len(_QUESTIONS)
    end_id = _find(header, "/", start_id)
    return header[start_title:end_title], header[start_id:end_id]


def scrape_stack_exchange(lines: Iterable[str]) -> list[tuple[str, str, str]]:
    """Each question summary of a page as ``(id, title, asked time)``."""
    doc = "".join(lines)
    questions = []
    for summary in _SUMMARY.finditer(doc):
        opening = _search(_H3_OPEN, doc, summary.end())
        closing = _search(_H3_CLOSE, doc, opening.end())
        title, question_id = _title_and_id(doc[opening.end() : closing.start()])

        span = _search(_ASKED_SPAN, doc, closing.start())
        start_time = _find(doc, ">", span.end()) + 1
        end_time = _find(doc, "<", span.end() + 1)
        questions.append((question_id, title, doc[start_time:end_time]))
    return questions


def count_uk_us(lines: Iterable[str], queries: Iterable[str]) -> list[int]:
    """Occurrences of each ``-ze`` word plus its ``-se`` spelling."""
    counts = Counter(word for line in lines for word in line.split(" "))
    results = []
    for word in queries:
        if len(word) < 2:
            raise ValueError(f"word too short to respell: {word!r}")
        british = word[:-2] + "s" + word[-1:]
        results.append(counts[word] + counts[british])
    return results


def is_utopian_id(text: str) -> bool:
    """Whether ``text`` begins with a valid Utopian identification number."""
    return _UTOPIAN_ID.match(text) is not None


__all__: Sequence[str] = (
    "detect_html_links",
    "detect_domains",
    "count_words",
    "count_inner_substrings",
    "validate_languages",
    "identify_comments",
    "saying_hi",
    "split_number",
    "scrape_stack_exchange",
    "count_uk_us",
    "is_utopian_id",
)