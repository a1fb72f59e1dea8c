"""
Case-insensitive substring filtering and match highlighting.

Filtering and highlighting search the same case-folded copy of each name,
so every retained name carries at least one highlight span. The query is
located with plain substring search, never compiled into a pattern, so
characters such as ``.``, ``*`` or ``(`` always match literally.

All functions here are pure: they never mutate the candidate sequence and
return a fresh tuple on every call.
"""

from typing import Iterable

from namesearch.config import DEFAULT_HIGHLIGHT_CLASS
from namesearch.domain.types import NameMatch


def normalize_query(query: str) -> str:
    """Strip surrounding whitespace and case-fold ``query`` for comparison."""
    return query.strip().lower()


def _fold_with_offsets(text: str) -> tuple[str, list[int]]:
    # Lowercasing can lengthen a character ("İ" -> "i̇"), so remember which
    # original character each folded character came from.
    folded: list[str] = []
    offsets: list[int] = []
    for index, char in enumerate(text):
        lowered = char.lower()
        folded.append(lowered)
        offsets.extend([index] * len(lowered))
    return "".join(folded), offsets


def match_spans(text: str, query: str) -> list[tuple[int, int]]:
    """
    Find every non-overlapping occurrence of ``query`` in ``text``, ignoring case.

    The query is normalized first. Spans are ``(start, end)`` offsets into
    ``text`` and always cover whole original characters.

    Example:
        >>> match_spans("Anna Banana", "an")
        [(0, 2), (6, 8), (8, 10)]
    """
    needle = normalize_query(query)
    if not needle:
        return []
    folded, offsets = _fold_with_offsets(text)
    spans: list[tuple[int, int]] = []
    position = folded.find(needle)
    while position != -1:
        start = offsets[position]
        end = offsets[position + len(needle) - 1] + 1
        if spans and start < spans[-1][1]:
            spans[-1] = (spans[-1][0], max(end, spans[-1][1]))
        else:
            spans.append((start, end))
        position = folded.find(needle, position + len(needle))
    return spans


def highlight_match(text: str, query: str, css_class: str = DEFAULT_HIGHLIGHT_CLASS) -> str:
    """
    Wrap every case-insensitive occurrence of ``query`` in ``text`` with a ``<mark>`` span.

    The original casing of ``text`` is kept inside the span. An empty query
    returns ``text`` unchanged.

    Example:
        >>> highlight_match("Alice", "al")
        '<mark class="name-search__highlight">Al</mark>ice'
    """
    return _wrap_spans(text, match_spans(text, query), css_class)


def _wrap_spans(text: str, spans: list[tuple[int, int]], css_class: str) -> str:
    parts: list[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(text[cursor:start])
        parts.append(f'<mark class="{css_class}">{text[start:end]}</mark>')
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


def filter_names(
    names: Iterable[str],
    query: str,
    css_class: str = DEFAULT_HIGHLIGHT_CLASS,
) -> tuple[NameMatch, ...]:
    """
    Keep the names that contain ``query`` and attach their highlighted form.

    The query is stripped and case-folded first; a blank query matches
    nothing, so "no query yet" is distinguishable from "query with no
    matches". Candidates keep their original relative order.

    Args:
        names: Candidate names, in display order
        query: The committed query as typed by the user
        css_class: Class attribute of the highlight spans

    Returns:
        Matches in candidate order
    """
    needle = normalize_query(query)
    if not needle:
        return ()
    matches = []
    for name in names:
        spans = match_spans(name, needle)
        if spans:
            matches.append(NameMatch(original=name, highlighted=_wrap_spans(name, spans, css_class)))
    return tuple(matches)
