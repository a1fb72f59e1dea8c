import pytest

from namesearch.core.highlight import filter_names, highlight_match, match_spans
from namesearch.domain.types import NameMatch

from tests.conftest import NAMES

MARK = '<mark class="name-search__highlight">{}</mark>'


def test_filter_is_case_insensitive_and_keeps_candidate_order():
    matches = filter_names(NAMES, "al")

    assert [m.original for m in matches] == ["Alice", "Alex"]
    assert matches[0] == NameMatch("Alice", MARK.format("Al") + "ice")


def test_filter_matches_cyrillic():
    matches = filter_names(NAMES, "бор")

    assert matches == (NameMatch("Борис", MARK.format("Бор") + "ис"),)


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_blank_query_matches_nothing(query):
    assert filter_names(NAMES, query) == ()


def test_query_is_trimmed_before_matching():
    assert [m.original for m in filter_names(NAMES, "  bob ")] == ["Bob"]


def test_filter_keeps_duplicates():
    assert [m.original for m in filter_names(["Ann", "Bob", "Ann"], "ann")] == ["Ann", "Ann"]


def test_every_occurrence_is_highlighted():
    assert highlight_match("Anna Banana", "an") == (
        MARK.format("An") + "na B" + MARK.format("an") + MARK.format("an") + "a"
    )


def test_highlight_keeps_original_casing():
    assert highlight_match("ALEX", "al") == MARK.format("AL") + "EX"


def test_highlight_uses_custom_class():
    assert highlight_match("Bob", "o", css_class="hit") == 'B<mark class="hit">o</mark>b'


def test_empty_query_leaves_text_untouched():
    assert highlight_match("Alice", "") == "Alice"
    assert match_spans("Alice", "") == []


@pytest.mark.parametrize("query", [".", "a.c", "(", "[x]", "*", "+?", "^$", "\\", "{1}", "|"])
def test_special_characters_match_literally(query):
    candidates = ["abc", "a.c", "x(y", "[x]", "2*3", "+?", "^$", "back\\slash", "n{1}", "a|b"]

    matches = filter_names(candidates, query)

    assert matches
    for match in matches:
        assert query in match.original
        assert MARK.format(query) in match.highlighted


def test_dot_does_not_act_as_wildcard():
    assert [m.original for m in filter_names(["abc", "a.c"], "a.c")] == ["a.c"]
    assert highlight_match("abc", "a.c") == "abc"


def test_spans_cover_original_characters():
    assert match_spans("Anna Banana", " AN ") == [(0, 2), (6, 8), (8, 10)]
    assert match_spans("a+b", "+") == [(1, 2)]
    assert match_spans("aab", "a+b") == []


def test_overlapping_occurrences_are_merged():
    assert match_spans("aaa", "aa") == [(0, 2)]


def test_characters_that_lengthen_when_lowercased_are_highlighted():
    # "İ".lower() is two code points, "i" plus a combining dot
    assert match_spans("İstanbul", "i̇s") == [(0, 2)]
    assert match_spans("xİy", "y") == [(2, 3)]

    matches = filter_names(["İstanbul", "Ankara"], "İs")

    assert [m.original for m in matches] == ["İstanbul"]
    assert matches[0].highlighted == MARK.format("İs") + "tanbul"


def test_every_kept_name_carries_a_highlight():
    candidates = ["İzmir", "Straße", "ǅemal", "ΣΟΦΟΣ", "Alice"]

    for query in ["i̇", "z", "ss", "ß", "ǆ", "σ", "ς", "al"]:
        for match in filter_names(candidates, query):
            assert "<mark" in match.highlighted


def test_filter_is_sound_and_complete():
    candidates = ["Anna", "Hanna", "Ivan", "ANN", "nan", "Bob", "Joanne"]
    query = " AnN "

    matches = filter_names(candidates, query)
    originals = [m.original for m in matches]

    assert all(original in candidates for original in originals)
    assert all("ann" in original.lower() for original in originals)
    assert originals == [c for c in candidates if "ann" in c.lower()]
