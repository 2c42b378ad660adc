from __future__ import annotations

import pytest

from pkgdocs.models import SearchOptions, Section
from pkgdocs.parsing.markdown import extract_code_blocks
from pkgdocs.search import (
    exact_score,
    extract_context_around_match,
    fuzzy_score,
    search,
    search_code_blocks,
    search_function_signatures,
    search_sections,
)


def test_search_exact_counts_occurrences():
    results = search("test", {"a": "a test, a TEST", "b": "no match"})

    assert [(r.source, r.score) for r in results] == [("a", 2.0)]
    assert results[0].content == "a test, a TEST"


def test_search_ranks_by_score():
    contents = {
        "Section 1": "This is a test section",
        "Section 2": "Another test section with test repeated",
        "Section 3": "No matches here",
    }

    results = search("test", contents, SearchOptions(query="test"))

    assert [r.source for r in results] == ["Section 2", "Section 1"]
    assert [r.score for r in results] == [2, 1]


def test_search_empty_inputs():
    assert search("", {"a": "anything"}) == []
    assert search("test", {}) == []
    assert search("", {}, SearchOptions(fuzzy=True)) == []


def test_search_caps_results():
    contents = {f"block {i}": "match" for i in range(20)}

    assert len(search("match", contents)) == 10
    assert len(search("match", contents, SearchOptions(max_results=3))) == 3
    # non-positive caps fall back to the default
    assert len(search("match", contents, SearchOptions(max_results=-1))) == 10


def test_search_ties_keep_input_order():
    contents = {"z": "one hit", "a": "one hit", "m": "hit hit"}

    results = search("hit", contents)

    assert [r.source for r in results] == ["m", "z", "a"]


def test_search_uses_query_argument():
    results = search("alpha", {"a": "alpha"}, SearchOptions(query="beta"))

    assert [r.source for r in results] == ["a"]


def test_search_fuzzy():
    contents = {
        "close": "test",
        "far": "the big sandwich tray",
        "none": "xyz",
    }

    results = search("tst", contents, SearchOptions(fuzzy=True))

    assert [r.source for r in results] == ["close", "far"]
    assert results[0].score > results[1].score
    assert all(0 < r.score <= 1 for r in results)


def test_fuzzy_score():
    assert fuzzy_score("test", "a TEST here") == pytest.approx(1.0)
    assert fuzzy_score("tst", "test") == pytest.approx(6 / 7)
    assert fuzzy_score("abc", "cba") == 0.0
    assert fuzzy_score("", "anything") == 0.0


def test_exact_score():
    assert exact_score("a.b", "aXb a.b") == 1
    assert exact_score("aa", "aaaa") == 2
    assert exact_score("", "anything") == 0


def test_search_sections_matches_titles():
    sections = [
        Section(title="Installation", content="pip install it", level=2),
        Section(title="Usage", content="Call the install helper to install twice: install", level=2),
        Section(title="License", content="MIT", level=2),
    ]

    results = search_sections("install", sections)

    assert [r.source for r in results] == ["Section: Usage", "Section: Installation"]
    assert results[1].content == "Installation\npip install it"
    assert search_sections("Lic", sections)[0].source == "Section: License"


def test_search_sections_duplicate_titles():
    sections = [
        Section(title="Usage", content="first", level=2),
        Section(title="Usage", content="second", level=3),
    ]

    results = search_sections("usage", sections)

    assert len(results) == 2
    assert [r.content for r in results] == ["Usage\nfirst", "Usage\nsecond"]


def test_search_code_blocks():
    code_blocks = ["x = 1", "client.get(url)", "client.get(a)\nclient.get(b)"]

    results = search_code_blocks("client.get", code_blocks)

    assert [r.source for r in results] == ["Code Block 3", "Code Block 2"]
    assert len(search_code_blocks("client", code_blocks, max_results=1)) == 1
    assert search_code_blocks("", code_blocks) == []


def test_search_function_signatures():
    signatures = ["def get(url)", "def post(url, data)"]

    results = search_function_signatures("post", signatures)

    assert [(r.source, r.content) for r in results] == [
        ("Function 2", "def post(url, data)")
    ]
    assert len(search_function_signatures("dgt", signatures, fuzzy=True)) == 1


@pytest.mark.parametrize(
    "content, query, expected",
    [
        (
            "This is a long text with a test match in the middle of the content.",
            "test",
            "...xt with a test match in ...",
        ),
        ("Test is at the beginning of this text.", "Test", "Test is at the..."),
        ("This text has the match at the end: test", "test", "... the end: test"),
        ("This text does not contain the match.", "nonexistent", "This text ..."),
        ("Short text.", "text", "Short text."),
    ],
)
def test_extract_context_around_match(content, query, expected):
    assert extract_context_around_match(content, query, 10) == expected


def test_extract_context_around_match_defaults():
    content = "x" * 150 + "needle" + "y" * 150

    window = extract_context_around_match(content, "NEEDLE", 0)

    assert window == "..." + "x" * 100 + "needle" + "y" * 100 + "..."
    assert extract_context_around_match("", "q", 10) == ""


def test_search_code_blocks_returns_block_verbatim(readme_markdown):
    code_blocks = extract_code_blocks(readme_markdown)

    results = search_code_blocks("fetchPage", code_blocks)

    assert len(results) == 1
    assert results[0].source == "Code Block 3"
    assert results[0].content == code_blocks[2]
