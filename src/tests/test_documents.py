from __future__ import annotations

from pkgdocs.documents import format_search_results, parse_document, search_document
from pkgdocs.models import SearchResult


def test_parse_document(readme_markdown):
    document = parse_document(readme_markdown)

    assert len(document.sections) == 7
    assert [s.title for s in document.relevant_sections] == [
        "mypkg",
        "Installation",
        "Usage",
        "API Reference",
    ]
    assert len(document.code_blocks) == 3
    assert document.signatures == [
        "def get(url: str, timeout: float = 5.0) -> Response",
        "export async function fetchPage(url, options)",
    ]
    assert document.summary == "A tiny HTTP client for Python."


def test_parse_document_api_and_examples(readme_markdown):
    document = parse_document(readme_markdown)

    assert document.api.startswith("## API Reference\n\n```javascript")
    assert document.examples.startswith("## Usage\n\nCall `get`")


def test_parse_document_summary_length(readme_markdown):
    document = parse_document(readme_markdown, summary_length=10)

    assert document.summary == "A tiny ..."


def test_parse_document_empty():
    document = parse_document("")

    assert document.sections == []
    assert document.code_blocks == []
    assert document.signatures == []
    assert document.summary == ""


def test_search_document(readme_markdown):
    document = parse_document(readme_markdown)

    results = search_document(document, "mypkg")

    assert [r.source for r in results] == [
        "Section: mypkg",
        "Section: Installation",
        "Code Block 1",
    ]
    assert all(r.score == 1 for r in results)


def test_search_document_caps_merged_results(readme_markdown):
    document = parse_document(readme_markdown)

    assert len(search_document(document, "e")) == 5
    assert len(search_document(document, "e", max_results=2)) == 2
    assert len(search_document(document, "e", max_results=0)) == 5
    assert search_document(document, "") == []


def test_search_document_signatures(readme_markdown):
    document = parse_document(readme_markdown)

    sources = [r.source for r in search_document(document, "fetchPage", max_results=10)]

    assert sources == ["Section: API Reference", "Code Block 3", "Function 2"]


def test_format_search_results():
    results = [
        SearchResult(content="Use the get helper.", score=1, source="Section: Usage"),
    ]

    report = format_search_results(results, "get", "mypkg", context_size=5)

    assert report == (
        "# Search Results for 'get' in mypkg\n"
        "\n"
        "## Result 1: Section: Usage\n"
        "\n"
        "... the get help...\n"
    )


def test_format_search_results_empty():
    assert format_search_results([], "missing", "mypkg") == (
        "# Search Results for 'missing' in mypkg\n\nNo results found."
    )
