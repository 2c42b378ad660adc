from __future__ import annotations

from pkgdocs.parsing import html as html_parsing


def test_extract_code_blocks(html_page):
    assert html_parsing.extract_code_blocks(html_page) == ["x = 1", "foo()"]


def test_extract_code_blocks_empty():
    assert html_parsing.extract_code_blocks("") == []
    assert html_parsing.extract_code_blocks("<p>No code</p>") == []


def test_extract_title_and_description(html_page):
    assert html_parsing.extract_title(html_page) == "Docs"
    assert html_parsing.extract_meta_description(html_page) == "A library."

    assert html_parsing.extract_title("<p>untitled</p>") == ""
    assert html_parsing.extract_meta_description("<p>undescribed</p>") == ""


def test_extract_links(html_page):
    assert html_parsing.extract_links(html_page) == {
        "Example": "https://example.com",
        "/docs": "/docs",
    }


def test_extract_headings(html_page):
    headings = html_parsing.extract_headings(html_page)

    assert list(headings) == ["Intro", "API"]
    assert "Hello" in headings["Intro"]
    assert "x = 1" in headings["Intro"]
    assert "Calls." not in headings["Intro"]
    assert headings["API"].startswith("Calls.")


def test_extract_main_content(html_page):
    content = html_parsing.extract_main_content(html_page)

    assert content.startswith("<h1>Intro</h1>")
    assert "Menu" not in content
    assert "Footer" not in content


def test_extract_main_content_falls_back_to_body():
    soup = html_parsing.parse_html("<body><nav>Menu</nav><p>Text</p></body>")

    assert html_parsing.extract_main_content(soup) == "<p>Text</p>"
    # the chrome is removed from a copy only
    assert soup.find("nav") is not None


def test_extract_main_content_without_body():
    assert html_parsing.extract_main_content("") == ""
