# src/pkgdocs/parsing/html.py
"""
Helpers for documentation pages that arrive as HTML.

Converting HTML to Markdown happens before the pipeline; these helpers only
locate the parts of a page the pipeline cares about.

Public Functions
----------------
parse_html(html: str) -> BeautifulSoup:
    Parse an HTML document.
extract_code_blocks(html: str) -> List[str]:
    Text of ``pre`` and ``code`` elements, counting ``pre > code`` once.
extract_title(html: str) -> str:
    Text of the ``title`` element.
extract_meta_description(html: str) -> str:
    Content of the description ``meta`` tag.
extract_links(html: str) -> Dict[str, str]:
    Link text to href for every non-anchor link.
extract_headings(html: str) -> Dict[str, str]:
    Heading text to the plain text that follows it.
extract_main_content(html: str) -> str:
    HTML of the main content container without navigation chrome.
"""

from __future__ import annotations

import copy
import logging
from typing import Dict, List, Union

from bs4 import BeautifulSoup, Tag

from pkgdocs.constants import (
    HTML_CHROME_SELECTORS,
    HTML_HEADING_TAGS,
    HTML_MAIN_CONTENT_SELECTORS,
)

logger = logging.getLogger(__name__)

HtmlInput = Union[str, BeautifulSoup]


def parse_html(html: HtmlInput) -> BeautifulSoup:
    """Parse an HTML document with the standard library parser backend."""
    if isinstance(html, BeautifulSoup):
        return html
    return BeautifulSoup(html, "html.parser")


def extract_code_blocks(html: HtmlInput) -> List[str]:
    """
    Extract code from ``pre`` and ``code`` elements.

    A ``code`` element inside a ``pre`` is part of that block and is not
    reported again. Elements without text are skipped.

    Parameters
    ----------
    html : str or BeautifulSoup
        HTML document

    Returns
    -------
    List[str]
        Stripped code text in document order
    """
    soup = parse_html(html)

    code_blocks = []
    for element in soup.find_all(["pre", "code"]):
        if element.name == "code" and element.find_parent("pre") is not None:
            continue
        code = element.get_text().strip()
        if code:
            code_blocks.append(code)

    logger.debug(f"Extracted {len(code_blocks)} HTML code blocks")
    return code_blocks


def extract_title(html: HtmlInput) -> str:
    title = parse_html(html).find("title")
    if title is None:
        return ""
    return title.get_text().strip()


def extract_meta_description(html: HtmlInput) -> str:
    meta = parse_html(html).find("meta", attrs={"name": "description"})
    if meta is None:
        return ""
    return (meta.get("content") or "").strip()


def extract_links(html: HtmlInput) -> Dict[str, str]:
    """
    Map link text to href for every link that leaves the page.

    In-page anchors (``#...``) and empty hrefs are skipped. Links without text
    are keyed by their href. A later link with the same text replaces an
    earlier one.
    """
    links = {}
    for anchor in parse_html(html).find_all("a", href=True):
        href = anchor["href"]
        if not href or href.startswith("#"):
            continue
        text = anchor.get_text().strip() or href
        links[text] = href
    return links


def extract_headings(html: HtmlInput) -> Dict[str, str]:
    """
    Map each heading's text to the plain text of the siblings that follow it.

    Collection stops at the next heading of any level. Headings without text
    are skipped.

    Parameters
    ----------
    html : str or BeautifulSoup
        HTML document

    Returns
    -------
    Dict[str, str]
        Heading text to whitespace-normalized body text, in document order
    """
    headings = {}
    for heading in parse_html(html).find_all(HTML_HEADING_TAGS):
        title = heading.get_text().strip()
        if not title:
            continue

        parts = []
        for sibling in heading.next_siblings:
            if isinstance(sibling, Tag):
                if sibling.name in HTML_HEADING_TAGS:
                    break
                parts.append(sibling.get_text(" "))
            else:
                parts.append(str(sibling))

        headings[title] = " ".join(" ".join(parts).split())
    return headings


def extract_main_content(html: HtmlInput) -> str:
    """
    Isolate the main content of a documentation page.

    The first match among common content containers (``main``, ``article``,
    ``#content``, ...) is used, falling back to ``body``. Navigation, headers,
    footers, sidebars and similar chrome are removed from a copy, leaving the
    parsed document untouched.

    Parameters
    ----------
    html : str or BeautifulSoup
        HTML document

    Returns
    -------
    str
        Inner HTML of the content container, or an empty string if the page has
        neither a content container nor a body
    """
    soup = parse_html(html)

    container = None
    for selector in HTML_MAIN_CONTENT_SELECTORS:
        container = soup.select_one(selector)
        if container is not None:
            logger.debug(f"Main content found with selector {selector!r}")
            break
    if container is None:
        container = soup.body
    if container is None:
        return ""

    container = copy.copy(container)
    for chrome in container.select(HTML_CHROME_SELECTORS):
        chrome.decompose()

    return container.decode_contents().strip()
