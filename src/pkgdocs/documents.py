# src/pkgdocs/documents.py
"""
Running the whole pipeline over one document.

Classes
-------
ParsedDocument
    Sections, code blocks, signatures and summary of one Markdown document.

Public Functions
----------------
parse_document(markdown: str, summary_length: int = None) -> ParsedDocument:
    Run every extraction step once.
search_document(document: ParsedDocument, query: str, fuzzy: bool = False, max_results: int = 5) -> List[SearchResult]:
    Rank sections, code blocks and signatures together.
format_search_results(results: List[SearchResult], query: str, package: str, context_size: int = 200) -> str:
    Render results as Markdown.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from pkgdocs.constants import DEFAULTS
from pkgdocs.models import SearchResult, Section
from pkgdocs.parsing import markdown as md_parsing
from pkgdocs.search import (
    extract_context_around_match,
    search_code_blocks,
    search_function_signatures,
    search_sections,
)

logger = logging.getLogger(__name__)


class ParsedDocument(BaseModel):
    """
    Everything the pipeline extracts from one Markdown document.

    Attributes
    ----------
    markdown : str
        The source document
    sections : List[Section]
        All heading-delimited sections
    relevant_sections : List[Section]
        Sections kept by the relevance filter
    code_blocks : List[str]
        Fenced code block contents
    signatures : List[str]
        Declarations found in the code blocks
    summary : str
        Plain-text synopsis
    """

    model_config = ConfigDict(frozen=True)

    markdown: str
    sections: List[Section]
    relevant_sections: List[Section]
    code_blocks: List[str]
    signatures: List[str]
    summary: str

    @property
    def api(self) -> str:
        return md_parsing.extract_api_section(self.relevant_sections)

    @property
    def examples(self) -> str:
        return md_parsing.extract_examples_section(self.relevant_sections)


def parse_document(markdown: str, summary_length: Optional[int] = None) -> ParsedDocument:
    """
    Run every extraction step over a Markdown document.

    Parameters
    ----------
    markdown : str
        Markdown text, already converted from HTML where necessary
    summary_length : int, optional
        Maximum summary length, defaults to 500

    Returns
    -------
    ParsedDocument
        The extracted structure
    """
    sections = md_parsing.extract_sections(markdown)
    code_blocks = md_parsing.extract_code_blocks(markdown)

    document = ParsedDocument(
        markdown=markdown,
        sections=sections,
        relevant_sections=md_parsing.filter_relevant_sections(sections),
        code_blocks=code_blocks,
        signatures=md_parsing.extract_function_signatures(code_blocks),
        summary=md_parsing.summarize_markdown(
            markdown, summary_length or DEFAULTS.SUMMARY_MAX_LENGTH
        ),
    )

    logger.info(
        f"Parsed document: {len(document.sections)} sections "
        f"({len(document.relevant_sections)} relevant), "
        f"{len(document.code_blocks)} code blocks, {len(document.signatures)} signatures"
    )
    return document


def search_document(
    document: ParsedDocument,
    query: str,
    fuzzy: bool = False,
    max_results: int = DEFAULTS.COMBINED_MAX_RESULTS,
) -> List[SearchResult]:
    """
    Rank sections, code blocks and signatures of a document together.

    Parameters
    ----------
    document : ParsedDocument
        Output of ``parse_document``
    query : str
        Text to look for
    fuzzy : bool, optional
        Use approximate matching. Every category is searched in the same mode,
        so the merged scores share one scale.
    max_results : int, optional
        Cap on the merged list; non-positive values mean 5

    Returns
    -------
    List[SearchResult]
        Best first. Equal scores list sections before code blocks before
        signatures.
    """
    if max_results <= 0:
        max_results = DEFAULTS.COMBINED_MAX_RESULTS

    results = (
        search_sections(query, document.sections, fuzzy)
        + search_code_blocks(query, document.code_blocks, fuzzy)
        + search_function_signatures(query, document.signatures, fuzzy)
    )
    results = sorted(results, key=lambda r: r.score, reverse=True)
    return results[:max_results]


def format_search_results(
    results: List[SearchResult],
    query: str,
    package: str,
    context_size: int = DEFAULTS.RESULT_CONTEXT_SIZE,
) -> str:
    """
    Render search results as a Markdown report.

    Each result becomes a ``## Result i: <source>`` heading followed by the
    context window around the match.
    """
    lines = [f"# Search Results for '{query}' in {package}", ""]

    if not results:
        lines.append("No results found.")
        return "\n".join(lines)

    for i, result in enumerate(results, start=1):
        lines.append(f"## Result {i}: {result.source}")
        lines.append("")
        lines.append(extract_context_around_match(result.content, query, context_size))
        lines.append("")

    return "\n".join(lines)
