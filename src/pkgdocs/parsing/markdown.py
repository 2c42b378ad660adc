# src/pkgdocs/parsing/markdown.py
"""
Parsing Markdown documentation into sections, code blocks and signatures.

Public Functions
----------------
extract_sections(markdown: str) -> List[Section]:
    Split a Markdown document into heading-delimited sections.
filter_relevant_sections(sections: List[Section]) -> List[Section]:
    Keep the sections that are likely useful to someone writing code.
extract_code_blocks(markdown: str) -> List[str]:
    Pull the contents of fenced code blocks out of a Markdown document.
extract_function_signatures(code_blocks: List[str]) -> List[str]:
    Find function, method and type declarations in code blocks.
extract_api_section(sections: List[Section]) -> str:
    Concatenate the API reference sections.
extract_examples_section(sections: List[Section]) -> str:
    Concatenate the usage and example sections.
find_section(sections: List[Section], name: str) -> Optional[Section]:
    Find the first section whose title contains a name.
sections_to_blocks(sections: List[Section], fallback: str = "") -> Dict[str, str]:
    Label sections for searching.
summarize_markdown(markdown: str, max_length: int = 500) -> str:
    Derive a short plain-text summary from the first paragraph.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from pkgdocs.constants import (
    API_HEADING_PATTERNS,
    DEFAULTS,
    ELLIPSIS,
    EXAMPLE_HEADING_PATTERNS,
    IRRELEVANT_HEADING_PATTERNS,
    RELEVANT_HEADING_PATTERNS,
    SIGNATURE_PATTERNS,
    SOURCE_LABELS,
    TOP_LEVEL_HEADING_MAX,
)
from pkgdocs.models import Section

logger = logging.getLogger(__name__)

_IRRELEVANT_HEADINGS = [re.compile(p, re.IGNORECASE) for p in IRRELEVANT_HEADING_PATTERNS]
_RELEVANT_HEADINGS = [re.compile(p, re.IGNORECASE) for p in RELEVANT_HEADING_PATTERNS]
_API_HEADINGS = [re.compile(p, re.IGNORECASE) for p in API_HEADING_PATTERNS]
_EXAMPLE_HEADINGS = [re.compile(p, re.IGNORECASE) for p in EXAMPLE_HEADING_PATTERNS]

_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_EMPHASIS_RE = re.compile(r"[*_]{1,2}([^*_]+)[*_]{1,2}")
_INLINE_CODE_RE = re.compile(r"`([^`]+)`")

_INLINE_TEXT_TYPES = {"text", "code_inline"}
_INLINE_BREAK_TYPES = {"softbreak", "hardbreak"}


def _create_parser() -> MarkdownIt:
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


def _normalize_newlines(markdown: str) -> str:
    return markdown.replace("\r\n", "\n").replace("\r", "\n")


def parse_markdown(markdown: str) -> SyntaxTreeNode:
    """
    Parse Markdown into a block syntax tree.

    Parameters
    ----------
    markdown : str
        Markdown text

    Returns
    -------
    SyntaxTreeNode
        Root of the syntax tree; its children are the top-level blocks
    """
    tokens = _create_parser().parse(_normalize_newlines(markdown))
    return SyntaxTreeNode(tokens)


def extract_sections(markdown: str) -> List[Section]:
    """
    Split a Markdown document into heading-delimited sections.

    Every heading opens a new section which collects the source text of all
    following blocks until the next heading of any level. Text that comes
    before the first heading does not belong to any section and is dropped.

    Parameters
    ----------
    markdown : str
        Markdown text

    Returns
    -------
    List[Section]
        Sections in document order. Empty if the document has no headings.

    Examples
    --------
    >>> sections = extract_sections("# Title\\n\\nIntro.\\n\\n## Usage\\n\\nCall it.")
    >>> [(s.title, s.level) for s in sections]
    [('Title', 1), ('Usage', 2)]
    """
    if not markdown.strip():
        return []

    source_lines = _normalize_newlines(markdown).split("\n")
    root = parse_markdown(markdown)

    sections: List[Section] = []
    current: Optional[dict] = None

    def visit(node: SyntaxTreeNode) -> None:
        nonlocal current

        if node.type == "heading":
            if current is not None:
                sections.append(Section(**current))
            current = {
                "title": _heading_text(node),
                "content": "",
                "level": int(node.tag[1:]),
            }
            return

        if _contains_heading(node):
            for child in node.children:
                visit(child)
            return

        if current is None:
            return

        text = _render_source(node, source_lines)
        if text:
            if current["content"]:
                current["content"] += "\n"
            current["content"] += text

    for child in root.children:
        visit(child)

    if current is not None:
        sections.append(Section(**current))

    logger.debug(f"Extracted {len(sections)} sections")
    return sections


def filter_relevant_sections(sections: List[Section]) -> List[Section]:
    """
    Keep the sections that are likely useful to someone writing code.

    A section is dropped when its content is blank or its title looks like
    project housekeeping (license, contributors, changelog, ...). Otherwise it
    is kept when it is a level 1 or 2 section or its title looks like usage or
    reference material. Housekeeping titles are dropped even when they also
    look relevant.

    Parameters
    ----------
    sections : List[Section]
        Sections to filter

    Returns
    -------
    List[Section]
        The kept sections in their original order
    """
    relevant = []
    for section in sections:
        if not section.content.strip():
            continue
        if _title_matches(section.title, _IRRELEVANT_HEADINGS):
            continue
        if section.level <= TOP_LEVEL_HEADING_MAX or _title_matches(
            section.title, _RELEVANT_HEADINGS
        ):
            relevant.append(section)

    logger.debug(f"Kept {len(relevant)} of {len(sections)} sections")
    return relevant


def extract_code_blocks(markdown: str) -> List[str]:
    """
    Pull the contents of fenced code blocks out of a Markdown document.

    The fence's language tag is discarded. Fences nested in lists or block
    quotes are included; blank blocks are not.

    Parameters
    ----------
    markdown : str
        Markdown text

    Returns
    -------
    List[str]
        Verbatim code block contents in document order
    """
    if not markdown.strip():
        return []

    code_blocks = [
        token.content
        for token in _create_parser().parse(_normalize_newlines(markdown))
        if token.type == "fence" and token.content.strip()
    ]

    logger.debug(f"Extracted {len(code_blocks)} code blocks")
    return code_blocks


def extract_function_signatures(code_blocks: List[str]) -> List[str]:
    """
    Find function, method and type declarations in code blocks.

    Every ecosystem pattern in ``SIGNATURE_PATTERNS`` is tried against every
    block because fence languages are often missing or wrong. A declaration
    that more than one pattern recognizes is reported once per pattern.

    Parameters
    ----------
    code_blocks : List[str]
        Code block contents, e.g. from ``extract_code_blocks``

    Returns
    -------
    List[str]
        Matched declarations ordered by block, then pattern, then position
    """
    signatures = []
    for code_block in code_blocks:
        for _, pattern in SIGNATURE_PATTERNS:
            for match in pattern.finditer(code_block):
                signature = match.group(0).strip()
                if signature:
                    signatures.append(signature)

    logger.debug(
        f"Extracted {len(signatures)} signatures from {len(code_blocks)} code blocks"
    )
    return signatures


def extract_api_section(sections: List[Section]) -> str:
    """Concatenate the sections whose titles look like API reference material."""
    return _join_sections(
        [s for s in sections if _title_matches(s.title, _API_HEADINGS)]
    )


def extract_examples_section(sections: List[Section]) -> str:
    """Concatenate the sections whose titles look like usage or examples."""
    return _join_sections(
        [s for s in sections if _title_matches(s.title, _EXAMPLE_HEADINGS)]
    )


def find_section(sections: List[Section], name: str) -> Optional[Section]:
    """
    Find the first section whose title contains ``name`` (case-insensitive).

    Returns None when nothing matches or ``name`` is empty.
    """
    if not name:
        return None
    name = name.lower()
    for section in sections:
        if name in section.title.lower():
            return section
    return None


def sections_to_blocks(sections: List[Section], fallback: str = "") -> Dict[str, str]:
    """
    Label sections for searching.

    Parameters
    ----------
    sections : List[Section]
        Sections to label
    fallback : str, optional
        Whole-document text used when there are no sections

    Returns
    -------
    Dict[str, str]
        Mapping of ``"Section i: <title>"`` to section content in section
        order, or ``{"Package Documentation": fallback}`` when ``sections`` is
        empty and a fallback is given.
    """
    blocks = {
        SOURCE_LABELS.INDEXED_SECTION.format(index=i, title=s.title): s.content
        for i, s in enumerate(sections)
    }
    if not blocks and fallback:
        blocks[SOURCE_LABELS.WHOLE_DOCUMENT] = fallback
    return blocks


def summarize_markdown(markdown: str, max_length: int = DEFAULTS.SUMMARY_MAX_LENGTH) -> str:
    """
    Derive a short plain-text summary from the first paragraph.

    The first blank-line-separated paragraph that is not a heading is used,
    falling back to the first non-empty paragraph. Links, emphasis and inline
    code are reduced to their text.

    Parameters
    ----------
    markdown : str
        Markdown text
    max_length : int, optional
        Maximum summary length; non-positive values mean 500. Longer summaries
        are cut to ``max_length - 3`` characters and end with "...";
        below 3 the text is simply cut to ``max_length``.

    Returns
    -------
    str
        The summary, or an empty string for empty input
    """
    if max_length <= 0:
        max_length = DEFAULTS.SUMMARY_MAX_LENGTH

    paragraphs = [p.strip() for p in _normalize_newlines(markdown).split("\n\n")]

    summary = next((p for p in paragraphs if p and not p.startswith("#")), "")
    if not summary:
        summary = next((p for p in paragraphs if p), "")

    summary = _LINK_RE.sub(r"\1", summary)
    summary = _EMPHASIS_RE.sub(r"\1", summary)
    summary = _INLINE_CODE_RE.sub(r"\1", summary)

    if len(summary) > max_length:
        # no room for any text before the marker
        if max_length < len(ELLIPSIS):
            return summary[:max_length]
        summary = summary[: max_length - len(ELLIPSIS)] + ELLIPSIS

    return summary


def _heading_text(node: SyntaxTreeNode) -> str:
    parts = []
    for descendant in node.walk(include_self=False):
        if descendant.type in _INLINE_TEXT_TYPES:
            parts.append(descendant.content)
        elif descendant.type in _INLINE_BREAK_TYPES:
            parts.append(" ")
    return "".join(parts).strip()


def _contains_heading(node: SyntaxTreeNode) -> bool:
    return any(
        d.type == "heading" for d in node.walk(include_self=False)
    )


def _render_source(node: SyntaxTreeNode, source_lines: List[str]) -> str:
    if node.map is None:
        return ""
    start, end = node.map
    return "\n".join(source_lines[start:end]).rstrip()


def _title_matches(title: str, patterns: List[re.Pattern]) -> bool:
    return any(p.search(title) for p in patterns)


def _join_sections(sections: List[Section]) -> str:
    return "\n\n".join(f"## {s.title}\n\n{s.content}" for s in sections)
