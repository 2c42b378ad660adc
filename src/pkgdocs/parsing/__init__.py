"""
Extraction of structure from documentation text.

Re-exports the Markdown pipeline functions; HTML and doc-tool helpers live in
``pkgdocs.parsing.html`` and ``pkgdocs.parsing.doctools``.
"""

from pkgdocs.parsing.markdown import (
    extract_api_section,
    extract_code_blocks,
    extract_examples_section,
    extract_function_signatures,
    extract_sections,
    filter_relevant_sections,
    find_section,
    parse_markdown,
    sections_to_blocks,
    summarize_markdown,
)

__all__ = [
    "extract_api_section",
    "extract_code_blocks",
    "extract_examples_section",
    "extract_function_signatures",
    "extract_sections",
    "filter_relevant_sections",
    "find_section",
    "parse_markdown",
    "sections_to_blocks",
    "summarize_markdown",
]
