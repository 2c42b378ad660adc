"""
Splitting plain-text output of command line doc tools into labelled blocks.

``go doc`` and ``pydoc`` print documentation as text rather than Markdown, so
heading-based sections do not apply. These splitters produce the label to text
mappings that ``pkgdocs.search.search`` consumes instead.
"""

from __future__ import annotations

import logging
import re
from typing import Dict

from pkgdocs.constants import PYDOC_SECTIONS, SOURCE_LABELS

logger = logging.getLogger(__name__)

# a declaration runs until the next blank line or the end of the text
_GO_FUNC_RE = re.compile(
    r"^func\s+(?:\(\s*(?:\w+\s+)?\*?(\w+)[^)]*\)\s*)?(\w+).*?(?:^$|\Z)", re.MULTILINE | re.DOTALL
)
_GO_TYPE_RE = re.compile(r"^type\s+(\S+).*?(?:^$|\Z)", re.MULTILINE | re.DOTALL)

_PYDOC_SECTION_RES = {
    PYDOC_SECTIONS.DESCRIPTION: re.compile(
        r"DESCRIPTION\s+(.*?)(?:\n\n|\nNAME|\nPACKAGE|\nFUNCTIONS|\nCLASSES|\Z)", re.DOTALL
    ),
    PYDOC_SECTIONS.FUNCTIONS: re.compile(
        r"FUNCTIONS\s+(.*?)(?:\n\n|\nCLASSES|\nDATA|\Z)", re.DOTALL
    ),
    PYDOC_SECTIONS.CLASSES: re.compile(r"CLASSES\s+(.*?)(?:\n\n|\nDATA|\Z)", re.DOTALL),
}


def split_go_doc(text: str) -> Dict[str, str]:
    """
    Split ``go doc -all`` output into function and type declarations.

    Parameters
    ----------
    text : str
        Output of ``go doc``

    Returns
    -------
    Dict[str, str]
        ``"Function: <name>"`` and ``"Type: <name>"`` keys mapped to the
        declaration and its doc comment. Methods are keyed by receiver and
        name. When nothing is found the whole text is returned under
        ``"Package Documentation"``.
    """
    blocks: Dict[str, str] = {}

    for match in _GO_FUNC_RE.finditer(text):
        receiver, name = match.group(1), match.group(2)
        if receiver:
            name = f"{receiver}.{name}"
        blocks[SOURCE_LABELS.GO_FUNCTION.format(name=name)] = match.group(0).rstrip()

    for match in _GO_TYPE_RE.finditer(text):
        blocks[SOURCE_LABELS.GO_TYPE.format(name=match.group(1))] = match.group(0).rstrip()

    logger.debug(f"Split go doc output into {len(blocks)} declarations")
    return _with_fallback(blocks, text)


def split_pydoc(text: str) -> Dict[str, str]:
    """
    Split ``pydoc`` output into its description, functions and classes.

    Only the first paragraph under each upper-case pydoc heading is kept.
    Falls back to the whole text under ``"Package Documentation"``.
    """
    blocks: Dict[str, str] = {}
    for label, pattern in _PYDOC_SECTION_RES.items():
        match = pattern.search(text)
        if match and match.group(1):
            blocks[label] = match.group(1)

    return _with_fallback(blocks, text)


def split_lines(text: str) -> Dict[str, str]:
    """Label every non-blank line as ``"Line N"`` (1-based line numbers)."""
    return {
        SOURCE_LABELS.LINE.format(index=i): line
        for i, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    }


def _with_fallback(blocks: Dict[str, str], text: str) -> Dict[str, str]:
    if not blocks and text.strip():
        return {SOURCE_LABELS.WHOLE_DOCUMENT: text}
    return blocks
