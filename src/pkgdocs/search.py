# src/pkgdocs/search.py
"""
Scored search over labelled text blocks.

Public Functions
----------------
search(query: str, contents: Mapping[str, str], options: SearchOptions = None) -> List[SearchResult]:
    Score, rank and cap matches of a query across labelled blocks.
search_sections(query: str, sections: List[Section], fuzzy: bool = False, max_results: int = None) -> List[SearchResult]:
    Search section titles and content together.
search_code_blocks(query: str, code_blocks: List[str], fuzzy: bool = False, max_results: int = None) -> List[SearchResult]:
    Search code blocks, labelled "Code Block N".
search_function_signatures(query: str, signatures: List[str], fuzzy: bool = False, max_results: int = None) -> List[SearchResult]:
    Search function signatures, labelled "Function N".
extract_context_around_match(content: str, query: str, context_size: int = 100) -> str:
    Cut a window of text around the first match of a query.
exact_score(query: str, content: str) -> int:
    Count case-insensitive, non-overlapping occurrences.
fuzzy_score(query: str, content: str) -> float:
    Similarity of the query to its tightest in-order match.
"""

from __future__ import annotations

import difflib
import logging
import re
from typing import Dict, List, Mapping, Optional

from pkgdocs.constants import DEFAULTS, ELLIPSIS, SOURCE_LABELS
from pkgdocs.models import SearchOptions, SearchResult, Section

logger = logging.getLogger(__name__)


def search(
    query: str, contents: Mapping[str, str], options: Optional[SearchOptions] = None
) -> List[SearchResult]:
    """
    Score, rank and cap matches of a query across labelled blocks.

    Parameters
    ----------
    query : str
        Text to look for. An empty query returns no results.
    contents : Mapping[str, str]
        Block label to block text. The label becomes ``SearchResult.source``.
    options : SearchOptions, optional
        Scoring mode and result cap. ``options.query`` is not consulted; the
        ``query`` argument is always used.

    Returns
    -------
    List[SearchResult]
        Matching blocks, best first. Equal scores keep the iteration order of
        ``contents``.

    Notes
    -----
    In exact mode a block's score is the number of case-insensitive,
    non-overlapping occurrences of the query and blocks without an occurrence
    are left out. In fuzzy mode only blocks containing every query character in
    order are kept, scored by ``fuzzy_score``. The two scales are unrelated,
    so results of different modes must not be ranked together.

    Examples
    --------
    >>> results = search("test", {"a": "a test, a TEST", "b": "no match"})
    >>> [(r.source, r.score) for r in results]
    [('a', 2.0)]
    """
    if options is None:
        options = SearchOptions(query=query)

    if query == "":
        return []

    results = _score_blocks(query, contents, options.fuzzy)
    return results[: options.max_results]


def search_sections(
    query: str,
    sections: List[Section],
    fuzzy: bool = False,
    max_results: Optional[int] = None,
) -> List[SearchResult]:
    """
    Search sections, scoring each on ``title + "\\n" + content``.

    A query that only matches a title still surfaces the section. Results are
    labelled ``"Section: <title>"`` and only capped when ``max_results`` is
    given.
    """
    contents: Dict[str, str] = {}
    labels = []
    for section in sections:
        labels.append(SOURCE_LABELS.SECTION.format(title=section.title))
        contents[str(len(labels) - 1)] = f"{section.title}\n{section.content}"

    return _search_labelled(query, contents, labels, fuzzy, max_results)


def search_code_blocks(
    query: str,
    code_blocks: List[str],
    fuzzy: bool = False,
    max_results: Optional[int] = None,
) -> List[SearchResult]:
    """Search code blocks, labelled ``"Code Block N"`` (1-based)."""
    labels = [
        SOURCE_LABELS.CODE_BLOCK.format(index=i)
        for i in range(1, len(code_blocks) + 1)
    ]
    contents = {str(i): block for i, block in enumerate(code_blocks)}
    return _search_labelled(query, contents, labels, fuzzy, max_results)


def search_function_signatures(
    query: str,
    signatures: List[str],
    fuzzy: bool = False,
    max_results: Optional[int] = None,
) -> List[SearchResult]:
    """Search function signatures, labelled ``"Function N"`` (1-based)."""
    labels = [
        SOURCE_LABELS.FUNCTION.format(index=i)
        for i in range(1, len(signatures) + 1)
    ]
    contents = {str(i): signature for i, signature in enumerate(signatures)}
    return _search_labelled(query, contents, labels, fuzzy, max_results)


def extract_context_around_match(
    content: str, query: str, context_size: int = DEFAULTS.CONTEXT_SIZE
) -> str:
    """
    Cut a window of text around the first match of a query.

    Parameters
    ----------
    content : str
        Text to cut from
    query : str
        Text to look for, case-insensitively
    context_size : int, optional
        Characters to keep on each side of the match; non-positive values mean
        100

    Returns
    -------
    str
        ``content[start:end]`` where the window spans ``context_size``
        characters either side of the match, with "..." prepended when the
        window does not start at the beginning and appended when it does not
        reach the end. Without a match the content is returned unchanged if it
        is at most ``2 * context_size`` long, otherwise its first
        ``context_size`` characters followed by "...".

    Examples
    --------
    >>> extract_context_around_match("Test is at the beginning of this text.", "Test", 10)
    'Test is at the...'
    """
    if context_size <= 0:
        context_size = DEFAULTS.CONTEXT_SIZE

    match = _find(query, content)
    if match is None:
        if len(content) <= context_size * 2:
            return content
        return content[:context_size] + ELLIPSIS

    start = max(0, match.start() - context_size)
    end = min(len(content), match.start() + len(query) + context_size)

    prefix = ELLIPSIS if start > 0 else ""
    suffix = ELLIPSIS if end < len(content) else ""
    return prefix + content[start:end] + suffix


def exact_score(query: str, content: str) -> int:
    """Count case-insensitive, non-overlapping occurrences of ``query``."""
    if not query:
        return 0
    return len(re.findall(re.escape(query), content, re.IGNORECASE))


def fuzzy_score(query: str, content: str) -> float:
    """
    Similarity of a query to its tightest in-order match in ``content``.

    Parameters
    ----------
    query : str
        Text to look for
    content : str
        Text to look in

    Returns
    -------
    float
        0.0 when the query's characters do not all appear in ``content`` in
        order (case-insensitive). Otherwise the ``difflib.SequenceMatcher``
        ratio between the query and the shortest window of ``content`` holding
        those characters in order, in (0, 1]; a contiguous match scores 1.0.
    """
    needle = query.lower()
    window = _tightest_window(needle, content.lower())
    if window is None:
        return 0.0
    return difflib.SequenceMatcher(None, needle, window, autojunk=False).ratio()


def _search_labelled(
    query: str,
    contents: Mapping[str, str],
    labels: List[str],
    fuzzy: bool,
    max_results: Optional[int],
) -> List[SearchResult]:
    # keys are positional so blocks with identical labels stay distinct
    if query == "":
        return []

    results = [
        SearchResult(content=r.content, score=r.score, source=labels[int(r.source)])
        for r in _score_blocks(query, contents, fuzzy)
    ]
    if max_results is not None and max_results > 0:
        results = results[:max_results]
    return results


def _score_blocks(query: str, contents: Mapping[str, str], fuzzy: bool) -> List[SearchResult]:
    score = fuzzy_score if fuzzy else exact_score

    results = []
    for source, content in contents.items():
        block_score = score(query, content)
        if block_score > 0:
            results.append(SearchResult(content=content, score=block_score, source=source))

    # sorted() is stable, so ties keep the input order
    results = sorted(results, key=lambda r: r.score, reverse=True)

    logger.debug(
        f"{'Fuzzy' if fuzzy else 'Exact'} search for {query!r} matched "
        f"{len(results)} of {len(contents)} blocks"
    )
    return results


def _find(query: str, content: str) -> Optional[re.Match]:
    if not query:
        return None
    return re.search(re.escape(query), content, re.IGNORECASE)


def _tightest_window(needle: str, haystack: str) -> Optional[str]:
    """Shortest substring of ``haystack`` containing ``needle`` as a subsequence."""
    if not needle:
        return None

    best = None
    start = haystack.find(needle[0])
    while start != -1:
        # forward: earliest end of an in-order match beginning at start
        end = start
        for char in needle[1:]:
            end = haystack.find(char, end + 1)
            if end == -1:
                return best
        # backward: latest start that still reaches end
        begin = end
        for char in reversed(needle[:-1]):
            begin = haystack.rfind(char, 0, begin)
        window = haystack[begin : end + 1]
        if best is None or len(window) < len(best):
            best = window
        start = haystack.find(needle[0], begin + 1)
    return best
