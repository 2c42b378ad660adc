"""
Loading documents for the command line front-end.

The pipeline itself never fetches anything; this loader only turns a CLI
argument into text.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from pkgdocs.constants import SUPPORTED_URL_SCHEMES

logger = logging.getLogger(__name__)


async def load_document(source: str, timeout: float = 30.0) -> str:
    """
    Load a document from an HTTP(S) URL or a local file.

    Parameters
    ----------
    source : str
        URL or filesystem path
    timeout : float, optional
        Request timeout in seconds for URLs

    Returns
    -------
    str
        The document text

    Raises
    ------
    ValueError
        If ``source`` uses a URL scheme other than http or https
    FileNotFoundError
        If ``source`` is a path that does not exist
    httpx.HTTPStatusError
        If the server responds with an error status
    """
    if source.startswith(SUPPORTED_URL_SCHEMES):
        logger.info(f"Fetching {source}")
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(source)
            response.raise_for_status()
            return response.text

    if "://" in source:
        raise ValueError(f"Only HTTP(S) URLs and local paths are supported: {source}")

    path = Path(source).expanduser()
    logger.info(f"Reading {path}")
    return path.read_text(encoding="utf-8")
