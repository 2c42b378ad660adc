"""
pkgdocs: condensed, searchable package documentation.

Turns README files, HTML-derived Markdown and doc-tool output into sections,
code blocks and function signatures, and searches them with exact or fuzzy
matching.
"""

from __future__ import annotations

__version__ = "0.1.0"
