"""
Value models shared by the parsing and search modules.

Classes
-------
Section
    A heading plus the body content up to the next heading.
SearchOptions
    Query, scoring mode and result cap for one search call.
SearchResult
    One scored match and the label of the block that produced it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pkgdocs.constants import DEFAULTS


class Section(BaseModel):
    """A heading-delimited section of a Markdown document.

    Attributes
    ----------
    title : str
        Plain text of the heading
    content : str
        Markdown source of every block between this heading and the next one,
        joined by newlines. Empty when a heading is directly followed by another.
    level : int
        Heading depth, 1 to 6
    """

    model_config = ConfigDict(frozen=True)

    title: str
    content: str = ""
    level: int = Field(ge=1, le=6)


class SearchOptions(BaseModel):
    """Options for a single search call.

    Attributes
    ----------
    query : str
        Free-text query. An empty query never matches anything.
    fuzzy : bool
        Use approximate matching instead of case-insensitive substring counts
    max_results : int
        Cap on the number of returned results. Non-positive values fall back
        to the default of 10.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    fuzzy: bool = False
    max_results: int = DEFAULTS.MAX_RESULTS

    @field_validator("max_results")
    @classmethod
    def default_non_positive_max_results(cls, v: int) -> int:
        if v <= 0:
            return DEFAULTS.MAX_RESULTS
        return v


class SearchResult(BaseModel):
    """A scored search hit.

    Scores are only comparable within one search call; exact scores are
    occurrence counts and fuzzy scores are similarity ratios in (0, 1].
    """

    model_config = ConfigDict(frozen=True)

    content: str
    score: float
    source: str
