"""
Pipeline settings.

Settings are plain pydantic models so callers (the CLI, or any service wrapping
the pipeline) can override individual values while keeping validated defaults.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, PositiveInt

from pkgdocs.constants import DEFAULTS

logger = logging.getLogger(__name__)


class PipelineSettings(BaseModel):
    """
    Tunable values for the extraction and search pipeline.

    Attributes
    ----------
    max_results : int
        Result cap for a search over doc-tool blocks (go doc, pydoc, lines)
    combined_max_results : int
        Result cap when sections, code blocks and signatures are ranked together
    result_context_size : int
        Characters kept on each side of a match when rendering results
    summary_max_length : int
        Maximum length of a generated summary
    fuzzy : bool
        Whether searches default to approximate matching
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_results: PositiveInt = DEFAULTS.MAX_RESULTS
    combined_max_results: PositiveInt = DEFAULTS.COMBINED_MAX_RESULTS
    result_context_size: PositiveInt = DEFAULTS.RESULT_CONTEXT_SIZE
    summary_max_length: PositiveInt = DEFAULTS.SUMMARY_MAX_LENGTH
    fuzzy: bool = False


def get_settings(**overrides: Any) -> PipelineSettings:
    """
    Build pipeline settings from the defaults plus keyword overrides.

    Parameters
    ----------
    **overrides
        Values to replace. Overrides set to None are ignored so unset command
        line options keep their defaults.

    Returns
    -------
    PipelineSettings
        Validated settings

    Raises
    ------
    pydantic.ValidationError
        If an override is unknown or not a positive integer where one is required
    """
    provided = {k: v for k, v in overrides.items() if v is not None}
    if provided:
        logger.debug(f"Overriding pipeline settings: {provided}")
    return PipelineSettings(**provided)
