# src/pkgdocs/__main__.py
"""
pkgdocs command line interface.
"""

from __future__ import annotations

import asyncio
import logging

import click
import click_logging
import httpx
from pydantic import ValidationError

import pkgdocs
from pkgdocs import documents
from pkgdocs.config import PipelineSettings, get_settings
from pkgdocs.constants import STDIN_SOURCE
from pkgdocs.io_utils import load_document
from pkgdocs.models import SearchOptions
from pkgdocs.parsing import doctools
from pkgdocs.parsing import html as html_parsing
from pkgdocs.parsing import markdown as md_parsing
from pkgdocs.search import search

logger = logging.getLogger(pkgdocs.__name__)
click_logging.basic_config(logger)

DOC_FORMATS = ["markdown", "go", "pydoc", "lines"]

_SPLITTERS = {
    "go": doctools.split_go_doc,
    "pydoc": doctools.split_pydoc,
    "lines": doctools.split_lines,
}


def _read_source(source: str) -> str:
    if source == STDIN_SOURCE:
        return click.get_text_stream("stdin").read()
    try:
        return asyncio.run(load_document(source))
    except (ValueError, OSError, httpx.HTTPError) as e:
        raise click.ClickException(f"Could not load {source}: {e}")


def _settings(**overrides) -> PipelineSettings:
    try:
        return get_settings(**overrides)
    except ValidationError as e:
        raise click.BadParameter(str(e))


@click.group()
@click.version_option(pkgdocs.__version__)
def cli():
    """Condensed, searchable package documentation"""
    pass


@cli.command()
@click.argument("source")
@click.option("--all", "show_all", is_flag=True, help="Include sections the relevance filter drops")
@click_logging.simple_verbosity_option(logger)
def sections(source, show_all):
    """List the sections of a Markdown document."""
    found = md_parsing.extract_sections(_read_source(source))
    if not show_all:
        found = md_parsing.filter_relevant_sections(found)

    for section in found:
        click.echo(f"{'#' * section.level} {section.title}")


@cli.command()
@click.argument("source")
@click.option("--signatures", is_flag=True, help="Print function signatures instead of code blocks")
@click.option("--html", "is_html", is_flag=True, help="Treat SOURCE as an HTML page")
@click_logging.simple_verbosity_option(logger)
def code(source, signatures, is_html):
    """Print the code blocks (or signatures) of a document."""
    text = _read_source(source)
    if is_html:
        blocks = html_parsing.extract_code_blocks(text)
    else:
        blocks = md_parsing.extract_code_blocks(text)

    if signatures:
        for signature in md_parsing.extract_function_signatures(blocks):
            click.echo(signature)
        return

    for block in blocks:
        click.echo(block.rstrip("\n"))
        click.echo("")


@cli.command()
@click.argument("source")
@click.option("--max-length", type=int, help="Maximum summary length")
@click_logging.simple_verbosity_option(logger)
def summary(source, max_length):
    """Summarize a Markdown document in one paragraph."""
    settings = _settings(summary_max_length=max_length)
    click.echo(
        md_parsing.summarize_markdown(_read_source(source), settings.summary_max_length)
    )


@cli.command(name="search")
@click.argument("source")
@click.argument("query")
@click.option("--fuzzy", is_flag=True, help="Use approximate matching")
@click.option("--max-results", type=int, help="Maximum number of results")
@click.option("--context-size", type=int, help="Characters shown around each match")
@click.option("--package", type=str, help="Package name used in the report heading")
@click.option(
    "--doc-format",
    type=click.Choice(DOC_FORMATS),
    default="markdown",
    help="How SOURCE is split into searchable blocks",
)
@click_logging.simple_verbosity_option(logger)
def search_command(source, query, fuzzy, max_results, context_size, package, doc_format):
    """Search a document and print the ranked matches."""
    settings = _settings(
        fuzzy=fuzzy,
        max_results=max_results,
        combined_max_results=max_results,
        result_context_size=context_size,
    )
    text = _read_source(source)

    if doc_format == "markdown":
        results = documents.search_document(
            documents.parse_document(text),
            query,
            fuzzy=settings.fuzzy,
            max_results=settings.combined_max_results,
        )
    else:
        results = search(
            query,
            _SPLITTERS[doc_format](text),
            SearchOptions(
                query=query,
                fuzzy=settings.fuzzy,
                max_results=settings.max_results,
            ),
        )

    click.echo(
        documents.format_search_results(
            results, query, package or source, settings.result_context_size
        )
    )


if __name__ == "__main__":
    cli()
