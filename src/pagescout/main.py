# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides the potd, wiki-links and logging-status commands

import json as jsonlib

import asyncclick as click
from rich.console import Console

from pagescout.config import get_config
from pagescout.core.service import ProblemOfDayService, WikiLinksService
from pagescout.extraction.base import ScrapeError
from pagescout.extraction.wiki import format_links
from pagescout.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_scrape_context,
)
from pagescout.utils.rich_tables import create_logging_status_table, create_potd_table, print_rich_table

console = Console()


@click.command()
@click.argument("output_path", type=click.Path())
@click.pass_context
async def potd(ctx, output_path: str):
    """
    📅 Scrape the LeetCode problem of the day into a TOML file.

    OUTPUT_PATH must already exist; it is overwritten.
    """
    json_output = ctx.obj["json_output"]
    with with_scrape_context("potd", output_path=output_path) as logger:
        logger.info("Starting problem of the day scrape")
        service = ProblemOfDayService()
        try:
            record = await service.run(output_path)
        except ScrapeError as e:
            logger.error("Problem of the day scrape failed", error=str(e), error_type=type(e).__name__)
            raise click.ClickException(str(e)) from e

        logger.info("Problem of the day scrape complete", number=record.number)

    if not json_output:
        print_rich_table(console, create_potd_table(record, output_path))


@click.command(name="wiki-links")
@click.argument("reference")
@click.pass_context
async def wiki_links(ctx, reference: str):
    """
    🔗 List the wiki article links used in a Wikipedia article's paragraphs.

    REFERENCE is a relative path such as /wiki/Rust_(programming_language).
    """
    json_output = ctx.obj["json_output"]
    with with_scrape_context("wiki-links", reference=reference) as logger:
        try:
            links = WikiLinksService().links(reference)
        except ScrapeError as e:
            logger.error("Wiki link extraction failed", error=str(e), error_type=type(e).__name__)
            raise click.ClickException(str(e)) from e

    click.echo(jsonlib.dumps(links) if json_output else format_links(links))


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else config.log_mode

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Structured JSON logs and machine-readable output")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🧭 pagescout - small page scrapers

    Scrape the LeetCode problem of the day or list the article links of a
    Wikipedia page.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Add commands to the main group
app.add_command(potd)
app.add_command(wiki_links)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
