#!/usr/bin/env python3
"""
Recreation.gov Campground Availability Viewer - Main Entry Point

Usage:
    python main.py check --campground 232487 --year 2020 -m 7 -m 8 -m 9
    python main.py campground 232487
    python main.py campsite 4522
    python main.py campsites -g 232487 -y 2020 -m 7
"""
import asyncio
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from recgov_availability.common.config import load_config
from recgov_availability.common.aggregation import derive_available_dates_by_site
from recgov_availability.api import RecGovAvailabilityClient, APIError, NotFoundError
from recgov_availability import display

console = Console()
logger = logging.getLogger("recgov_availability")


def setup_logging(level: str = "INFO", log_file: str = None):
    """Configure logging"""
    handlers = [RichHandler(console=console, rich_tracebacks=True)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=handlers
    )


def query_options(func):
    """Shared campground/year/month options"""
    func = click.option("--month", "-m", "months", multiple=True, type=click.IntRange(1, 12),
                        help="Month to check (repeatable)")(func)
    func = click.option("--year", "-y", type=int, help="Calendar year")(func)
    func = click.option("--campground", "-g", help="Campground ID")(func)
    return func


def build_query(cfg, campground, year, months):
    try:
        return cfg.query.to_query(campground, year, list(months))
    except ValueError as e:
        raise click.UsageError(
            f"A campground ID, a four-digit year and at least one month are required.\n{e}"
        )


@click.group()
@click.option("--config", "-c", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx, config, verbose):
    """
    Recreation.gov Campground Availability Viewer

    List every available date per campsite for the chosen months.
    """
    ctx.ensure_object(dict)

    try:
        cfg = load_config(config)
        ctx.obj["config"] = cfg
        setup_logging(
            level="DEBUG" if verbose else cfg.logging.level,
            log_file=cfg.logging.file
        )
    except FileNotFoundError:
        console.print(f"[red]Config file not found: {config}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        sys.exit(1)


@cli.command()
@query_options
@click.option("--json", "as_json", is_flag=True, help="Print available dates as JSON")
@click.pass_context
def check(ctx, campground, year, months, as_json):
    """Show available dates per site"""
    cfg = ctx.obj["config"]
    query = build_query(cfg, campground, year, months)

    async def run():
        async with RecGovAvailabilityClient(cfg) as client:
            return await client.check_availability(query)

    try:
        report = asyncio.run(run())
    except NotFoundError:
        logger.warning(f"Campground {query.campground_id} not found")
        display.render_not_found(console, query.campground_id)
        sys.exit(1)
    except APIError as e:
        logger.error(f"Availability lookup failed: {e}")
        display.render_failure(console, str(e))
        sys.exit(1)

    view = derive_available_dates_by_site(report.availability)
    if as_json:
        click.echo(display.view_to_json(view))
    else:
        display.render_availability(console, view, report.campground, query)


@cli.command()
@click.argument("campground_id")
@click.pass_context
def campground(ctx, campground_id):
    """Show campground details"""
    cfg = ctx.obj["config"]

    async def run():
        async with RecGovAvailabilityClient(cfg) as client:
            return await client.fetch_campground(campground_id)

    try:
        result = asyncio.run(run())
    except NotFoundError:
        display.render_not_found(console, campground_id)
        sys.exit(1)
    except APIError as e:
        logger.error(f"Campground lookup failed: {e}")
        display.render_failure(console, str(e))
        sys.exit(1)

    display.render_campground(console, result)


@cli.command()
@click.argument("campsite_id")
@click.pass_context
def campsite(ctx, campsite_id):
    """Show campsite details"""
    cfg = ctx.obj["config"]

    async def run():
        async with RecGovAvailabilityClient(cfg) as client:
            return await client.fetch_campsite(campsite_id)

    try:
        result = asyncio.run(run())
    except APIError as e:
        logger.error(f"Campsite lookup failed: {e}")
        display.render_failure(console, str(e))
        sys.exit(1)

    display.render_campsites(console, [result], title="Campsite")
    console.print(f"[dim]{result.url}[/dim]")


@cli.command()
@query_options
@click.pass_context
def campsites(ctx, campground, year, months):
    """Show details for every campsite in the campground's availability"""
    cfg = ctx.obj["config"]
    query = build_query(cfg, campground, year, months)

    async def run():
        async with RecGovAvailabilityClient(cfg) as client:
            availability = await client.fetch_query(query)
            return await client.fetch_campsites(availability.campsite_ids)

    try:
        result = asyncio.run(run())
    except APIError as e:
        logger.error(f"Campsite lookup failed: {e}")
        display.render_failure(console, str(e))
        sys.exit(1)

    display.render_campsites(console, result)


@cli.command()
@click.pass_context
def info(ctx):
    """Show current configuration"""
    cfg = ctx.obj["config"]

    console.print(Panel("📋 Current Configuration", style="blue"))

    table = Table(show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Base URL", cfg.api.base_url)
    table.add_row("Timeout", f"{cfg.api.timeout}s")
    table.add_row("Campground ID", cfg.query.campground_id or "-")
    table.add_row("Year", str(cfg.query.year or "-"))
    table.add_row("Months", ", ".join(str(m) for m in cfg.query.months) or "-")
    table.add_row("Log Level", cfg.logging.level)

    console.print(table)


if __name__ == "__main__":
    cli()
