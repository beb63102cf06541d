"""
Terminal rendering of availability results

Consumes only the derived view and metadata models; nothing here
performs I/O beyond printing to the given console.
"""
import json
from datetime import date
from typing import List, Optional

from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .common.models import Campground, Campsite, SiteAvailability, AvailabilityQuery
from .common.pages import WebPages

NO_AVAILABILITY = "No availability"


def format_date(value: date) -> str:
    """Format a date as M/D/YYYY"""
    return f"{value.month}/{value.day}/{value.year}"


def site_table(site: SiteAvailability) -> Table:
    """One bordered table per site: label header, one row per date"""
    table = Table(show_lines=False)
    table.add_column(site.site, style="bold")
    for d in site.dates:
        table.add_row(format_date(d))
    return table


def render_availability(
    console: Console,
    view: List[SiteAvailability],
    campground: Optional[Campground] = None,
    query: Optional[AvailabilityQuery] = None
):
    """Print one table per site, or a no-availability notice"""
    if campground:
        title = f"Availability: {campground.name} ({campground.id})"
        if campground.parent_name:
            title += f" - {campground.parent_name}"
        console.print(Panel(title, style="blue"))
        console.print(f"[dim]Book: {WebPages.availability(campground.id)}[/dim]")

    if query:
        months = ", ".join(f"{query.year}-{m:02d}" for m in query.months)
        console.print(f"Months: {months}")

    if not view:
        console.print(f"[yellow]{NO_AVAILABILITY}[/yellow]")
        return

    console.print(Columns([site_table(site) for site in view]))
    console.print(f"[green]{len(view)} site(s) with availability[/green]")


def render_not_found(console: Console, campground_id: str):
    console.print(Panel(
        f"[bold red]Campground {campground_id} not found[/bold red]",
        style="red"
    ))


def render_failure(console: Console, message: str):
    console.print(Panel(
        f"[bold red]❌ Failed to fetch availability[/bold red]\n\n{message}",
        style="red"
    ))


def render_campground(console: Console, campground: Campground):
    table = Table(title="Campground", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("ID", campground.id)
    table.add_row("Name", campground.name)
    table.add_row("Parent", campground.parent_name or "-")
    if campground.latitude is not None and campground.longitude is not None:
        table.add_row("Location", f"{campground.latitude}, {campground.longitude}")
    table.add_row("URL", campground.url)

    console.print(table)


def render_campsites(console: Console, campsites: List[Campsite], title: str = "Campsites"):
    table = Table(title=f"{title} ({len(campsites)} total)")
    table.add_column("Site ID")
    table.add_column("Name")
    table.add_column("Loop")
    table.add_column("Type")
    table.add_column("Max People")

    for campsite in sorted(campsites, key=lambda c: c.name):
        table.add_row(
            campsite.id,
            campsite.name,
            campsite.loop or "-",
            campsite.site_type or "-",
            str(campsite.max_people or "-")
        )

    console.print(table)


def view_to_json(view: List[SiteAvailability]) -> str:
    """Serialize the view as a JSON list of {site, dates}"""
    return json.dumps(
        [{"site": s.site, "dates": [d.isoformat() for d in s.dates]} for s in view],
        indent=2
    )
