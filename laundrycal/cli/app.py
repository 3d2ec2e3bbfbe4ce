"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..adapters.booking_client import BookingClient
from ..adapters.mock_booking_client import MockBookingClient
from ..config import AppConfig, load_config
from ..domain.calendar_renderer import CalendarRenderer
from ..domain.exceptions import LaundryCalError, TimeSlotParseError
from ..domain.time_slot import parse_time_slot
from ..services.booking_calendar import BookingCalendarService

app = typer.Typer(
    name="laundrycal",
    help="Publish bokatvattid laundry bookings as an iCalendar feed",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml"),
]
MockOption = Annotated[
    bool,
    typer.Option("--mock", help="Serve recorded mock data instead of calling the booking API."),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    try:
        return load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def create_service(config: AppConfig, mock: bool = False) -> BookingCalendarService:
    """Wire the booking client, renderer and clock from the configuration."""
    if mock:
        client = MockBookingClient()
    else:
        client = BookingClient(
            base_url=config.api.base_url,
            timeout=config.api.timeout_seconds,
            limit=config.api.limit,
            lang=config.api.lang,
        )

    return BookingCalendarService(
        booking_client=client,
        renderer=CalendarRenderer(prodid=config.calendar.prodid),
    )


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to listen on")] = None,
    config_file: ConfigOption = None,
    mock: MockOption = False,
):
    """
    Run the calendar feed server.

    Subscribe to http://<host>:<port>/calendar/<user-id>/calendar.ics
    """
    import uvicorn

    from ..api.server import create_app

    config = _load_config(config_file)
    service = create_service(config, mock=mock)

    bind_host = host or config.server.host
    bind_port = port or config.server.port

    if mock:
        console.print("[yellow]⚠  MOCK MODE: using recorded test data[/yellow]")

    console.print(f"[bold cyan]laundrycal[/bold cyan] listening on {bind_host}:{bind_port}")
    uvicorn.run(create_app(service), host=bind_host, port=bind_port)


@app.command()
def export(
    user_id: Annotated[int, typer.Argument(min=0, help="bokatvattid user id")],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write the calendar to this file instead of stdout")] = None,
    config_file: ConfigOption = None,
    mock: MockOption = False,
):
    """
    Export a user's bookings as an .ics file.

    Examples:

        laundrycal export 1234
        laundrycal export 1234 -o tvatt.ics
        laundrycal export 1234 --mock
    """
    config = _load_config(config_file)
    service = create_service(config, mock=mock)

    try:
        document = service.render_calendar(user_id)
    except LaundryCalError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if output is None:
        typer.echo(document, nl=False)
        return

    output.write_text(document, encoding="utf-8", newline="")
    console.print(f"[green]✓ Calendar written:[/green] {output}")


@app.command()
def bookings(
    user_id: Annotated[int, typer.Argument(min=0, help="bokatvattid user id")],
    config_file: ConfigOption = None,
    mock: MockOption = False,
):
    """
    Show a user's bookings and how they map onto calendar events.

    Malformed bookings are listed with their error instead of aborting.
    """
    config = _load_config(config_file)
    service = create_service(config, mock=mock)

    try:
        results = list(service.iter_event_results(user_id))
    except LaundryCalError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if not results:
        console.print("[yellow]No bookings found.[/yellow]")
        return

    table = Table(
        title=f"Bookings for user {user_id}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("ID", style="dim")
    table.add_column("Room", style="bold yellow")
    table.add_column("Slot")
    table.add_column("Start")
    table.add_column("Duration")
    table.add_column("Status")
    table.add_column("Alarm")

    for record, event, error in results:
        if error is not None:
            table.add_row(
                str(record.booking_id),
                escape(record.laundry_room),
                escape(record.time_slots_desc),
                f"[red]{escape(str(error))}[/red]",
                "", "", "",
            )
            continue

        table.add_row(
            event.uid,
            escape(event.summary),
            escape(record.time_slots_desc),
            event.start.strftime("%d.%m.%Y %H:%M"),
            event.duration(),
            event.status.value,
            event.alarm.trigger() if event.alarm else "",
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def parse(
    description: Annotated[str, typer.Argument(help="Slot description, e.g. '15:00 - 16:00 (23/8)'")],
    anchor_date: Annotated[str, typer.Argument(help="Booking date (YYYY-MM-DD)")],
):
    """
    Parse a slot description against a booking date.
    """
    try:
        anchor = pendulum.from_format(anchor_date, "YYYY-MM-DD").date()
    except ValueError as e:
        console.print(f"[red]Could not parse date: {e}[/red]")
        raise typer.Exit(1)

    try:
        slot = parse_time_slot(description, anchor)
    except TimeSlotParseError as e:
        console.print(f"[bold red]Error ({e.kind.name}):[/bold red] {e}")
        raise typer.Exit(1)

    console.print(f"[bold]Start:[/bold] {slot.start.strftime('%Y-%m-%d %H:%M')}")
    console.print(f"[bold]End:[/bold]   {slot.end.strftime('%Y-%m-%d %H:%M')}")
    console.print(f"[bold]Duration:[/bold] {slot.duration_hours()}h")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]laundrycal[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
