# -*- coding: utf-8 -*-
"""Command line client for the study planner."""
import datetime as dt
import functools
import logging
import typing as t

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from planner_api import energy_levels, optimizer, schedules, tasks
from study_planner.calendar_grid import build_month_grid, grid_weeks, month_label, shift_month
from study_planner.config import LOG_LEVEL, MAX_RANGE_DAYS
from study_planner.energy import TIME_SLOTS, build_energy_matrix
from study_planner.errors import PlannerError
from study_planner.models import DayCell, OptimizationParams, ScheduleEntry, ScheduleTemplate, StudyBlock
from study_planner.recurring import (
    day_count_between, end_date_for_day_count, expand_recurring, parse_date_range,
)
from study_planner.study_plan import block_end_time, group_blocks_by_date, total_hours
from study_planner.times import display_time, parse_calendar_date, time_to_minutes
from study_planner.weekdays import WEEKDAYS

console = Console()
err_console = Console(stderr=True)

TYPE_STYLES = {
    "WORK": "red",
    "CLASS": "blue",
    "STUDY": "green",
}


def handle_planner_errors(func: t.Callable) -> t.Callable:
    """Print planner errors in red and exit with status 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PlannerError as e:
            err_console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)
    return wrapper


def parse_month(value: t.Optional[str]) -> dt.date:
    """Parse ``YYYY-MM`` (or a full date) into the first of that month."""
    if not value:
        return dt.date.today().replace(day=1)
    text = value.strip()
    if len(text) == 7:
        text = f"{text}-01"
    try:
        return parse_calendar_date(text).replace(day=1)
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM, got '{value}'", param_hint="--month")


def validate_time(ctx: click.Context, param: click.Parameter, value: str) -> str:
    """Click callback accepting ``HH:MM`` (24h) only."""
    try:
        time_to_minutes(value)
    except ValueError:
        raise click.BadParameter(f"Expected HH:MM (24h), got '{value}'")
    return value.strip()


def render_day_cell(cell: DayCell, today: dt.date) -> Text:
    """Day number followed by one line per event."""
    text = Text()
    day_style = "bold" if cell.is_current_month else "dim"
    if cell.date == today:
        day_style += " reverse"
    text.append(str(cell.date.day), style=day_style)
    for event in cell.events:
        style = TYPE_STYLES.get(event.type, "white")
        if not cell.is_current_month:
            style += " dim"
        text.append(f"\n{display_time(event.start_time)} {event.title}", style=style)
    return text


def format_block_time(block: StudyBlock) -> str:
    try:
        end_time = block_end_time(block)
    except ValueError:
        return display_time(block.time_slot.start_time)
    return f"{display_time(block.time_slot.start_time)} - {display_time(end_time)}"


def create_month_table(reference: dt.date, cells: list[DayCell]) -> Table:
    table = Table(title=f"📅 {month_label(reference)}", show_header=True, header_style="bold magenta",
                  show_lines=True)
    for day in WEEKDAYS:
        table.add_column(day[:3].title(), vertical="top")

    today = dt.date.today()
    for week in grid_weeks(cells):
        table.add_row(*(render_day_cell(cell, today) for cell in week))
    return table


def create_schedule_table(title: str, entries: list[ScheduleEntry]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", width=4)
    table.add_column("Date", style="yellow")
    table.add_column("Day")
    table.add_column("Time")
    table.add_column("Title", style="white")
    table.add_column("Type")

    for idx, entry in enumerate(entries, 1):
        table.add_row(
            str(idx),
            entry.date[:10],
            entry.day.title(),
            f"{display_time(entry.start_time)} - {display_time(entry.end_time)}",
            entry.title,
            Text(entry.type, style=TYPE_STYLES.get(entry.type, "white")),
        )
    return table


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Plan study time around work, classes and deadlines."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )


@main.command()
@click.argument("user_id")
@click.option("--month", "month", help="Month to show as YYYY-MM (default: current month).")
@click.option("--offset", type=int, default=0, show_default=True,
              help="Whole months to move from --month, negative for earlier months.")
@handle_planner_errors
def calendar(user_id: str, month: t.Optional[str], offset: int) -> None:
    """Show USER_ID's schedules on a month calendar."""
    reference = shift_month(parse_month(month), offset)

    # Fetch every date the grid shows, including the neighbouring months' days
    empty_grid = build_month_grid(reference, [])
    with console.status("[bold green]Loading schedules..."):
        entries = schedules.list_user_schedules_in_range(user_id, empty_grid[0].date, empty_grid[-1].date)

    cells = build_month_grid(reference, entries)
    console.print(create_month_table(reference, cells))


@main.command()
@click.option("--title", required=True, help="Title of every generated schedule.")
@click.option("--type", "schedule_type", type=click.Choice(["WORK", "CLASS", "STUDY"], case_sensitive=False),
              default="WORK", show_default=True)
@click.option("--start-time", default="09:00", show_default=True, callback=validate_time,
              help="HH:MM, 24h.")
@click.option("--end-time", default="17:00", show_default=True, callback=validate_time,
              help="HH:MM, 24h.")
@click.option("--weekday", "weekdays", multiple=True, help="Weekday to repeat on; repeat the option for more.")
@click.option("--start-date", help="First date, YYYY-MM-DD (default: today).")
@click.option("--end-date", help="Last date, YYYY-MM-DD.")
@click.option("--days", "number_of_days", type=int, help="Number of days instead of --end-date.")
@click.option("--location", default="", help="Where it takes place.")
@click.option("--description", default="", help="Additional details.")
@click.option("--user", "user_id", help="User to create the schedules for (required with --submit).")
@click.option("--submit", is_flag=True, help="Create the schedules instead of only previewing them.")
@handle_planner_errors
def recurring(
    title: str,
    schedule_type: str,
    start_time: str,
    end_time: str,
    weekdays: tuple[str, ...],
    start_date: t.Optional[str],
    end_date: t.Optional[str],
    number_of_days: t.Optional[int],
    location: str,
    description: str,
    user_id: t.Optional[str],
    submit: bool,
) -> None:
    """Preview or create a schedule repeating on selected weekdays."""
    if end_date and number_of_days is not None:
        raise click.UsageError("Use either --end-date or --days, not both.")
    if not end_date and number_of_days is None:
        raise click.UsageError("Provide --end-date or --days.")
    if submit and not user_id:
        raise click.UsageError("--submit requires --user.")

    start_date = start_date or dt.date.today().isoformat()
    if number_of_days is not None:
        end_date = end_date_for_day_count(start_date, number_of_days).isoformat()
    start, end = parse_date_range(start_date, end_date)

    template = ScheduleTemplate(
        title=title,
        type=schedule_type.upper(),
        start_time=start_time,
        end_time=end_time,
        description=description,
        location=location,
    )
    entries = expand_recurring(template, weekdays, start, end, max_days=MAX_RANGE_DAYS)

    console.print(
        f"[bold]{day_count_between(start, end)}[/bold] day(s) from "
        f"{start.isoformat()} to {end.isoformat()}"
    )
    if not entries:
        console.print("[yellow]Nothing would be created: no selected weekday falls in this range.[/yellow]")
        if submit:
            raise SystemExit(1)
        return

    console.print(create_schedule_table(f"🔁 {title}", entries))

    if submit:
        with console.status(f"[bold green]Creating {len(entries)} schedule(s)..."):
            created = schedules.create_recurring_schedules(
                user_id, template, weekdays, start, end, max_days=MAX_RANGE_DAYS
            )
        console.print(f"\n[bold green]✅ Created {len(created)} schedule(s).[/bold green]")


@main.command()
@click.argument("user_id")
@click.option("--start-date", help="First date to plan, YYYY-MM-DD (default: today).")
@click.option("--end-date", help="Last date to plan, YYYY-MM-DD (default: a week after the start).")
@click.option("--save", is_flag=True, help="Save the plan as STUDY schedules.")
@handle_planner_errors
def optimize(user_id: str, start_date: t.Optional[str], end_date: t.Optional[str], save: bool) -> None:
    """Ask the optimizer for a study plan for USER_ID."""
    start_date = start_date or dt.date.today().isoformat()
    if not end_date:
        # a week after the start, both ends included
        end_date = end_date_for_day_count(start_date, 8).isoformat()
    start, end = parse_date_range(start_date, end_date)
    params = OptimizationParams(user_id=user_id, start_date=start.isoformat(), end_date=end.isoformat())

    with console.status("[bold green]Optimizing study schedule..."):
        plan = optimizer.optimize_schedule(params)

    if not plan.blocks:
        console.print("[yellow]The optimizer did not assign any study time.[/yellow]")
        return

    for day, blocks in group_blocks_by_date(plan.blocks).items():
        table = Table(title=day.strftime("%A %Y-%m-%d"), show_header=True, header_style="bold magenta")
        table.add_column("Time", style="yellow")
        table.add_column("Task", style="white")
        table.add_column("Hours", justify="right")
        table.add_column("Energy", justify="right")
        table.add_column("Due")
        table.add_column("Priority", justify="right")
        table.add_column("Complexity")
        for block in blocks:
            table.add_row(
                format_block_time(block),
                block.task.title,
                f"{block.hours_assigned:g}",
                f"{block.time_slot.energy_level}/10",
                block.task.due_date[:10],
                f"{block.task.priority}/5",
                block.task.complexity_level,
            )
        console.print(table)

    stats = Text()
    stats.append("Study hours: ", style="white")
    stats.append(f"{total_hours(plan.blocks):g}", style="bold green")
    stats.append("\nOptimization score: ", style="white")
    stats.append(f"{plan.fitness:.2f}", style="bold green")
    console.print(Panel(stats, title="📊 Plan", border_style="green"))

    if save:
        with console.status("[bold green]Saving study schedule..."):
            created = optimizer.save_study_plan(user_id, plan)
        console.print(f"\n[bold green]✅ Saved {len(created)} study block(s).[/bold green]")


@main.command(name="tasks")
@click.argument("user_id")
@click.option("--upcoming", "days_ahead", type=int, help="Only tasks due within this many days.")
@handle_planner_errors
def list_tasks(user_id: str, days_ahead: t.Optional[int]) -> None:
    """List USER_ID's incomplete tasks."""
    if days_ahead is not None:
        items = tasks.list_upcoming_tasks(user_id, days_ahead=days_ahead)
    else:
        items = tasks.list_incomplete_tasks(user_id)

    if not items:
        console.print("✅ No incomplete tasks found.")
        return

    table = Table(title="📚 Tasks", show_header=True, header_style="bold magenta")
    table.add_column("Title", style="white")
    table.add_column("Due", style="yellow")
    table.add_column("Hours", justify="right")
    table.add_column("Priority", justify="right")
    table.add_column("Complexity")
    table.add_column("Subject")
    for task in sorted(items, key=lambda item: item.due_date):
        table.add_row(
            task.title,
            task.due_date[:10],
            f"{task.estimated_hours:g}",
            f"{task.priority}/5",
            task.complexity_level,
            task.subject_area,
        )
    console.print(table)


@main.command()
@click.argument("user_id")
@handle_planner_errors
def energy(user_id: str) -> None:
    """Show USER_ID's energy levels by weekday and time of day."""
    matrix = build_energy_matrix(energy_levels.list_user_energy_levels(user_id))

    table = Table(title="⚡ Energy Levels", show_header=True, header_style="bold magenta")
    table.add_column("Day", style="cyan")
    for slot in TIME_SLOTS:
        table.add_column(slot.title(), justify="right")
    for day, slots in matrix.items():
        table.add_row(day.title(), *(str(slots[slot]) for slot in TIME_SLOTS))
    console.print(table)


if __name__ == "__main__":
    main()
