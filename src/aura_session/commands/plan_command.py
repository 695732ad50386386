"""Command 'plan' of aura-session"""

import typer
from rich.table import Table

from aura_session.commands.decorators import command_wrapper
from aura_session.models.focus.planner import MIN_SPRINT_MINUTES, build_plan
from aura_session.models.focus.store import validate_param
from aura_session.models.focus.ui import plan_timeline
from aura_session.services.config_service import get_config_service
from aura_session.utils.ui.console import get_console
from aura_session.utils.ui.formatters import format_output, format_warning

console = get_console()


@command_wrapper
def plan(
    duration: int | None = typer.Option(
        None, "--duration", "-d", help="Total session length in minutes (45-120)"
    ),
    sprints: int | None = typer.Option(
        None, "--sprints", "-n", help="Number of focus sprints (2-5)"
    ),
    output: str = typer.Option("pretty", "--output", "-o", help="pretty, json or yaml"),
) -> None:
    """Show how a session splits into sprints, breaks and buffer."""
    defaults = get_config_service().config.defaults
    duration = validate_param("duration", defaults.duration if duration is None else duration)
    sprints = validate_param("sprints", defaults.sprints if sprints is None else sprints)

    session_plan = build_plan(duration, sprints)

    if output in ("json", "yaml"):
        format_output({"duration": duration, **session_plan.to_dict()}, output)
        return

    table = Table(title=f"{duration}-minute routine", show_header=True)
    table.add_column("Sprint", justify="right", style="aura.accent")
    table.add_column("Break", justify="right")
    table.add_column("Buffer", justify="right")
    table.add_column("Total", justify="right", style="bold")
    table.add_row(
        f"{session_plan.sprint_minutes} min × {sprints}",
        f"{session_plan.break_minutes} min × {session_plan.break_count}",
        f"{session_plan.buffer_minutes} min",
        f"{session_plan.total_minutes} min",
    )
    console.print(table)
    console.print(plan_timeline(session_plan))

    if session_plan.used_minutes > duration:
        format_warning(
            f"Sprints have a {MIN_SPRINT_MINUTES} minute floor; "
            f"this plan runs {session_plan.used_minutes - duration} minutes over."
        )
