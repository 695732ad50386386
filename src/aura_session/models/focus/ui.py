"""Full-screen session UI: renders store snapshots and runs the input loop."""

import time
from collections.abc import Callable

from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table
from rich.text import Text

from .host import SigintGuard, TerminalFocusObserver
from .keyboard import FOCUS_IN, FOCUS_OUT, KeyboardHandler
from .palette import Palette
from .planner import SessionPlan
from .store import (
    CancelCommit,
    Command,
    Commit,
    Pause,
    Reset,
    Resume,
    SessionStore,
    Start,
    StoreSnapshot,
)

CARD_PLACEHOLDERS = {
    "intention": "What is the one thing that matters most today?",
    "outcome": "What do you want to have when the session ends?",
    "constraint": "Name the distraction you are shutting out.",
}


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS."""
    seconds = max(0, seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def command_for_key(key: str | None, snapshot: StoreSnapshot) -> Command | None:
    """Translate a keypress into a store command for the current state."""
    session = snapshot.session
    if key == "c" and session.phase in ("ready", "done") and not snapshot.commit.is_counting:
        return Commit()
    if key == "s" and session.phase in ("ready", "done"):
        return Start()
    if key == "x" and snapshot.commit.is_counting:
        return CancelCommit()
    if key == "p" and session.is_active:
        return Pause() if session.running else Resume()
    if key == "r" and session.phase != "ready":
        return Resume()
    if key == "z" and (session.phase != "ready" or snapshot.commit.is_counting):
        return Reset()
    return None


def palette_swatches(palette: Palette, width: int = 6) -> Columns:
    """Render the five tones as labelled color blocks."""
    swatches = []
    for tone in palette.tones:
        swatch = Text(" " * width, style=f"on {tone}")
        swatch.append(f" {tone.upper()}", style="dim")
        swatches.append(swatch)
    return Columns(swatches, padding=(0, 2))


def plan_timeline(plan: SessionPlan, current_sprint: int | None = None) -> Text:
    """One line per block; the current sprint is highlighted."""
    timeline = Text()
    sprint = 0
    for kind, minutes in plan.timeline():
        if kind == "focus":
            sprint += 1
            marker = "◉" if sprint == current_sprint else "●"
            style = "bold" if sprint == current_sprint else ""
            timeline.append(f"{marker} Sprint {sprint}  {minutes} min focus\n", style=style)
        elif kind == "break":
            timeline.append(f"  ┆ {minutes} min break\n", style="dim")
        else:
            timeline.append(f"  ○ {minutes} min buffer\n", style="dim")
    timeline.rstrip()
    return timeline


class SessionDisplay:
    """Manages the session screen."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def create_layout(self, snapshot: StoreSnapshot) -> Layout:
        """Create the session layout with all components."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        accent = snapshot.palette.accent
        session = snapshot.session
        if snapshot.commit.is_counting:
            title = "COMMITTING"
        elif session.is_active and not session.running:
            title = "PAUSED"
        else:
            title = session.phase_label().upper()

        header_text = Text(f"✦  Aura Session · {title}", style=f"bold {accent}", justify="center")
        layout["header"].update(Align.center(header_text, vertical="middle"))

        if snapshot.commit.is_counting:
            body = self._create_commit_content(snapshot)
        else:
            body = self._create_body_content(snapshot)
        layout["body"].update(Align.center(body, vertical="middle"))

        layout["footer"].update(
            Align.center(self._create_footer_text(snapshot), vertical="middle")
        )
        return layout

    def _create_commit_content(self, snapshot: StoreSnapshot) -> Group:
        return Group(
            Text("Committing to your session", style="bold", justify="center"),
            Text(""),
            Text(
                str(snapshot.commit.countdown_seconds),
                style=f"bold {snapshot.palette.accent}",
                justify="center",
            ),
            Text(""),
            Text("Press 'x' to cancel", style="dim", justify="center"),
        )

    def _create_body_content(self, snapshot: StoreSnapshot) -> Group:
        session = snapshot.session
        plan = snapshot.plan
        params = snapshot.params

        status = Table.grid(padding=(0, 4))
        for _ in range(4):
            status.add_column(justify="center")
        status.add_row(
            Text("Phase", style="dim"),
            Text("Remaining", style="dim"),
            Text("Total", style="dim"),
            Text("Leaves", style="dim"),
        )
        timer_style = "yellow" if session.is_active and not session.running else "bold"
        status.add_row(
            Text(session.phase_label(), style="bold"),
            Text(format_time(session.remaining_seconds), style=timer_style),
            Text(f"{plan.total_minutes} min", style="bold"),
            Text(
                str(snapshot.leave.count),
                style="bold red" if snapshot.leave.count else "bold",
            ),
        )

        card = Table.grid(padding=(0, 2))
        card.add_column(style=f"bold {snapshot.palette.accent}")
        card.add_column()
        for field, placeholder in CARD_PLACEHOLDERS.items():
            value = getattr(params, field)
            card.add_row(
                field.capitalize(),
                Text(value) if value else Text(placeholder, style="dim italic"),
            )

        current = session.current_sprint if session.is_active else None
        metrics = Text(
            f"Energy {params.energy}/5   Ambience {params.ambience}/5", style="dim"
        )

        return Group(
            Align.center(status),
            Text(""),
            Panel(card, border_style=snapshot.palette.tones[2], padding=(0, 1)),
            Text(""),
            plan_timeline(plan, current),
            Text(""),
            metrics,
            Text(""),
            palette_swatches(snapshot.palette),
        )

    def _create_footer_text(self, snapshot: StoreSnapshot) -> Text:
        """Create footer with keyboard hints."""
        session = snapshot.session
        if snapshot.commit.is_counting:
            hints = "'x' cancel  •  's' start now  •  'q' quit"
        elif session.phase in ("ready", "done"):
            hints = "'c' commit  •  's' start now  •  'q' quit"
        elif session.running:
            hints = "'p' pause  •  'z' reset  •  'q' quit"
        else:
            hints = "'r' resume  •  'z' reset  •  'q' quit"
        return Text(f"Press {hints}", style="dim", justify="center")

    def run_session(
        self,
        store: SessionStore,
        keyboard: KeyboardHandler | None = None,
        focus_observer: TerminalFocusObserver | None = None,
        exit_guard: SigintGuard | None = None,
        confirm_exit: Callable[[], bool] | None = None,
        poll_interval: float = 0.1,
    ) -> str:
        """
        Run the interactive session screen.

        Returns 'completed', 'abandoned', 'quit' or 'interrupted'.
        """
        keyboard = keyboard or KeyboardHandler()
        confirm_exit = confirm_exit or (
            lambda: Confirm.ask(
                "You are locked in. Leave the session?",
                default=False,
                console=self.console,
            )
        )

        try:
            with Live(
                self.create_layout(store.snapshot()),
                console=self.console,
                refresh_per_second=4,
            ) as live:
                while True:
                    key = keyboard.get_key()

                    if key in (FOCUS_IN, FOCUS_OUT):
                        if focus_observer is not None:
                            focus_observer.notify(key == FOCUS_IN)
                    elif key == "q" or (exit_guard and exit_guard.consume_request()):
                        if not store.leave_monitor.should_confirm_exit():
                            return self._outcome(store.snapshot())
                        live.stop()
                        keyboard.stop()
                        try:
                            leave = confirm_exit()
                        finally:
                            keyboard.resume()
                            live.start()
                        if leave:
                            return self._outcome(store.snapshot())
                    else:
                        command = command_for_key(key, store.snapshot())
                        if command is not None:
                            store.dispatch(command)

                    store.poll()
                    live.update(self.create_layout(store.snapshot()))
                    time.sleep(poll_interval)

        except KeyboardInterrupt:
            outcome = self._outcome(store.snapshot())
            return "interrupted" if outcome == "abandoned" else outcome
        finally:
            keyboard.stop()

    @staticmethod
    def _outcome(snapshot: StoreSnapshot) -> str:
        if snapshot.session.phase == "done":
            return "completed"
        if snapshot.session.is_active or snapshot.commit.is_counting:
            return "abandoned"
        return "quit"


def show_summary(snapshot: StoreSnapshot, result: str, console: Console | None = None):
    """Show a closing panel after the session screen exits."""
    console = console or Console()
    plan = snapshot.plan
    session = snapshot.session

    if result == "completed":
        heading = "[bold green]Session complete![/bold green]"
        border = "green"
    else:
        heading = f"[yellow]Session ended ({result})[/yellow]"
        border = "yellow"

    panel = Panel(
        f"""{heading}

Intention: {snapshot.params.intention or "N/A"}
Sprints: {session.current_sprint if session.phase != "ready" else 0}/{plan.sprints} × {plan.sprint_minutes} min
Leave warnings: {snapshot.leave.count}""",
        border_style=border,
        padding=(1, 2),
    )

    console.print(panel)
