"""Sprint planning: total duration and sprint count to a focus timeline."""

from dataclasses import asdict, dataclass

BREAK_MINUTES = 5
MIN_SPRINT_MINUTES = 10


@dataclass(frozen=True)
class SessionPlan:
    """How a session's minutes are split between sprints, breaks and buffer."""

    sprints: int
    sprint_minutes: int
    break_minutes: int
    break_count: int
    used_minutes: int
    buffer_minutes: int

    @property
    def total_focus_minutes(self) -> int:
        return self.sprint_minutes * self.sprints

    @property
    def total_break_minutes(self) -> int:
        return self.break_minutes * self.break_count

    @property
    def total_minutes(self) -> int:
        """Planned wall-clock length, including any buffer."""
        return self.total_focus_minutes + self.total_break_minutes + self.buffer_minutes

    def timeline(self) -> list[tuple[str, int]]:
        """Ordered (kind, minutes) blocks: focus, break, focus, ..., buffer."""
        blocks: list[tuple[str, int]] = []
        for index in range(self.sprints):
            if index:
                blocks.append(("break", self.break_minutes))
            blocks.append(("focus", self.sprint_minutes))
        if self.buffer_minutes:
            blocks.append(("buffer", self.buffer_minutes))
        return blocks

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


def build_plan(duration: int, sprints: int) -> SessionPlan:
    """Split *duration* minutes into *sprints* focus sprints.

    Sprints are never planned shorter than ``MIN_SPRINT_MINUTES``; when that
    floor binds, the plan over-allocates and the buffer is 0.
    """
    sprints = max(1, sprints)
    break_count = max(0, sprints - 1)
    break_total = break_count * BREAK_MINUTES
    sprint_minutes = max(MIN_SPRINT_MINUTES, (duration - break_total) // sprints)
    used = sprint_minutes * sprints + break_total

    return SessionPlan(
        sprints=sprints,
        sprint_minutes=sprint_minutes,
        break_minutes=BREAK_MINUTES,
        break_count=break_count,
        used_minutes=used,
        buffer_minutes=max(0, duration - used),
    )
