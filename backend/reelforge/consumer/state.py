"""Dashboard state folded from the event stream."""

from pydantic import BaseModel, Field

from reelforge.models import (
    AssetEvent,
    Deliverables,
    Event,
    ResultEvent,
    Segment,
    StatusEvent,
    TimelineEvent,
)

ASSET_SLOTS: tuple[str, ...] = ("script", "overlays", "voicePlan")


class DashboardState(BaseModel):
    """What the dashboard shows for one submission.

    - ``status_feed`` is append-only
    - ``asset_vault`` holds at most one asset per artifact slot, last write wins
    - ``segments`` is replaced wholesale by each timeline event
    - ``result`` is set by the terminal event
    - ``progress`` is the running maximum of every progress value seen
    """

    status_feed: list[StatusEvent] = Field(default_factory=list)
    asset_vault: dict[str, AssetEvent] = Field(default_factory=dict)
    segments: list[Segment] = Field(default_factory=list)
    result: Deliverables | None = None
    progress: float = 0.0
    error: str | None = None

    def apply(self, event: Event) -> None:
        """Fold one event into the state."""
        if isinstance(event, StatusEvent):
            self.status_feed = [*self.status_feed, event]
            self.progress = max(self.progress, event.progress)
        elif isinstance(event, AssetEvent):
            self.asset_vault = {**self.asset_vault, event.artifact: event}
            self.progress = max(self.progress, event.progress)
        elif isinstance(event, TimelineEvent):
            self.segments = list(event.segments)
            self.progress = max(self.progress, event.progress)
        elif isinstance(event, ResultEvent):
            self.result = event.deliverables
            self.progress = 1.0
        else:
            raise TypeError(f"Unhandled event type: {type(event).__name__}")

    @property
    def total_duration(self) -> int:
        """Furthest segment end, 0 before a timeline arrives."""
        return max((segment.end for segment in self.segments), default=0)

    @property
    def progression_label(self) -> str:
        return progression_label(self.progress)


def progression_label(progress: float) -> str:
    if progress >= 1:
        return "Render ready"
    if progress >= 0.75:
        return "Rendering & assembly"
    if progress >= 0.5:
        return "Visual design underway"
    if progress > 0:
        return "Creative engines ignited"
    return "Idle"
