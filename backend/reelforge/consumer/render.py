"""Plain-text rendering of the dashboard panels."""

from reelforge.models import Deliverables, Segment, StatusEvent

from .session import Phase
from .state import ASSET_SLOTS, DashboardState

SEGMENT_COLORS: tuple[str, ...] = ("#7f5af0", "#3da9fc", "#2cb67d", "#ff8906", "#ef4565")
MIN_ETA_DISPLAY_SECONDS = 10
BAR_WIDTH = 40


def format_seconds(seconds: int | float) -> str:
    """Format seconds as m:ss."""
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}"


def segment_color(index: int) -> str:
    return SEGMENT_COLORS[index % len(SEGMENT_COLORS)]


def render_progress(state: DashboardState) -> str:
    filled = round(BAR_WIDTH * min(max(state.progress, 0.0), 1.0))
    bar = "#" * filled + "." * (BAR_WIDTH - filled)
    return f"[{bar}] {state.progress:4.0%}  {state.progression_label}"


def render_status(item: StatusEvent) -> str:
    eta = f"  ETA {max(MIN_ETA_DISPLAY_SECONDS, item.eta)}s" if item.eta else ""
    return f"{item.agent} | {item.stage}{eta}\n    {item.detail}"


def render_timeline(segments: list[Segment]) -> list[str]:
    if not segments:
        return ["Once VisionGrid locks the timeline, the orchestration map appears here."]

    total = max(segment.end for segment in segments)
    lines = []
    for index, segment in enumerate(segments):
        share = segment.duration / total if total else 0
        end = min(total, segment.end)
        lines.append(
            f"Beat {index + 1} {segment.label:<15} "
            f"{format_seconds(segment.start)} - {format_seconds(end)} "
            f"({share:.0%}, {segment_color(index)})"
        )
        lines.append(f"    {segment.description}")
    return lines


def render_vault(state: DashboardState) -> list[str]:
    lines = []
    for slot in ASSET_SLOTS:
        asset = state.asset_vault.get(slot)
        if asset is None:
            lines.append(f"[{slot}] Agent will attach the {slot} artifact once synthesized.")
            continue
        lines.append(f"[{slot}] {asset.title} ({asset.agent})")
        lines.extend(f"    {line}" for line in asset.content.splitlines())
    return lines


def render_manifest(result: Deliverables) -> list[str]:
    lines = [
        f"Reel ready for {result.platform}. Total runtime {format_seconds(result.duration)}.",
        f"Call to action: {result.call_to_action or 'No CTA provided.'}",
        "Script:",
    ]
    lines.extend(f"    {line}" for line in result.script.splitlines())
    return lines


def render_dashboard(state: DashboardState, phase: Phase = Phase.IDLE) -> str:
    """Render every panel for the current state."""
    sections: list[str] = [f"Mission control ({phase.value})", render_progress(state)]

    if state.error:
        sections.append(f"ERROR: {state.error}")

    sections.append("\n== Agent feed ==")
    if state.status_feed:
        sections.extend(render_status(item) for item in state.status_feed)
    else:
        sections.append("Launch the agents to watch every beat appear in real time.")

    sections.append("\n== Timeline synthesis ==")
    sections.extend(render_timeline(state.segments))

    sections.append("\n== Asset vault ==")
    sections.extend(render_vault(state))

    if state.result is not None:
        sections.append("\n== Delivery manifest ==")
        sections.extend(render_manifest(state.result))

    return "\n".join(sections)
