"""Stream consumer: NDJSON reading, state folding and the submission lifecycle."""

from .client import EventStream, StudioClient
from .lines import NdjsonLineBuffer
from .render import format_seconds, render_dashboard, segment_color
from .session import Dashboard, Phase, Submission
from .state import ASSET_SLOTS, DashboardState, progression_label

__all__ = [
    "EventStream",
    "StudioClient",
    "NdjsonLineBuffer",
    "format_seconds",
    "render_dashboard",
    "segment_color",
    "Dashboard",
    "Phase",
    "Submission",
    "ASSET_SLOTS",
    "DashboardState",
    "progression_label",
]
