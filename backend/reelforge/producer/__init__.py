"""Event producer: deterministic pipeline narrative streamed as NDJSON."""

from .sequence import build_event_sequence
from .stream import stream_events
from .templates import (
    ARTIFACT_BUILDERS,
    build_overlay_plan,
    build_script,
    build_voice_plan,
    render_artifacts,
)
from .timeline import BEAT_LABELS, BEAT_WEIGHTS, build_timeline, resolve_duration

__all__ = [
    "build_event_sequence",
    "stream_events",
    "ARTIFACT_BUILDERS",
    "build_script",
    "build_overlay_plan",
    "build_voice_plan",
    "render_artifacts",
    "BEAT_LABELS",
    "BEAT_WEIGHTS",
    "build_timeline",
    "resolve_duration",
]
