"""Unit tests for the scripted event sequence."""

import pytest

from reelforge.models import AssetEvent, Brief, ResultEvent, StatusEvent, TimelineEvent
from reelforge.producer import build_event_sequence

EXPECTED_TYPES = [
    "status",
    "status",
    "asset",
    "status",
    "timeline",
    "status",
    "asset",
    "asset",
    "status",
    "result",
]


@pytest.mark.parametrize(
    "brief",
    [
        Brief(topic="AI studio launch", length="45", platform="tiktok"),
        Brief(topic="abc"),
        Brief(topic="Solar Kits", length="not a number", call_to_action="Buy"),
        Brief(topic="Long form", length="999", brand_color="#000000", autopilot=False),
    ],
)
def test_sequence_shape(brief: Brief) -> None:
    events = build_event_sequence(brief)

    assert [e.type for e in events] == EXPECTED_TYPES
    progress = [e.progress for e in events]
    assert progress == sorted(progress)
    assert all(0 <= p <= 1 for p in progress)
    assert progress[-1] == 1


def test_progress_and_eta_values() -> None:
    events = build_event_sequence(Brief(topic="AI studio launch"))

    assert [e.progress for e in events] == [
        0.08, 0.24, 0.42, 0.58, 0.7, 0.82, 0.9, 0.94, 0.98, 1.0,
    ]
    assert [e.eta for e in events if isinstance(e, StatusEvent)] == [90, 75, 60, 45, 20]


def test_concrete_tiktok_brief() -> None:
    brief = Brief(topic="AI studio launch", length="45", platform="tiktok")
    events = build_event_sequence(brief)

    timeline = events[4]
    assert isinstance(timeline, TimelineEvent)
    assert [s.duration for s in timeline.segments] == [8, 10, 9, 9, 9]

    result = events[-1]
    assert isinstance(result, ResultEvent)
    assert result.deliverables.duration == 45
    assert result.deliverables.platform == "tiktok"
    assert events[0].detail == "Synced on goal-driven narrative for tiktok reels."
    assert events[1].detail == "Drafting multi-beat storyline themed around “AI studio launch”."


def test_assets_fill_each_slot_once() -> None:
    events = build_event_sequence(Brief(topic="Solar Kits"))
    assets = [e for e in events if isinstance(e, AssetEvent)]

    assert [a.artifact for a in assets] == ["script", "voicePlan", "overlays"]
    assert [a.id for a in assets] == ["script", "voice-plan", "overlay-plan"]


def test_deliverables_snapshot_matches_streamed_artifacts() -> None:
    brief = Brief(topic="Solar Kits", call_to_action="Order today.")
    events = build_event_sequence(brief)
    assets = {e.artifact: e.content for e in events if isinstance(e, AssetEvent)}
    deliverables = events[-1].deliverables

    assert deliverables.script == assets["script"]
    assert deliverables.voice_plan == assets["voicePlan"]
    assert deliverables.overlays == assets["overlays"]
    assert deliverables.segments == events[4].segments
    assert deliverables.call_to_action == "Order today."


def test_sequence_is_deterministic() -> None:
    brief = Brief(topic="Solar Kits", length="60")
    assert build_event_sequence(brief) == build_event_sequence(brief)


def test_clamped_duration_reaches_result() -> None:
    assert build_event_sequence(Brief(topic="abc", length="1"))[-1].deliverables.duration == 15
    assert build_event_sequence(Brief(topic="abc", length="xyz"))[-1].deliverables.duration == 45
