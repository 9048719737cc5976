"""Scripted pipeline narrative derived from a brief.

The sequence is a pure function of the brief: ten events, always in the
order status, status, asset, status, timeline, status, asset, asset,
status, result, with non-decreasing progress ending at 1.
"""

import logging

from reelforge.config import ProducerConfig
from reelforge.models import (
    AssetEvent,
    Brief,
    Deliverables,
    Event,
    ResultEvent,
    StatusEvent,
    TimelineEvent,
)
from reelforge.producer.templates import render_artifacts
from reelforge.producer.timeline import build_timeline, resolve_duration

logger = logging.getLogger(__name__)

DIRECTOR = "Director AI"
STORY_CRAFTER = "StoryCrafter"
VISION_GRID = "VisionGrid"
ECHO_SYNTH = "EchoSynth"
PIPELINE_OPS = "PipelineOps"


def build_event_sequence(brief: Brief, config: ProducerConfig | None = None) -> list[Event]:
    """Compute the full ordered event sequence for ``brief``."""
    duration = resolve_duration(brief.length, config)
    segments = build_timeline(brief.topic, duration, brief.tone, brief.platform)
    artifacts = render_artifacts(brief)

    logger.debug(
        f"Built timeline for '{brief.topic}': duration={duration}s "
        f"beats={[s.duration for s in segments]} autopilot={brief.autopilot}"
    )

    return [
        StatusEvent(
            id="briefing",
            stage="Creative Brief Intake",
            agent=DIRECTOR,
            detail=f"Synced on goal-driven narrative for {brief.platform} reels.",
            progress=0.08,
            eta=90,
        ),
        StatusEvent(
            id="ideation",
            stage="Narrative Engine",
            agent=STORY_CRAFTER,
            detail=f"Drafting multi-beat storyline themed around “{brief.topic}”.",
            progress=0.24,
            eta=75,
        ),
        AssetEvent(
            id="script",
            artifact="script",
            title="AI Script Draft v1",
            content=artifacts["script"],
            progress=0.42,
            agent=STORY_CRAFTER,
        ),
        StatusEvent(
            id="shotlist",
            stage="Visual Sequencer",
            agent=VISION_GRID,
            detail="Mapping hero shots, transitions, and overlays for pacing.",
            progress=0.58,
            eta=60,
        ),
        TimelineEvent(
            id="timeline",
            segments=segments,
            progress=0.7,
            agent=VISION_GRID,
        ),
        StatusEvent(
            id="voice",
            stage="Voice Design",
            agent=ECHO_SYNTH,
            detail=f"Modeling {brief.voice} vocal profile with {brief.tone} energy.",
            progress=0.82,
            eta=45,
        ),
        AssetEvent(
            id="voice-plan",
            artifact="voicePlan",
            title="Voiceover Production Map",
            content=artifacts["voicePlan"],
            progress=0.9,
            agent=ECHO_SYNTH,
        ),
        AssetEvent(
            id="overlay-plan",
            artifact="overlays",
            title="On-screen Overlay Strategy",
            content=artifacts["overlays"],
            progress=0.94,
            agent=VISION_GRID,
        ),
        StatusEvent(
            id="render",
            stage="Real-Time Render Orchestration",
            agent=PIPELINE_OPS,
            detail="Coordinating camera moves, audio mix, and color matrix.",
            progress=0.98,
            eta=20,
        ),
        ResultEvent(
            id="delivery",
            agent=DIRECTOR,
            progress=1.0,
            deliverables=Deliverables(
                topic=brief.topic,
                platform=brief.platform,
                duration=duration,
                call_to_action=brief.call_to_action,
                script=artifacts["script"],
                overlays=artifacts["overlays"],
                segments=segments,
                voice_plan=artifacts["voicePlan"],
            ),
        ),
    ]
