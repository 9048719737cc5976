"""Beat timeline synthesis.

Durations are allocated greedily left to right with a 3-second floor per beat.
The result is not hard-clamped to the target: for targets below the producer's
duration floor the final beat can run past ``duration``.
"""

import math
import re

from reelforge.config import ProducerConfig
from reelforge.models import Segment

BEAT_WEIGHTS: tuple[float, ...] = (0.18, 0.24, 0.20, 0.20, 0.18)
BEAT_LABELS: tuple[str, ...] = ("Hook", "Pain Point", "Transformation", "Proof", "CTA")
MIN_BEAT_SECONDS = 3

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(text: str) -> int | None:
    """Parse the leading integer of ``text`` ("45s" -> 45, "3.9" -> 3)."""
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def resolve_duration(length: str, config: ProducerConfig | None = None) -> int:
    """Turn the brief's ``length`` text into a clamped target duration."""
    config = config or ProducerConfig()
    numeric = parse_leading_int(length)
    if numeric is None:
        return config.fallback_duration
    return min(max(numeric, config.min_duration), config.max_duration)


def beat_label(index: int) -> str:
    if index < len(BEAT_LABELS):
        return BEAT_LABELS[index]
    return f"Beat {index + 1}"


def beat_description(index: int, topic: str, tone: str, platform: str) -> str:
    templates = [
        f"Open with an arresting motion graphic that telegraphs the promise around {topic}.",
        f"Amplify the audience problem with kinetic captions tailored for {platform}.",
        f"Reveal the transformation anchored by {topic} using {tone} pacing.",
        "Show tactile proof clips with split-screen receipts and animated UI.",
        "Deliver the CTA with punchy supers and looping background energy.",
    ]
    if index < len(templates):
        return templates[index]
    return "Drive momentum into the next beat."


def build_timeline(
    topic: str,
    duration: int,
    tone: str,
    platform: str,
    weights: tuple[float, ...] = BEAT_WEIGHTS,
) -> list[Segment]:
    """Split ``duration`` seconds into weighted beats."""
    segments: list[Segment] = []
    cursor = 0

    for index, weight in enumerate(weights):
        is_last = index == len(weights) - 1
        if is_last:
            seconds = max(duration - cursor, MIN_BEAT_SECONDS)
        else:
            seconds = max(MIN_BEAT_SECONDS, math.floor(duration * weight))
            # Leave room for the beats still to come
            if cursor + seconds >= duration:
                seconds = max(MIN_BEAT_SECONDS, duration - cursor - MIN_BEAT_SECONDS)

        segments.append(
            Segment(
                id=f"segment-{index + 1}",
                label=beat_label(index),
                start=cursor,
                duration=seconds,
                description=beat_description(index, topic, tone, platform),
            )
        )
        cursor += seconds

    return segments
