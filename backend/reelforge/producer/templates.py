"""Template text for the script, overlay and voice-plan artifacts."""

from typing import Callable

from reelforge.models import Artifact, Brief

DEFAULT_BRAND_COLOR = "#7f5af0"


def build_script(
    topic: str,
    tone: str,
    audience: str,
    call_to_action: str | None = None,
) -> str:
    cta = call_to_action if call_to_action is not None else f"Tap to explore {topic} today."
    return "\n\n".join([
        f"HOOK: Imagine {audience} witnessing {topic} unfold in under 30 seconds.",
        "PAIN: You're losing attention within the first 2 seconds — that ends now.",
        f"TRANSFORMATION: We stack motion, color, and story into a {tone} reel "
        "that auto-adapts in real time.",
        "PROOF: Live data visuals, testimonial flashes, and hero product macros "
        "keep retention high.",
        f"CTA: {cta}",
    ])


def build_overlay_plan(topic: str, platform: str, brand_color: str | None = None) -> str:
    color = brand_color if brand_color is not None else DEFAULT_BRAND_COLOR
    return "\n".join([
        f"• Gradient wash using {color} to match {platform} chroma.",
        "• Dynamic caption blocks driven by speech-to-text latency under 80ms.",
        f"• Sidecar frame featuring live metrics relevant to {topic}.",
        "• End-frame sticker with adaptive sizing for vertical safe zones.",
    ])


def build_voice_plan(voice: str, tone: str, audience: str) -> str:
    return "\n".join([
        f"• Register: {voice} with {tone} pacing.",
        f"• Inflections target {audience} attention spikes on seconds 0-3, 12, and 22.",
        "• Breath map inserted to sync with beat-based cut rhythm.",
        "• Dual-track render for automatic ducking under SFX beds.",
    ])


ARTIFACT_BUILDERS: dict[Artifact, Callable[[Brief], str]] = {
    "script": lambda brief: build_script(
        brief.topic, brief.tone, brief.audience, brief.call_to_action
    ),
    "overlays": lambda brief: build_overlay_plan(
        brief.topic, brief.platform, brief.brand_color
    ),
    "voicePlan": lambda brief: build_voice_plan(brief.voice, brief.tone, brief.audience),
}


def render_artifacts(brief: Brief) -> dict[Artifact, str]:
    """Render every artifact body for a brief, keyed by vault slot."""
    return {artifact: build(brief) for artifact, build in ARTIFACT_BUILDERS.items()}
