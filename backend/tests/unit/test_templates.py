"""Unit tests for the artifact text templates."""

from reelforge.models import Brief
from reelforge.producer.templates import (
    ARTIFACT_BUILDERS,
    DEFAULT_BRAND_COLOR,
    build_overlay_plan,
    build_script,
    build_voice_plan,
    render_artifacts,
)


def test_script_has_five_beats_in_order() -> None:
    script = build_script("AI studio launch", "cinematic", "creators", "Swipe now.")
    paragraphs = script.split("\n\n")

    assert [p.split(":", 1)[0] for p in paragraphs] == [
        "HOOK",
        "PAIN",
        "TRANSFORMATION",
        "PROOF",
        "CTA",
    ]
    assert "creators witnessing AI studio launch" in paragraphs[0]
    assert "cinematic reel" in paragraphs[2]
    assert paragraphs[-1] == "CTA: Swipe now."


def test_script_default_cta() -> None:
    script = build_script("Solar Kits", "bold", "general")
    assert script.endswith("CTA: Tap to explore Solar Kits today.")


def test_script_keeps_empty_cta() -> None:
    assert build_script("Solar Kits", "bold", "general", "").endswith("CTA: ")


def test_overlay_plan_brand_color_fallback() -> None:
    default = build_overlay_plan("Solar Kits", "tiktok")
    custom = build_overlay_plan("Solar Kits", "tiktok", "#ff0066")

    assert default.splitlines()[0] == f"• Gradient wash using {DEFAULT_BRAND_COLOR} to match tiktok chroma."
    assert "#ff0066" in custom
    assert len(custom.splitlines()) == 4
    assert "Solar Kits" in custom.splitlines()[2]


def test_voice_plan_bullets() -> None:
    plan = build_voice_plan("velvet baritone", "cinematic", "founders")
    lines = plan.splitlines()

    assert len(lines) == 4
    assert all(line.startswith("• ") for line in lines)
    assert lines[0] == "• Register: velvet baritone with cinematic pacing."
    assert "founders" in lines[1]


def test_artifact_table_covers_every_slot() -> None:
    brief = Brief(topic="Solar Kits", voice="crisp")
    rendered = render_artifacts(brief)

    assert set(ARTIFACT_BUILDERS) == {"script", "overlays", "voicePlan"}
    assert rendered["script"] == build_script("Solar Kits", "cinematic", "general")
    assert rendered["voicePlan"].startswith("• Register: crisp")
