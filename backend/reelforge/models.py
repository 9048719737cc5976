"""Wire models for the brief and the NDJSON event stream.

Every model serializes with camelCase aliases (``callToAction``,
``brandColor``, ``voicePlan``) and accepts either the alias or the Python
field name on input.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from reelforge.exceptions import BriefValidationError, ParseError

Artifact = Literal["script", "voicePlan", "overlays"]
EventType = Literal["status", "asset", "timeline", "result"]
MIN_TOPIC_LENGTH = 3


class WireModel(BaseModel):
    """Base model with camelCase wire aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ============================================================================
# Brief
# ============================================================================


class Brief(WireModel):
    """Creative parameters for one generation request."""

    topic: str
    platform: str = "instagram"
    tone: str = "cinematic"
    length: str = "30"
    voice: str = "warm"
    call_to_action: str | None = None
    audience: str = "general"
    autopilot: StrictBool = True
    brand_color: str | None = None

    @field_validator("topic")
    @classmethod
    def topic_min_length(cls, v: str) -> str:
        # Length in UTF-16 code units, as browsers measure it
        if len(v.encode("utf-16-le", "surrogatepass")) // 2 < MIN_TOPIC_LENGTH:
            raise ValueError(f"topic must be at least {MIN_TOPIC_LENGTH} characters")
        return v

    @classmethod
    def from_payload(cls, payload: Any) -> Brief:
        """Validate a decoded JSON body, applying defaults for absent fields."""
        if not isinstance(payload, Mapping):
            raise BriefValidationError(
                "Invalid request payload", details="Request body must be a JSON object"
            )
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise BriefValidationError("Invalid request payload", details=str(e)) from e

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# ============================================================================
# Timeline and deliverables
# ============================================================================


class Segment(WireModel):
    """One timed beat in the synthesized timeline."""

    id: str
    label: str
    start: int = Field(ge=0)
    duration: int = Field(gt=0)
    description: str

    @property
    def end(self) -> int:
        return self.start + self.duration


class Deliverables(WireModel):
    """Snapshot of every streamed artifact, sent once with the result event."""

    topic: str
    platform: str
    duration: int
    call_to_action: str | None = None
    script: str
    overlays: str
    segments: list[Segment]
    voice_plan: str


# ============================================================================
# Events
# ============================================================================


class StatusEvent(WireModel):
    type: Literal["status"] = "status"
    id: str
    stage: str
    agent: str
    detail: str
    progress: float = Field(ge=0, le=1)
    eta: int | None = None


class AssetEvent(WireModel):
    type: Literal["asset"] = "asset"
    id: str
    artifact: Artifact
    title: str
    content: str
    agent: str
    progress: float = Field(ge=0, le=1)


class TimelineEvent(WireModel):
    type: Literal["timeline"] = "timeline"
    id: str
    segments: list[Segment]
    progress: float = Field(ge=0, le=1)
    agent: str


class ResultEvent(WireModel):
    type: Literal["result"] = "result"
    id: str
    agent: str
    progress: float = Field(default=1.0, ge=1, le=1)
    deliverables: Deliverables


Event = Annotated[
    Union[StatusEvent, AssetEvent, TimelineEvent, ResultEvent],
    Field(discriminator="type"),
]

EVENT_ADAPTER: TypeAdapter[Event] = TypeAdapter(Event)


def encode_event(event: Event) -> bytes:
    """Serialize one event as a compact JSON object followed by a newline."""
    return event.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8") + b"\n"


def parse_event(line: str) -> Event:
    """Parse one NDJSON line into a typed event.

    Raises:
        ParseError: the line is not JSON or does not match a known event type.
    """
    try:
        return EVENT_ADAPTER.validate_json(line)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        reason = first.get("msg", str(e))
        raise ParseError(f"Could not parse stream event: {reason}", line=line) from e
