"""Pydantic models for player events.

Events do not cover position changes (seeking or normal playback progress).
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from player_events.models.snapshot import LoopStatus, Metadata


class EventKind(str, Enum):
    """Discriminator values of the event union."""

    PLAYER_SHUT_DOWN = "PlayerShutDown"
    PAUSED = "Paused"
    PLAYING = "Playing"
    STOPPED = "Stopped"
    LOOPING_CHANGED = "LoopingChanged"
    SHUFFLE_TOGGLED = "ShuffleToggled"
    VOLUME_CHANGED = "VolumeChanged"
    PLAYBACK_RATE_CHANGED = "PlaybackRateChanged"
    TRACK_CHANGED = "TrackChanged"


class BaseEvent(BaseModel):
    """Common configuration for all events."""

    model_config = ConfigDict(frozen=True)


class PlayerShutDown(BaseEvent):
    """Player was shut down or quit."""

    kind: Literal[EventKind.PLAYER_SHUT_DOWN] = EventKind.PLAYER_SHUT_DOWN


class Paused(BaseEvent):
    """Player was paused."""

    kind: Literal[EventKind.PAUSED] = EventKind.PAUSED


class Playing(BaseEvent):
    """Player started playing media."""

    kind: Literal[EventKind.PLAYING] = EventKind.PLAYING


class Stopped(BaseEvent):
    """Player was stopped."""

    kind: Literal[EventKind.STOPPED] = EventKind.STOPPED


class LoopingChanged(BaseEvent):
    """Loop status of player was changed."""

    kind: Literal[EventKind.LOOPING_CHANGED] = EventKind.LOOPING_CHANGED
    loop_status: LoopStatus


class ShuffleToggled(BaseEvent):
    """Shuffle status of player was changed."""

    kind: Literal[EventKind.SHUFFLE_TOGGLED] = EventKind.SHUFFLE_TOGGLED
    shuffle: bool


class VolumeChanged(BaseEvent):
    """Player's volume was changed."""

    kind: Literal[EventKind.VOLUME_CHANGED] = EventKind.VOLUME_CHANGED
    volume: float


class PlaybackRateChanged(BaseEvent):
    """Player's playback rate was changed."""

    kind: Literal[EventKind.PLAYBACK_RATE_CHANGED] = EventKind.PLAYBACK_RATE_CHANGED
    playback_rate: float


class TrackChanged(BaseEvent):
    """Player's track changed.

    The metadata never carries ``rest`` fields; only the well-known MPRIS
    fields of the new track are provided.
    """

    kind: Literal[EventKind.TRACK_CHANGED] = EventKind.TRACK_CHANGED
    metadata: Metadata

    @field_validator("metadata", mode="after")
    @classmethod
    def strip_rest(cls, v: Metadata) -> Metadata:
        if v.rest:
            return v.without_rest()
        return v

    @classmethod
    def from_metadata(cls, metadata: Metadata) -> "TrackChanged":
        return cls(metadata=metadata)


PlayerEvent = Annotated[
    PlayerShutDown
    | Paused
    | Playing
    | Stopped
    | LoopingChanged
    | ShuffleToggled
    | VolumeChanged
    | PlaybackRateChanged
    | TrackChanged,
    Field(discriminator="kind"),
]

_event_adapter = TypeAdapter(PlayerEvent)


def parse_event(data: dict[str, Any]) -> PlayerEvent:
    """Validate a plain dict (e.g. from ``model_dump()``) into an event.

    Raises:
        pydantic.ValidationError: If ``kind`` is unknown or the payload is invalid
    """
    return _event_adapter.validate_python(data)
