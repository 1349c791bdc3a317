"""Pydantic models for player state snapshots."""

from collections.abc import Mapping
from datetime import timedelta
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from player_events.exceptions import SnapshotParseException


class PlaybackStatus(str, Enum):
    """MPRIS playback status."""

    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"


class LoopStatus(str, Enum):
    """MPRIS loop status."""

    NONE = "None"
    TRACK = "Track"
    PLAYLIST = "Playlist"


# MPRIS metadata key -> Metadata field
MPRIS_METADATA_KEYS: dict[str, str] = {
    "mpris:trackid": "track_id",
    "xesam:title": "title",
    "xesam:album": "album_name",
    "xesam:albumArtist": "album_artists",
    "xesam:artist": "artists",
    "mpris:artUrl": "art_url",
    "xesam:autoRating": "auto_rating",
    "xesam:discNumber": "disc_number",
    "xesam:trackNumber": "track_number",
    "mpris:length": "length_us",
    "xesam:url": "url",
}

_EMPTY_REST: Mapping[str, Any] = MappingProxyType({})


def _freeze(value: Any) -> Any:
    """Recursively turn dicts into read-only mappings and lists into tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


class Metadata(BaseModel):
    """Metadata of the track a player is on.

    ``track_id`` is the track identity field. Keys outside the well-known
    MPRIS set are kept in ``rest`` as a read-only mapping, with nested lists
    stored as tuples.
    """

    model_config = ConfigDict(frozen=True)

    track_id: str | None = None
    title: str | None = None
    album_name: str | None = None
    album_artists: tuple[str, ...] | None = None
    artists: tuple[str, ...] | None = None
    art_url: str | None = None
    auto_rating: float | None = None
    disc_number: int | None = None
    track_number: int | None = None
    length_us: int | None = Field(default=None, ge=0, description="Track length in microseconds")
    url: str | None = None
    rest: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("album_artists", "artists", mode="before")
    @classmethod
    def wrap_single_artist(cls, v: Any) -> Any:
        """Some players send a bare string where MPRIS asks for a list."""
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("rest", mode="after")
    @classmethod
    def freeze_rest(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return _freeze(v)

    @field_serializer("rest")
    def serialize_rest(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return _thaw(v)

    @property
    def length(self) -> timedelta | None:
        """Track length as a timedelta, if the player reports one."""
        if self.length_us is None:
            return None
        return timedelta(microseconds=self.length_us)

    @classmethod
    def from_mpris(cls, data: Mapping[str, Any]) -> "Metadata":
        """Build metadata from an MPRIS metadata dictionary.

        Args:
            data: Mapping of MPRIS metadata keys (``xesam:title`` etc.) to values

        Returns:
            Metadata with unknown keys collected in ``rest``

        Raises:
            SnapshotParseException: If ``data`` is not a mapping or a
                well-known key holds an invalid value
        """
        if not isinstance(data, Mapping):
            raise SnapshotParseException(
                "Invalid MPRIS metadata",
                details={"errors": [f"expected a mapping, got {type(data).__name__}"]},
            )

        fields: dict[str, Any] = {}
        rest: dict[str, Any] = {}
        for key, value in data.items():
            name = MPRIS_METADATA_KEYS.get(key)
            if name is None:
                rest[key] = value
            else:
                fields[name] = value

        try:
            return cls(**fields, rest=rest)
        except ValidationError as e:
            raise SnapshotParseException(
                "Invalid MPRIS metadata",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def without_rest(self) -> "Metadata":
        """Return a copy with ``rest`` cleared."""
        return self.model_copy(update={"rest": _EMPTY_REST})

    def is_same_track(self, other: "Metadata") -> bool:
        """Compare track identity only, ignoring every other field."""
        return self.track_id == other.track_id


class Snapshot(BaseModel):
    """Immutable point-in-time state of a player.

    Only the attributes used for diffing are tracked; playback position is
    deliberately absent.
    """

    model_config = ConfigDict(frozen=True)

    playback_status: PlaybackStatus
    loop_status: LoopStatus = LoopStatus.NONE
    shuffle: bool = False
    volume: float = 1.0
    playback_rate: float = 1.0
    metadata: Metadata = Field(default_factory=Metadata)

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any]) -> "Snapshot":
        """Build a snapshot from MPRIS ``org.mpris.MediaPlayer2.Player`` properties.

        Optional MPRIS properties fall back to the defaults MPRIS defines
        for players that do not implement them.

        Args:
            properties: Mapping of property names (``PlaybackStatus``, ``Volume``...) to values

        Returns:
            Snapshot of the properties

        Raises:
            SnapshotParseException: If a property is missing or invalid
        """
        raw_metadata = properties.get("Metadata")
        metadata = Metadata.from_mpris({} if raw_metadata is None else raw_metadata)

        values: dict[str, Any] = {
            "playback_status": properties.get("PlaybackStatus"),
            "metadata": metadata,
        }
        for prop, name in (
            ("LoopStatus", "loop_status"),
            ("Shuffle", "shuffle"),
            ("Volume", "volume"),
            ("Rate", "playback_rate"),
        ):
            if prop in properties:
                values[name] = properties[prop]

        try:
            return cls(**values)
        except ValidationError as e:
            raise SnapshotParseException(
                "Invalid MPRIS player properties",
                details={"errors": e.errors(include_url=False)},
            ) from e
