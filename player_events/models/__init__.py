"""Player Events models"""

from player_events.models.events import (
    EventKind,
    LoopingChanged,
    Paused,
    PlaybackRateChanged,
    PlayerEvent,
    PlayerShutDown,
    Playing,
    ShuffleToggled,
    Stopped,
    TrackChanged,
    VolumeChanged,
    parse_event,
)
from player_events.models.snapshot import LoopStatus, Metadata, PlaybackStatus, Snapshot

__all__ = [
    "EventKind",
    "LoopStatus",
    "LoopingChanged",
    "Metadata",
    "Paused",
    "PlaybackRateChanged",
    "PlaybackStatus",
    "PlayerEvent",
    "PlayerShutDown",
    "Playing",
    "ShuffleToggled",
    "Snapshot",
    "Stopped",
    "TrackChanged",
    "VolumeChanged",
    "parse_event",
]
