"""Player Events: semantic events derived from media player state snapshots"""

from importlib.metadata import PackageNotFoundError, version

from player_events.event_stream import PlayerEventStream, StreamState, diff_snapshots
from player_events.exceptions import (
    ErrorCode,
    PlayerConnectionException,
    PlayerEventsException,
    SnapshotParseException,
)
from player_events.models import (
    EventKind,
    LoopingChanged,
    LoopStatus,
    Metadata,
    Paused,
    PlaybackRateChanged,
    PlaybackStatus,
    PlayerEvent,
    PlayerShutDown,
    Playing,
    ShuffleToggled,
    Snapshot,
    Stopped,
    TrackChanged,
    VolumeChanged,
    parse_event,
)
from player_events.protocols import PlayerProtocol

try:
    __version__ = version("player-events")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "ErrorCode",
    "EventKind",
    "LoopStatus",
    "LoopingChanged",
    "Metadata",
    "Paused",
    "PlaybackRateChanged",
    "PlaybackStatus",
    "PlayerConnectionException",
    "PlayerEvent",
    "PlayerEventStream",
    "PlayerEventsException",
    "PlayerProtocol",
    "PlayerShutDown",
    "Playing",
    "ShuffleToggled",
    "SnapshotParseException",
    "Snapshot",
    "Stopped",
    "StreamState",
    "TrackChanged",
    "VolumeChanged",
    "diff_snapshots",
    "parse_event",
]
