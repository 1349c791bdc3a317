"""Blocking event stream that diffs player snapshots into events.

The stream keeps the last snapshot it saw. Whenever its queue runs dry it
blocks on the player's dirty wait, fetches a fresh snapshot and compares it
field by field against the previous one. Comparison order is fixed:

    playback status, loop status, shuffle, volume, playback rate, track

so consumers can rely on e.g. a ``Playing`` event arriving before the
``TrackChanged`` produced by the same change.
"""

from collections import deque
from enum import Enum

from player_events.exceptions import PlayerConnectionException
from player_events.logging_config import get_logger, log_with_context
from player_events.models.events import (
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
)
from player_events.models.snapshot import PlaybackStatus, Snapshot
from player_events.protocols import PlayerProtocol

logger = get_logger(__name__)

_STATUS_EVENTS: dict[PlaybackStatus, type[Playing | Paused | Stopped]] = {
    PlaybackStatus.PLAYING: Playing,
    PlaybackStatus.PAUSED: Paused,
    PlaybackStatus.STOPPED: Stopped,
}


class StreamState(str, Enum):
    """Iteration state of a PlayerEventStream."""

    QUEUED = "queued"  # events pending
    WAITING = "waiting"  # next call blocks on the player
    DONE = "done"  # terminal


def diff_snapshots(old: Snapshot, new: Snapshot) -> list[PlayerEvent]:
    """Compute the events that lead from one snapshot to the next.

    Each attribute contributes at most one event. Floats are compared
    exactly. Metadata is compared on track identity only, so other metadata
    churn is ignored.

    Args:
        old: Previously seen snapshot
        new: Freshly fetched snapshot

    Returns:
        Events in fixed pass order (possibly empty)
    """
    events: list[PlayerEvent] = []

    if new.playback_status != old.playback_status:
        events.append(_STATUS_EVENTS[new.playback_status]())

    if new.loop_status != old.loop_status:
        events.append(LoopingChanged(loop_status=new.loop_status))

    if new.shuffle != old.shuffle:
        events.append(ShuffleToggled(shuffle=new.shuffle))

    if new.volume != old.volume:
        events.append(VolumeChanged(volume=new.volume))

    if new.playback_rate != old.playback_rate:
        events.append(PlaybackRateChanged(playback_rate=new.playback_rate))

    if not new.metadata.is_same_track(old.metadata):
        events.append(TrackChanged.from_metadata(new.metadata))

    return events


class PlayerEventStream:
    """Iterator that blocks until the player has an event.

    Iteration stops once the player is gone, after one final
    ``PlayerShutDown`` event. Several events found by a single wake-up are
    yielded back to back before blocking again.

    A ``PlayerConnectionException`` raised by ``next()`` leaves the stream
    untouched; calling ``next()`` again retries with the same baseline.

    The stream is single-consumer and cannot be restarted.
    """

    def __init__(self, player: PlayerProtocol):
        """Create a stream with the player's current state as baseline.

        Args:
            player: Player to watch

        Raises:
            PlayerConnectionException: If the initial snapshot cannot be read
        """
        self._player = player
        self._last_snapshot = player.fetch_snapshot()
        self._queue: deque[PlayerEvent] = deque()
        self._shut_down = False
        self._state = StreamState.WAITING

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def last_snapshot(self) -> Snapshot:
        return self._last_snapshot

    @property
    def pending(self) -> int:
        """Number of events queued but not yet consumed."""
        return len(self._queue)

    def __iter__(self) -> "PlayerEventStream":
        return self

    def __next__(self) -> PlayerEvent:
        while True:
            if self._state is StreamState.DONE:
                raise StopIteration

            if self._state is StreamState.QUEUED:
                return self._pop()

            # Player was already gone before blocking; no wait and no fetch.
            if not self._player.is_reachable():
                self._enqueue_shutdown()
                continue

            self._read_events()

    def _pop(self) -> PlayerEvent:
        event = self._queue.popleft()
        if not self._queue:
            self._state = StreamState.DONE if self._shut_down else StreamState.WAITING
        return event

    def _enqueue(self, events: list[PlayerEvent]) -> None:
        if events:
            self._queue.extend(events)
            self._state = StreamState.QUEUED

    def _enqueue_shutdown(self) -> None:
        log_with_context(
            logger,
            "info",
            "Player is no longer reachable",
            event_type="player_shut_down",
        )
        self._shut_down = True
        self._enqueue([PlayerShutDown()])

    def _read_events(self) -> None:
        """Run one diff step: wait, check liveness, fetch, compare."""
        self._player.wait_until_dirty()

        # Reachable before the wait, so the player went away while we blocked.
        if not self._player.is_reachable():
            self._enqueue_shutdown()
            return

        try:
            new_snapshot = self._player.fetch_snapshot()
        except PlayerConnectionException as e:
            log_with_context(
                logger,
                "warning",
                "Failed to fetch player snapshot",
                error=e.message,
                error_code=e.code.value,
                event_type="snapshot_fetch_failed",
            )
            raise

        events = diff_snapshots(self._last_snapshot, new_snapshot)
        if events:
            log_with_context(
                logger,
                "debug",
                "Detected player events",
                events=[event.kind for event in events],
                event_type="events_detected",
            )

        self._enqueue(events)
        self._last_snapshot = new_snapshot
