"""Pytest configuration and shared fixtures."""

from collections import deque

import pytest

from player_events.models import LoopStatus, Metadata, PlaybackStatus, Snapshot


class FakePlayer:
    """Scripted player implementing PlayerProtocol.

    ``fetch_snapshot`` returns (or raises) the scripted results in order.
    Every call is recorded in ``calls`` so tests can check what the stream
    did between two events.
    """

    def __init__(self, *fetch_results: Snapshot | Exception, running: bool = True):
        self.fetch_results = deque(fetch_results)
        self.running = running
        self.shut_down_on_wait: int | None = None
        self.calls: list[str] = []

    @property
    def wait_calls(self) -> int:
        return self.calls.count("wait")

    @property
    def fetch_calls(self) -> int:
        return self.calls.count("fetch")

    def fetch_snapshot(self) -> Snapshot:
        self.calls.append("fetch")
        if not self.fetch_results:
            raise AssertionError("fetch_snapshot called with no scripted result left")
        result = self.fetch_results.popleft()
        if isinstance(result, Exception):
            raise result
        return result

    def is_reachable(self) -> bool:
        self.calls.append("is_reachable")
        return self.running

    def wait_until_dirty(self) -> None:
        self.calls.append("wait")
        if self.shut_down_on_wait is not None and self.wait_calls >= self.shut_down_on_wait:
            self.running = False


@pytest.fixture
def make_player():
    """Factory for scripted fake players."""
    return FakePlayer


@pytest.fixture
def base_metadata():
    """Metadata of the track playing at the start of a test."""
    return Metadata(
        track_id="/org/mpris/MediaPlayer2/Track/1",
        title="First Song",
        album_name="Test Album",
        artists=["Test Artist"],
        length_us=240_000_000,
        rest={"xesam:comment": ["first"]},
    )


@pytest.fixture
def base_snapshot(base_metadata):
    """Snapshot of a player playing the first track."""
    return Snapshot(
        playback_status=PlaybackStatus.PLAYING,
        loop_status=LoopStatus.NONE,
        shuffle=False,
        volume=0.5,
        playback_rate=1.0,
        metadata=base_metadata,
    )


@pytest.fixture
def mpris_properties():
    """Raw MPRIS player properties as a D-Bus binding would return them."""
    return {
        "PlaybackStatus": "Paused",
        "LoopStatus": "Playlist",
        "Shuffle": True,
        "Volume": 0.8,
        "Rate": 1.0,
        "Position": 12_000_000,
        "Metadata": {
            "mpris:trackid": "/org/mpris/MediaPlayer2/Track/42",
            "mpris:length": 180_000_000,
            "mpris:artUrl": "https://example.com/cover.jpg",
            "xesam:title": "Test Song",
            "xesam:album": "Test Album",
            "xesam:artist": ["Test Artist"],
            "xesam:albumArtist": "Album Artist",
            "xesam:trackNumber": 3,
            "xesam:discNumber": 1,
            "xesam:url": "file:///music/test.flac",
            "xesam:genre": ["Rock"],
            "xesam:comment": ["nice"],
        },
    }
