"""Protocol definitions for the player collaborator."""

from typing import Protocol

from player_events.models.snapshot import Snapshot


class PlayerProtocol(Protocol):
    """Protocol for a remote media player watched by an event stream.

    Implementations own the inter-process connection. Any transport-level
    retry belongs here, not in the stream.
    """

    def fetch_snapshot(self) -> Snapshot:
        """Read the player's current state.

        Returns:
            Snapshot of every diff-tracked attribute

        Raises:
            PlayerConnectionException: If the state could not be read
        """
        ...

    def is_reachable(self) -> bool:
        """Return whether the player is still running on the bus."""
        ...

    def wait_until_dirty(self) -> None:
        """Block until the player signals that something may have changed.

        May return without any actual change.
        """
        ...
