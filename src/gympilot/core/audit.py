"""Append-only action log recording every administrative event at the gym."""

from collections.abc import Iterator

from gympilot.core.logging import get_logger

logger = get_logger(__name__)


class ActionLog:
    """Ordered audit trail of human-readable event lines.

    Lines can only be appended; readers get immutable snapshots.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []

    def append(self, entry: str) -> None:
        self._entries.append(entry)
        logger.debug("gym.action", entry=entry, position=len(self._entries))

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry: object) -> bool:
        return entry in self._entries

    def __getitem__(self, index: int) -> str:
        return self._entries[index]
