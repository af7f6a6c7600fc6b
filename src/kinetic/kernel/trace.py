"""Runtime trace infrastructure - separate from behaviors and drawings.

The frame runner records what it did (frame begun, frame drawn, frame
failed) into a Trace. Behaviors themselves never see the trace: sampling
stays pure, only the host layer writes here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single runtime event.

    Parent links are plain ids; the tree is only rebuilt on demand via
    Trace.as_tree().
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Event log for one frame loop.

    The runner opens a frame with ``record("frame_begin")`` and makes it the
    current frame with ``push``; events recorded while a frame is open hang
    under it unless they name another parent. ``pop`` closes the frame.

    A disabled trace accepts every call and keeps nothing.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._open_frames: list[int] = []

    def push(self, frame_id: int) -> None:
        """Open ``frame_id`` as the current frame."""
        self._open_frames.append(frame_id)

    def pop(self) -> int | None:
        """Close the current frame and return its id, if one is open."""
        return self._open_frames.pop() if self._open_frames else None

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Append an event and return its id.

        Ids count up from zero in recording order. Without an explicit
        ``parent_id`` the event belongs to the innermost open frame.
        Returns None, and records nothing, when the trace is disabled.
        """
        if not self.enabled:
            return None

        if parent_id is None and self._open_frames:
            parent_id = self._open_frames[-1]

        event = Evidence(
            action=action,
            id=len(self._events),
            parent_id=parent_id,
            info=dict(info) if info else {},
            duration_ms=duration_ms,
        )
        self._events.append(event)
        return event.id

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find_all(self, action: str) -> list[Evidence]:
        """Events recorded under ``action``, oldest first."""
        return [ev for ev in self._events if ev.action == action]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Group event ids by parent id; top-level frames sit under None."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Forget every event and open frame so the trace can be reused."""
        self._events.clear()
        self._open_frames.clear()
