from __future__ import annotations

import logging
from typing import List, Optional, TextIO

from hearthtale.exceptions import NarrationSinkError

logger = logging.getLogger(__name__)


class Narrator:
    """Append-only event log for every state change or rejected action.

    Each event is written to the sink as one line and kept in memory for the
    lifetime of the narrator so callers can inspect what happened.

    The sink is owned by the narrator only when it was opened through open();
    close() then closes the underlying file exactly once.
    """

    def __init__(self, stream: TextIO, *, owns_stream: bool = False) -> None:
        self._stream: Optional[TextIO] = stream
        self._owns_stream = owns_stream
        self._events: List[str] = []

    @classmethod
    def open(cls, path: str) -> "Narrator":
        """Open a file-backed narrator, truncating any previous log at path."""
        try:
            stream = open(path, "w", encoding="utf-8")
        except OSError as exc:
            raise NarrationSinkError(f"Failed to open log file {path}: {exc}") from exc
        logger.info("Narration sink opened: %s", path)
        return cls(stream, owns_stream=True)

    @property
    def closed(self) -> bool:
        return self._stream is None

    def log_event(self, event: str) -> None:
        if self._stream is None:
            raise NarrationSinkError("Narration sink is closed")
        self._stream.write(event + "\n")
        self._stream.flush()
        self._events.append(event)
        logger.debug("Narrated: %s", event)

    def events(self) -> List[str]:
        return list(self._events)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._events)

    def close(self) -> None:
        if self._stream is None:
            return
        self._stream.flush()
        if self._owns_stream:
            self._stream.close()
            logger.info("Narration sink closed after %d events", len(self._events))
        self._stream = None

    def __enter__(self) -> "Narrator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
