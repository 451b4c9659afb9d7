from __future__ import annotations

import sys
from typing import Optional, TextIO


class Console:
    """Human-facing narration: arrivals, flavor text, dialogue and listings."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so a patched sys.stdout is honored
        return self._stream if self._stream is not None else sys.stdout

    def say(self, line: str) -> None:
        self.stream.write(line + "\n")
