from __future__ import annotations

import re
from typing import List

_INT_PREFIX = re.compile(r"[+-]?\d+")


class TokenStream:
    """Whitespace tokenizer with forgiving extraction.

    Reading past the end, or reading a non-numeric token as an integer, puts
    the stream in a failed state; every later read then yields a default
    ("" or 0) instead of raising. Malformed commands therefore run with
    default-initialised fields.
    """

    def __init__(self, line: str) -> None:
        self._tokens = line.split()
        self._pos = 0
        self.failed = False

    def word(self) -> str:
        if self.failed or self._pos >= len(self._tokens):
            self.failed = True
            return ""
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def integer(self) -> int:
        token = self.word()
        if self.failed:
            return 0
        match = _INT_PREFIX.match(token)
        if match is None:
            self.failed = True
            return 0
        return int(match.group())

    def words(self, count: int) -> List[str]:
        """Up to count further tokens; stops early when the line runs out."""
        taken: List[str] = []
        for _ in range(max(0, count)):
            token = self.word()
            if self.failed:
                break
            taken.append(token)
        return taken

    def utterance(self, count: int) -> List[str]:
        """Exactly count words. Slots past the end of the line repeat the last word read."""
        spoken: List[str] = []
        last = ""
        for _ in range(max(0, count)):
            token = self.word()
            if not self.failed:
                last = token
            spoken.append(last)
        return spoken
