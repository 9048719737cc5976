"""Incremental NDJSON line splitting.

Chunks arrive with arbitrary boundaries: a JSON line, or even a multi-byte
UTF-8 character inside it, can be split across two reads. The buffer keeps
the unfinished tail until the next chunk completes it.
"""

import codecs
import logging

logger = logging.getLogger(__name__)


class NdjsonLineBuffer:
    """Growable text buffer that emits complete, non-blank lines."""

    def __init__(self, encoding: str = "utf-8"):
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Text received after the last newline."""
        return self._buffer

    def feed(self, chunk: bytes | str) -> list[str]:
        """Append a chunk and return every line it completed."""
        if isinstance(chunk, bytes):
            chunk = self._decoder.decode(chunk)
        self._buffer += chunk

        pieces = self._buffer.split("\n")
        self._buffer = pieces.pop()
        return [line for line in pieces if line.strip()]

    def close(self) -> str:
        """Flush the decoder at end of stream and return the dropped tail.

        A tail without a terminating newline is never parsed.
        """
        self._buffer += self._decoder.decode(b"", final=True)
        tail, self._buffer = self._buffer, ""
        if tail.strip():
            logger.warning(f"Discarding unterminated trailing line ({len(tail)} chars)")
        return tail
