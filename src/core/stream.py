"""Text streaming with batching."""

from collections.abc import Generator, Iterable
from dataclasses import dataclass, field


@dataclass
class TokenBatcher:
    """Batches tokens for efficient streaming."""

    batch_size: int = 20
    _buffer: str = field(default="", init=False, repr=False)

    def add(self, token: str) -> str | None:
        """Add token to buffer, return batch if ready."""
        self._buffer += token
        if len(self._buffer) >= self.batch_size:
            batch_result = self._buffer
            self._buffer = ""
            return batch_result
        return None

    def flush(self) -> str | None:
        """Return remaining buffer contents."""
        if self._buffer:
            batch_result = self._buffer
            self._buffer = ""
            return batch_result
        return None


def batch_tokens_sync(stream: Iterable[str], batch_size: int = 20) -> Generator[str, None, None]:
    """
    Batch tokens from a sync stream.

    Args:
        stream: Token iterable (a plain string streams character by character)
        batch_size: Minimum characters per batch

    Yields:
        Batched tokens
    """
    batcher = TokenBatcher(batch_size=batch_size)

    for token in stream:
        if batch_result := batcher.add(token):
            yield batch_result

    if final := batcher.flush():
        yield final
