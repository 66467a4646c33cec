"""Line-boundary splitting of flat text into size-bounded chunks."""

from __future__ import annotations

from loguru import logger

from retrobot.config.schema import DEFAULT_MAX_CHUNK_SIZE, InvalidConfiguration


def chunk_lines(text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[str]:
    """Split *text* into chunks of at most *max_chunk_size* characters.

    Lines are packed greedily and never split; a line longer than the limit
    becomes a chunk of its own. Every chunk holds at least one non-blank line:
    blank lines left over at a split point are dropped, since they would
    otherwise form a chunk Slack rejects. Apart from those,
    ``"\\n".join(chunks)`` reproduces *text*.
    """
    if max_chunk_size <= 0:
        raise InvalidConfiguration(f"max_chunk_size must be positive, got {max_chunk_size}")

    chunks: list[str] = []
    current: list[str] = []
    size = 0

    def flush(lines: list[str]) -> None:
        chunk = "\n".join(lines)
        if chunk.strip():
            chunks.append(chunk)
        elif chunk:
            logger.debug(f"Dropping {len(lines)} blank line(s) at chunk boundary")

    for line in text.split("\n"):
        # +1 for the newline joining it to the current chunk
        if current and size + 1 + len(line) > max_chunk_size:
            flush(current)
            current, size = [], 0
        if len(line) > max_chunk_size:
            logger.warning(
                f"Line of {len(line)} chars exceeds chunk limit {max_chunk_size}, "
                "emitting it oversized"
            )
        size += len(line) + (1 if current else 0)
        current.append(line)

    flush(current)
    logger.debug(f"Split {len(text)} chars into {len(chunks)} chunk(s)")
    return chunks
