"""Extensions over ProtocolChannel, kept as free functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from peerlink.config import settings

if TYPE_CHECKING:
    from peerlink.protocol import ProtocolChannel


def send_text(channel: ProtocolChannel, text: str, encoding: str | None = None) -> None:
    channel.send(text.encode(encoding or settings.encoding))


def receive_text(channel: ProtocolChannel, text: str, encoding: str | None = None) -> None:
    channel.receive(text.encode(encoding or settings.encoding))


def send_chunked(channel: ProtocolChannel, data: bytes, size: int | None = None) -> int:
    """Send ``data`` as consecutive slices of at most ``size`` bytes.

    Returns the number of send calls made. A failing slice propagates and
    the remaining slices are not sent.
    """
    size = settings.chunk_size if size is None else size
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    count = 0
    for i in range(0, len(data), size):
        channel.send(data[i : i + size])
        count += 1
    return count
