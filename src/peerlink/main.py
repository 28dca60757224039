"""peerlink entry point — wraps the configured peer and sends the greeting."""

from __future__ import annotations

import logging
import sys

from peerlink.config import settings
from peerlink.helpers import send_text
from peerlink.peers.base import PeerError
from peerlink.peers.registry import get_peer
from peerlink.protocol import ProtocolChannel

log = logging.getLogger("peerlink")


def run() -> None:
    peer = get_peer(settings.peer, name=settings.peer_name)
    channel = ProtocolChannel(peer)
    log.info("Channel ready: %r", channel)
    try:
        send_text(channel, settings.greeting)
    finally:
        close = getattr(peer, "close", None)
        if close is not None:
            close()


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-7s %(name)s — %(message)s",
    )
    try:
        run()
    except PeerError:
        log.exception("Peer failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
