"""Peer routing — map a kind name to a lazily imported peer factory."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any

from peerlink.config import settings
from peerlink.peers.base import UnknownPeerError

if TYPE_CHECKING:
    from peerlink.peers.base import Peer

log = logging.getLogger(__name__)

# Kind → (module path relative to peerlink.peers, factory name)
_BUILTIN_PEERS: dict[str, tuple[str, str]] = {
    "console": ("console", "ConsolePeer"),
    "stdout": ("console", "ConsolePeer"),
    "recording": ("recording", "RecordingPeer"),
    "loopback": ("loopback", "open_loopback"),
}

_PEER_MAP: dict[str, tuple[str, str]] = dict(_BUILTIN_PEERS)


def register_peer(kind: str, module_name: str, class_name: str) -> None:
    """Add or replace the factory behind ``kind``."""
    _PEER_MAP[kind.lower()] = (module_name, class_name)


def available_peers() -> list[str]:
    return sorted(_PEER_MAP)


def _load_factory(kind: str) -> Any:
    """Lazy-import the module for a kind and return its factory."""
    module_name, class_name = _PEER_MAP[kind]
    try:
        mod = importlib.import_module(f"peerlink.peers.{module_name}")
    except ImportError as exc:
        raise ImportError(
            f"Peer '{kind}' needs module 'peerlink.peers.{module_name}', which failed to import"
        ) from exc
    factory = getattr(mod, class_name)
    log.info("Loaded peer: %s (%s)", class_name, kind)
    return factory


def get_peer(kind: str | None = None, **kwargs: Any) -> Peer:
    """Build a new peer of the given kind.

    No kind → uses settings.peer. Keyword arguments go to the peer factory.
    """
    kind = (kind or settings.peer).lower()
    if kind not in _PEER_MAP:
        raise UnknownPeerError(
            f"Unknown peer kind '{kind}' (available: {', '.join(available_peers())})",
            peer=kind,
        )
    return _load_factory(kind)(**kwargs)


def reset_registry() -> None:
    """Restore the built-in kinds (useful for testing)."""
    _PEER_MAP.clear()
    _PEER_MAP.update(_BUILTIN_PEERS)
