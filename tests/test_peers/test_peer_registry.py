"""Tests for the peer registry — kind lookup and lazy loading."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from peerlink.peers import available_peers, get_peer, register_peer, reset_registry
from peerlink.peers.base import UnknownPeerError
from peerlink.peers.console import ConsolePeer
from peerlink.peers.loopback import LoopbackPeer
from peerlink.peers.recording import RecordingPeer


@pytest.fixture(autouse=True)
def _reset_peer_registry():
    """Restore the built-in kinds around each test."""
    reset_registry()
    yield
    reset_registry()


class TestGetPeer:
    def test_console(self):
        assert isinstance(get_peer("console"), ConsolePeer)

    def test_stdout_alias(self):
        assert isinstance(get_peer("stdout"), ConsolePeer)

    def test_case_insensitive(self):
        assert isinstance(get_peer("Recording"), RecordingPeer)

    def test_kwargs_forwarded(self):
        peer = get_peer("recording", name="custom")
        assert peer.name == "custom"

    def test_fresh_instances(self):
        assert get_peer("recording") is not get_peer("recording")

    def test_loopback_returns_paired_end(self):
        peer = get_peer("loopback", name="near")
        assert isinstance(peer, LoopbackPeer)
        assert peer.name == "near"
        assert peer.other is not None

    def test_unknown_kind(self):
        with pytest.raises(UnknownPeerError) as info:
            get_peer("carrier-pigeon")
        assert info.value.peer == "carrier-pigeon"
        assert isinstance(info.value, LookupError)

    def test_uses_settings_default(self):
        """No argument → uses settings.peer."""
        with patch("peerlink.peers.registry.settings") as mock_settings:
            mock_settings.peer = "recording"
            peer = get_peer()
        assert isinstance(peer, RecordingPeer)


class TestRegistration:
    def test_available_peers(self):
        assert available_peers() == ["console", "loopback", "recording", "stdout"]

    def test_register_custom_kind(self):
        register_peer("Tape", "recording", "RecordingPeer")
        assert "tape" in available_peers()
        assert isinstance(get_peer("tape"), RecordingPeer)

    def test_missing_module(self):
        register_peer("broken", "does_not_exist", "Nothing")
        with pytest.raises(ImportError, match="peerlink.peers.does_not_exist"):
            get_peer("broken")

    def test_reset_drops_custom_kinds(self):
        register_peer("tape", "recording", "RecordingPeer")
        reset_registry()
        assert "tape" not in available_peers()
