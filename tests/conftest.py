"""Shared fixtures for the snapclient test suite."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from loguru import logger

from snapclient.client import SnapRouteClient
from snapclient.config.settings import ClientSettings

# ── transport mocks ───────────────────────────────────────────────────


@pytest.fixture()
def mock_snaproute_transport():
    """MagicMock of SnapRouteTransport usable as a context manager."""
    transport = MagicMock()
    transport.__enter__.return_value = transport
    transport.get.return_value = {"Objects": []}
    transport.post.return_value = 200
    transport.patch.return_value = 200
    transport.delete.return_value = 200
    return transport


@pytest.fixture()
def settings():
    return ClientSettings(host="10.0.0.1", port=8080)


@pytest.fixture()
def client(settings, mock_snaproute_transport):
    """SnapRouteClient whose every operation gets ``mock_snaproute_transport``."""
    factory = MagicMock(return_value=mock_snaproute_transport)
    return SnapRouteClient(settings, transport_factory=factory)


# ── logging ───────────────────────────────────────────────────────────


@pytest.fixture()
def log_messages():
    """Collect loguru messages emitted by the package while the test runs."""
    messages: list[str] = []
    logger.enable("snapclient")
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("snapclient")


# ── config files ──────────────────────────────────────────────────────


@pytest.fixture()
def write_config(tmp_path):
    """Factory fixture writing YAML text to a file and returning its path."""

    def _write(text: str, name: str = "config.yml"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


SAMPLE_CONFIG = """\
ports:
  - name: fpPort1
    mode: 4x10G
  - name: fpPort2
    speed: 10000
  - name: fpPort3
    mode: 1x40G
    speed: 40000
vlans:
  - id: 100
    ports: fpPort2
interfaces:
  - vlan_id: 100
    addr: 10.0.100.1/24
"""


@pytest.fixture()
def sample_config_path(write_config):
    return write_config(SAMPLE_CONFIG)
