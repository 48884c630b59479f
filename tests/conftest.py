"""Shared fixtures for the wanstat test suite."""

from __future__ import annotations

import copy

import pytest

# ── connector records ─────────────────────────────────────────────────


@pytest.fixture()
def sample_ipinfo():
    """Factory fixture returning a raw ``ipinfo`` object."""

    def _make(**overrides):
        defaults = {
            "gateway": "192.168.1.1",
            "ip_address": "192.168.1.9",
            "netmask": "255.255.255.0",
            "dnslist": ["192.168.1.1"],
        }
        defaults.update(overrides)
        return defaults

    return _make


@pytest.fixture()
def sample_dhcp_connector(sample_ipinfo):
    """Factory fixture returning a raw DHCP connector record."""

    def _make(**overrides):
        defaults = {
            "name": "DHCP",
            "enabled": True,
            "traits": ["ip"],
            "state": "connected",
            "ipinfo": sample_ipinfo(),
            "ip6info": None,
            "exception": None,
            "timeout": None,
            "dhclient_state": "STARTED",
        }
        defaults.update(overrides)
        return defaults

    return _make


# ── status documents ──────────────────────────────────────────────────


_DOCUMENT = {
    "success": True,
    "data": {
        "devices": {
            "mdm-1": {
                "info": {"type": "mdm"},
                "status": {"plugged": False, "reason": "unplugged", "summary": "not plugged"},
            },
            "wwan-1": {
                "info": {"type": "wwan"},
                "status": {"plugged": True, "reason": "up", "summary": "connected"},
                "diagnostics": {"SSID": "HomeNet", "signal_strength": -61, "channel": 36},
                "connectors": [
                    {"name": "WiFiClient", "enabled": True, "state": "connected", "exception": None},
                    {
                        "name": "DHCP",
                        "enabled": True,
                        "state": "connected",
                        "timeout": "30",
                        "ipinfo": {
                            "gateway": "172.16.253.1",
                            "ip_address": "172.16.253.42",
                            "netmask": "255.255.255.0",
                            "dnslist": ["172.16.253.1", "8.8.8.8"],
                        },
                    },
                ],
            },
            "ethernet-wan": {
                "info": {"type": "ethernet"},
                "status": {"plugged": True, "reason": "up", "summary": "connected"},
                "connectors": [
                    {"name": "Ethernet", "enabled": False, "state": "idle", "exception": "link down"},
                    "garbage",
                ],
            },
        }
    },
}


@pytest.fixture()
def sample_document():
    """Factory fixture returning a deep copy of a realistic status document."""

    def _make(**overrides):
        document = copy.deepcopy(_DOCUMENT)
        document.update(overrides)
        return document

    return _make
