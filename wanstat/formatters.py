"""Fixed-width terminal rendering of devices and connectors."""

from __future__ import annotations

from pydantic import TypeAdapter

from wanstat._util import optional_str
from wanstat.models import (
    Connector,
    ConnectorRow,
    DeviceSummary,
    DHCPConnector,
    GenericConnector,
    WiFiClientConnector,
)

SUMMARY_HEADER = f"{'NAME':>40} {'TYPE':<10} {'PLUGGED':<7} {'REASON':<10} SUMMARY"
CONNECTOR_HEADER = f"{'NAME':>40}  {'STATE':<15} {'EXCEPTION':<10} TIMEOUT  "

_devices_adapter = TypeAdapter(dict[str, list[Connector]])


def format_summary_row(row: DeviceSummary) -> str:
    return f"{row.name:>40} {row.type:<10} {row.plugged:<7} {row.reason:<10} {row.summary}"


def format_connector_row(row: ConnectorRow) -> str:
    return f"{row.name:>40}  {row.state:<15} {row.exception:<10} {row.timeout:<10}"


def format_summary_table(rows: list[DeviceSummary]) -> list[str]:
    """Header plus one line per device."""
    return [SUMMARY_HEADER] + [format_summary_row(r) for r in rows]


def format_connector_table(device: str, rows: list[ConnectorRow] | None) -> list[str]:
    """Banner, header and one line per raw connector record; nothing when ``rows`` is None."""
    if rows is None:
        return []
    lines = ["", f"connectors for {device}", CONNECTOR_HEADER]
    lines.extend(format_connector_row(r) for r in rows)
    return lines


def format_connector(connector: Connector) -> str:
    """One-line, variant-specific rendering of a parsed connector."""
    enabled = "true" if connector.enabled else "false"
    head = f"{connector.name} {enabled} {connector.state}"

    if isinstance(connector, WiFiClientConnector):
        rssi = optional_str(connector.signal_strength)
        channel = optional_str(connector.channel)
        return f'{head} "{connector.ssid}" rssi={rssi} channel={channel}'
    if isinstance(connector, DHCPConnector):
        ipinfo = "<none>" if connector.ipinfo is None else str(connector.ipinfo)
        return f"{head} ipinfo={ipinfo}"
    if isinstance(connector, GenericConnector):
        return head
    raise TypeError(f"unknown connector type: {type(connector).__name__}")


def format_json(devices: dict[str, list[Connector]]) -> str:
    """Dump parsed connectors per device as indented JSON."""
    return _devices_adapter.dump_json(devices, indent=2).decode()
