"""Parse connector records from a WAN status device entry into typed models."""

from __future__ import annotations

import ipaddress
from typing import Any

from loguru import logger

from wanstat._util import as_mapping, get_i32, get_u32, str_or_none
from wanstat.exceptions import InvalidAddressError, MissingRequiredFieldError
from wanstat.models import (
    Connector,
    DHCPConnector,
    GenericConnector,
    IPAddress,
    IPInfo,
    WiFiClientConnector,
)

_ADDRESS_KEYS = ("ip_address", "netmask", "gateway")


def _parse_address(key: str, value: Any) -> IPAddress:
    if not isinstance(value, str):
        raise InvalidAddressError(key, value)
    try:
        return ipaddress.ip_address(value)
    except ValueError as e:
        raise InvalidAddressError(key, value) from e


def parse_ipinfo(contents: dict[str, Any]) -> IPInfo:
    """Parse an ``ipinfo`` object.

    Every string value is parsed as an IP address and stored under its key
    when the key is ``ip_address``, ``netmask`` or ``gateway``. An array value
    is the DNS server list. Missing addresses stay at ``0.0.0.0``.

    Raises:
        InvalidAddressError: a string value or DNS entry is not an IP address.
    """
    fields: dict[str, Any] = {}

    for key, value in contents.items():
        if isinstance(value, str):
            ip = _parse_address(key, value)
            if key in _ADDRESS_KEYS:
                fields[key] = ip
        elif isinstance(value, list):
            logger.debug(f"dns list {key}={value}")
            fields["dnslist"] = [_parse_address(key, v) for v in value]

    ipinfo = IPInfo(**fields)
    logger.debug(f"ipinfo={ipinfo}")
    return ipinfo


def parse_conn_ipinfo(conn: dict[str, Any]) -> IPInfo | None:
    """Return the connector's own ``ipinfo`` configuration, or ``None`` if it has none."""
    contents = as_mapping(conn.get("ipinfo"))
    if contents is None:
        return None
    return parse_ipinfo(contents)


def parse_connector(fields: dict[str, Any], conn: dict[str, Any]) -> Connector:
    """Classify one connector record by its ``name`` and build the matching model.

    Args:
        fields: The device entry the connector belongs to (for ``diagnostics``).
        conn: The connector record.

    Raises:
        MissingRequiredFieldError: ``enabled`` is not a boolean, or a
            ``WiFiClient`` connector's device has no ``diagnostics`` object.
    """
    name = str_or_none(conn, "name")
    state = str_or_none(conn, "state")

    enabled = conn.get("enabled")
    if not isinstance(enabled, bool):
        raise MissingRequiredFieldError("enabled", f"connector {name}: 'enabled' must be a boolean, got {enabled!r}")

    if name == "WiFiClient":
        diagnostics = as_mapping(fields.get("diagnostics"))
        if diagnostics is None:
            raise MissingRequiredFieldError("diagnostics", f"connector {name}: device has no diagnostics object")
        return WiFiClientConnector(
            name=name,
            enabled=enabled,
            state=state,
            ssid=str_or_none(diagnostics, "SSID"),
            signal_strength=get_i32(diagnostics.get("signal_strength")),
            channel=get_u32(diagnostics.get("channel")),
        )

    if name == "DHCP":
        logger.debug(f"{name} ipinfo get={conn.get('ipinfo')}")
        try:
            ipinfo = parse_conn_ipinfo(conn)
        except InvalidAddressError as e:
            logger.warning(f"connector {name}: ignoring ipinfo: {e}")
            ipinfo = None
        return DHCPConnector(name=name, enabled=enabled, state=state, ipinfo=ipinfo)

    return GenericConnector(name=name, enabled=enabled, state=state)


def get_connectors(fields: dict[str, Any]) -> list[Connector]:
    """Parse every connector of a device, in document order.

    Entries that are not JSON objects are skipped. A fatal error in any one
    connector propagates and discards the whole list for this device.
    """
    connectors = fields.get("connectors")
    if connectors is None:
        return []
    if not isinstance(connectors, list):
        logger.warning(f"connectors is not a list ({type(connectors).__name__}), ignoring")
        return []

    result: list[Connector] = []
    for entry in connectors:
        conn = as_mapping(entry)
        if conn is None:
            logger.debug(f"skipping non-object connector entry: {entry!r}")
            continue
        result.append(parse_connector(fields, conn))
    return result
