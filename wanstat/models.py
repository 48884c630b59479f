"""Pydantic models for WAN status devices and connectors."""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from wanstat._util import NONE

IPAddress = Union[IPv4Address, IPv6Address]

UNSPECIFIED = IPv4Address("0.0.0.0")


class IPInfo(BaseModel):
    """Address configuration of a connector (``ipinfo`` sub-object)."""

    ip_address: IPAddress = UNSPECIFIED
    netmask: IPAddress = UNSPECIFIED
    gateway: IPAddress = UNSPECIFIED
    dnslist: list[IPAddress] = Field(default_factory=list)

    def __str__(self) -> str:
        dns = ",".join(str(ip) for ip in self.dnslist)
        return f"ip={self.ip_address} sm={self.netmask} gw={self.gateway} dns=[{dns}]"


class GenericConnector(BaseModel):
    """Connector we have no dedicated parser for."""

    kind: Literal["generic"] = "generic"
    name: str = NONE
    enabled: bool
    state: str = NONE


class WiFiClientConnector(BaseModel):
    """WiFi client association; radio details come from the device diagnostics."""

    kind: Literal["wificlient"] = "wificlient"
    name: str = NONE
    enabled: bool
    state: str = NONE
    ssid: str = NONE
    signal_strength: int | None = None
    channel: int | None = None


class DHCPConnector(BaseModel):
    """DHCP lease with its (optional) address configuration."""

    kind: Literal["dhcp"] = "dhcp"
    name: str = NONE
    enabled: bool
    state: str = NONE
    ipinfo: IPInfo | None = None


Connector = Annotated[
    Union[GenericConnector, WiFiClientConnector, DHCPConnector],
    Field(discriminator="kind"),
]


class DeviceSummary(BaseModel):
    """One row of the device summary table."""

    name: str
    type: str = NONE
    plugged: str = NONE
    reason: str = NONE
    summary: str = NONE


class ConnectorRow(BaseModel):
    """One row of the raw connector table, read straight from the connector record."""

    name: str = NONE
    state: str = NONE
    exception: str = NONE
    timeout: str = NONE
