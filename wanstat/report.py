"""Walk the devices of a WAN status document and build the text report."""

from __future__ import annotations

from typing import Any

from loguru import logger

from wanstat._util import NONE, as_mapping, json_text, str_or_none
from wanstat.exceptions import ParseError, UpstreamFailureError
from wanstat.formatters import format_connector, format_connector_table, format_summary_table
from wanstat.models import Connector, ConnectorRow, DeviceSummary
from wanstat.parser import get_connectors


def summarize_device(name: str, fields: dict[str, Any]) -> DeviceSummary:
    """Build the summary row for one device; absent ``info``/``status`` read as empty."""
    info = as_mapping(fields.get("info")) or {}
    status = as_mapping(fields.get("status")) or {}

    plugged = json_text(status["plugged"]) if "plugged" in status else NONE

    return DeviceSummary(
        name=name,
        type=str_or_none(info, "type"),
        plugged=plugged,
        reason=str_or_none(status, "reason"),
        summary=str_or_none(status, "summary"),
    )


def connector_rows(fields: dict[str, Any]) -> list[ConnectorRow] | None:
    """Raw connector table rows, independent of connector typing.

    ``None`` when the device has no non-empty connector list. A list holding
    only non-object entries gives no rows but still gets a table.
    """
    connectors = fields.get("connectors")
    if not isinstance(connectors, list) or not connectors:
        return None

    rows: list[ConnectorRow] = []
    for entry in connectors:
        conn = as_mapping(entry)
        if conn is None:
            continue
        rows.append(
            ConnectorRow(
                name=str_or_none(conn, "name"),
                state=str_or_none(conn, "state"),
                exception=str_or_none(conn, "exception"),
                timeout=str_or_none(conn, "timeout"),
            )
        )
    return rows


class WanStatusReport:
    """Render a ``/api/status/wan`` response document.

    The report makes two passes over the devices: the summary table first,
    then per device the raw connector table followed by the parsed
    connectors. A parse error in one device's connectors replaces that
    device's parsed lines with an error line unless ``strict`` is set, in
    which case it is raised.
    """

    def __init__(self, document: dict[str, Any], strict: bool = False, sort_devices: bool = True) -> None:
        self.document = document
        self.strict = strict
        self.sort_devices = sort_devices

    @property
    def success(self) -> bool:
        return self.document.get("success") is True

    def devices(self) -> list[tuple[str, dict[str, Any]]]:
        """Device entries as ``(name, fields)`` pairs; non-object entries are skipped.

        Raises:
            UpstreamFailureError: the document has no ``data.devices`` object.
        """
        data = as_mapping(self.document.get("data"))
        devices = as_mapping(data.get("devices")) if data is not None else None
        if devices is None:
            raise UpstreamFailureError("response has no data.devices object")

        names = sorted(devices) if self.sort_devices else list(devices)
        result: list[tuple[str, dict[str, Any]]] = []
        for name in names:
            fields = as_mapping(devices[name])
            if fields is None:
                logger.warning(f"device {name} is not an object, skipping")
                continue
            result.append((name, fields))
        return result

    def parsed_devices(self) -> dict[str, list[Connector]]:
        """Parsed connectors per device; devices whose connectors fail to parse are left out."""
        parsed: dict[str, list[Connector]] = {}
        for name, fields in self.devices():
            try:
                parsed[name] = get_connectors(fields)
            except ParseError as e:
                if self.strict:
                    raise
                logger.error(f"connectors for {name}: {e}")
        return parsed

    def render(self) -> str:
        """Return the complete report as a string."""
        lines: list[str] = [f"success={json_text(self.document.get('success'))}"]

        if not self.success:
            logger.warning("router reported an unsuccessful transaction")
            lines.append("transaction failed")
            return "\n".join(lines)

        devices = self.devices()

        lines.extend(format_summary_table([summarize_device(name, fields) for name, fields in devices]))

        for name, fields in devices:
            lines.extend(format_connector_table(name, connector_rows(fields)))
            try:
                connectors = get_connectors(fields)
            except ParseError as e:
                if self.strict:
                    raise
                logger.error(f"connectors for {name}: {e}")
                lines.append(f"error: connectors for {name}: {e}")
                continue
            lines.extend(f"c={format_connector(c)}" for c in connectors)

        return "\n".join(lines)
