"""Tests for wanstat.report device walking and report rendering."""

from __future__ import annotations

import pytest

from wanstat.exceptions import MissingRequiredFieldError, UpstreamFailureError
from wanstat.formatters import CONNECTOR_HEADER, SUMMARY_HEADER
from wanstat.models import DHCPConnector, GenericConnector, WiFiClientConnector
from wanstat.report import WanStatusReport, connector_rows, summarize_device


class TestSummarizeDevice:
    """Tests for summarize_device."""

    def test_full_device(self):
        fields = {
            "info": {"type": "wwan"},
            "status": {"plugged": True, "reason": "up", "summary": "connected"},
        }

        row = summarize_device("wwan-1", fields)

        assert row.name == "wwan-1"
        assert row.type == "wwan"
        assert row.plugged == "true"
        assert row.reason == "up"
        assert row.summary == "connected"

    def test_plugged_raw_json_text(self):
        assert summarize_device("d", {"status": {"plugged": None}}).plugged == "null"
        assert summarize_device("d", {"status": {"plugged": "yes"}}).plugged == '"yes"'

    def test_plugged_compact_json(self):
        row = summarize_device("d", {"status": {"plugged": {"a": [1, 2]}}})
        assert row.plugged == '{"a":[1,2]}'

    def test_missing_info_and_status(self):
        row = summarize_device("d", {})

        assert row.type == "(none)"
        assert row.plugged == "(none)"
        assert row.reason == "(none)"
        assert row.summary == "(none)"


class TestConnectorRows:
    """Tests for connector_rows."""

    def test_rows_from_raw_records(self):
        fields = {"connectors": [{"name": "DHCP", "state": "connected", "timeout": "30"}, 7]}

        rows = connector_rows(fields)

        assert len(rows) == 1
        assert rows[0].name == "DHCP"
        assert rows[0].exception == "(none)"
        assert rows[0].timeout == "30"

    def test_rows_do_not_need_enabled(self):
        """The raw table reads records regardless of whether they parse."""
        assert len(connector_rows({"connectors": [{"name": "Broken"}]})) == 1

    def test_no_connectors(self):
        assert connector_rows({}) is None

    def test_empty_list(self):
        assert connector_rows({"connectors": []}) is None

    def test_only_non_objects(self):
        assert connector_rows({"connectors": [1, "x"]}) == []


class TestWanStatusReport:
    """Tests for WanStatusReport."""

    def test_unsuccessful_transaction(self, sample_document):
        output = WanStatusReport(sample_document(success=False)).render()

        assert output.splitlines() == ["success=false", "transaction failed"]

    def test_missing_success_is_failure(self, sample_document):
        document = sample_document()
        del document["success"]

        output = WanStatusReport(document).render()

        assert output.splitlines() == ["success=null", "transaction failed"]

    def test_missing_devices_raises(self):
        with pytest.raises(UpstreamFailureError):
            WanStatusReport({"success": True, "data": {}}).render()

    def test_devices_sorted_by_default(self, sample_document):
        names = [name for name, _ in WanStatusReport(sample_document()).devices()]
        assert names == ["ethernet-wan", "mdm-1", "wwan-1"]

    def test_devices_document_order(self, sample_document):
        names = [name for name, _ in WanStatusReport(sample_document(), sort_devices=False).devices()]
        assert names == ["mdm-1", "wwan-1", "ethernet-wan"]

    def test_non_object_device_skipped(self, sample_document):
        document = sample_document()
        document["data"]["devices"]["bogus"] = ["not", "a", "device"]

        names = [name for name, _ in WanStatusReport(document).devices()]

        assert "bogus" not in names

    def test_render(self, sample_document):
        lines = WanStatusReport(sample_document()).render().splitlines()

        assert lines[0] == "success=true"
        assert lines[1] == SUMMARY_HEADER
        assert lines[2] == f"{'ethernet-wan':>40} ethernet   true    up         connected"
        assert lines[3] == f"{'mdm-1':>40} mdm        false   unplugged  not plugged"
        assert lines[4] == f"{'wwan-1':>40} wwan       true    up         connected"

        assert lines[5:] == [
            "",
            "connectors for ethernet-wan",
            CONNECTOR_HEADER,
            f"{'Ethernet':>40}  {'idle':<15} {'link down':<10} {'(none)':<10}",
            "c=Ethernet false idle",
            "",
            "connectors for wwan-1",
            CONNECTOR_HEADER,
            f"{'WiFiClient':>40}  {'connected':<15} {'(none)':<10} {'(none)':<10}",
            f"{'DHCP':>40}  {'connected':<15} {'(none)':<10} {'30':<10}",
            'c=WiFiClient true connected "HomeNet" rssi=-61 channel=36',
            "c=DHCP true connected ipinfo=ip=172.16.253.42 sm=255.255.255.0 gw=172.16.253.1 "
            "dns=[172.16.253.1,8.8.8.8]",
        ]

    def test_table_for_list_of_non_objects(self):
        document = {"success": True, "data": {"devices": {"d": {"connectors": [1, "x"]}}}}

        lines = WanStatusReport(document).render().splitlines()

        assert lines[-3:] == ["", "connectors for d", CONNECTOR_HEADER]

    def test_no_table_for_empty_list(self):
        document = {"success": True, "data": {"devices": {"d": {"connectors": []}}}}

        output = WanStatusReport(document).render()

        assert "connectors for d" not in output

    def test_summary_pass_precedes_connectors(self, sample_document):
        output = WanStatusReport(sample_document()).render()

        assert output.index("wwan       true") < output.index("connectors for ethernet-wan")

    def test_parse_error_isolated_to_device(self, sample_document):
        document = sample_document()
        del document["data"]["devices"]["wwan-1"]["diagnostics"]

        lines = WanStatusReport(document).render().splitlines()

        assert "c=Ethernet false idle" in lines
        errors = [line for line in lines if line.startswith("error:")]
        assert len(errors) == 1
        assert errors[0].startswith("error: connectors for wwan-1:")
        assert not any(line.startswith("c=WiFiClient") or line.startswith("c=DHCP") for line in lines)

    def test_strict_raises(self, sample_document):
        document = sample_document()
        del document["data"]["devices"]["wwan-1"]["connectors"][1]["enabled"]

        with pytest.raises(MissingRequiredFieldError):
            WanStatusReport(document, strict=True).render()

    def test_parsed_devices(self, sample_document):
        parsed = WanStatusReport(sample_document()).parsed_devices()

        assert list(parsed) == ["ethernet-wan", "mdm-1", "wwan-1"]
        assert parsed["mdm-1"] == []
        assert isinstance(parsed["ethernet-wan"][0], GenericConnector)
        assert isinstance(parsed["wwan-1"][0], WiFiClientConnector)
        assert isinstance(parsed["wwan-1"][1], DHCPConnector)

    def test_parsed_devices_drops_failed_device(self, sample_document):
        document = sample_document()
        del document["data"]["devices"]["wwan-1"]["diagnostics"]

        parsed = WanStatusReport(document).parsed_devices()

        assert "wwan-1" not in parsed
        assert "ethernet-wan" in parsed
