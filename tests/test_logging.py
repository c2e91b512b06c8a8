"""
Tests for structured logging
============================
"""

import json
import logging

import httpx
import pytest
import structlog

from wa_template_core.logging import setup_logging
from wa_template_core.whatsapp.sender import send_diagnostic_mkt_template

from .helpers import RecordingTransport


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def _json_lines(out):
    return [json.loads(line) for line in out.strip().splitlines() if line.strip()]


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_setup_logging(self, restore_logging):
        """Should install one structlog-formatted handler at the requested level."""
        root = setup_logging(service_name="diagnostic-campaign", level="debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_stdlib_records_rendered_as_json(self, restore_logging, capsys):
        """Plain stdlib loggers should share the JSON output and service name."""
        setup_logging(service_name="diagnostic-campaign")

        logging.getLogger("campaign").info("batch started")

        entry = _json_lines(capsys.readouterr().out)[-1]
        assert entry["event"] == "batch started"
        assert entry["level"] == "info"
        assert entry["logger"] == "campaign"
        assert entry["service"] == "diagnostic-campaign"

    @pytest.mark.asyncio
    async def test_sender_events_rendered(self, restore_logging, capsys, send_kwargs):
        """Sender debug events should come out as JSON without the access token."""
        setup_logging(service_name="diagnostic-campaign", level="DEBUG")

        async with httpx.AsyncClient(transport=RecordingTransport()) as client:
            await send_diagnostic_mkt_template(client, **send_kwargs)

        out = capsys.readouterr().out
        entries = [
            e for e in _json_lines(out)
            if e.get("logger") == "wa_template_core.whatsapp.sender"
        ]
        assert [e["event"] for e in entries] == [
            "Sending WhatsApp template",
            "WhatsApp template response",
        ]
        assert entries[0]["template"] == "diagnosticMKt"
        assert entries[1]["status"] == 200
        assert all(e["service"] == "diagnostic-campaign" for e in entries)
        assert send_kwargs["access_token"] not in out

    @pytest.mark.asyncio
    async def test_sender_debug_events_filtered(self, restore_logging, capsys, send_kwargs):
        """At INFO level the sender should write nothing."""
        setup_logging(service_name="diagnostic-campaign", level="INFO")

        async with httpx.AsyncClient(transport=RecordingTransport()) as client:
            await send_diagnostic_mkt_template(client, **send_kwargs)

        entries = [
            e for e in _json_lines(capsys.readouterr().out)
            if e.get("logger") == "wa_template_core.whatsapp.sender"
        ]
        assert entries == []
