import json

import httpx
import pytest
import respx

from solsms import DeliveryError, NoopSmsProvider
from solsms.logging import mask_address, set_log_level, slog

SOLSMS_URL = "https://api-alerts.kaleyra.com/v4/"


def test_mask_address():
    assert mask_address("9845012345") == "******2345"
    assert mask_address("123") == "***"
    assert mask_address(None) is None


@respx.mock
def test_push_logs_without_secrets(provider, caplog):
    caplog.set_level("INFO", logger="solsms")
    respx.post(SOLSMS_URL).mock(return_value=httpx.Response(200, text="responsecode 401 bad key"))
    with pytest.raises(DeliveryError):
        provider.push("9845012345", "", b"Your code is 123456")
    out = caplog.text
    assert "sms_pushed" in out
    assert "rejected" in out
    assert "test-key" not in out
    assert "9845012345" not in out


def test_noop_push_logs_without_number_or_code(caplog):
    caplog.set_level("INFO", logger="solsms")
    NoopSmsProvider().push("9845012345", "", b"Your code is 123456")
    events = [json.loads(r.getMessage()) for r in caplog.records if r.name == "solsms"]
    pushed = [e for e in events if e["event"] == "sms_pushed"]
    assert pushed and pushed[-1]["status"] == "noop"
    assert pushed[-1]["to"] == "******2345"
    for e in events:
        e.pop("timestamp", None)
        dumped = json.dumps(e)
        assert "9845012345" not in dumped
        assert "123456" not in dumped


def test_log_level_controls_debug_events(caplog):
    caplog.set_level("DEBUG", logger="solsms")
    try:
        set_log_level("DEBUG")
        slog.debug("sms_debug_event")
        assert "sms_debug_event" in caplog.text
        set_log_level("WARNING")
        slog.info("sms_info_hidden_event")
        assert "sms_info_hidden_event" not in caplog.text
    finally:
        set_log_level("INFO")
