"""Shared fixtures for the SMS provider tests.

Vendor HTTP traffic is mocked with respx; no test reaches the network except
the timeout test, which talks to a local socket that never answers.
"""
from __future__ import annotations

import json
import pytest

from solsms.core.settings import get_settings


def make_config(**overrides) -> bytes:
    cfg = {"APIKey": "test-key", "Sender": "OTPGWY"}
    cfg.update(overrides)
    return json.dumps(cfg).encode()


@pytest.fixture
def config_blob() -> bytes:
    return make_config()


@pytest.fixture
def provider(config_blob):
    from solsms import new
    p = new(config_blob)
    yield p
    p.close()


@pytest.fixture
def sinfini_provider(config_blob):
    from solsms import new
    p = new(config_blob, vendor="sinfini")
    yield p
    p.close()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
