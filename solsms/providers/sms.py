from __future__ import annotations
import re
import time
import httpx

from solsms.core.settings import SmsConfig, parse_config
from solsms.errors import InvalidAddressError, TransportError, DeliveryError
from solsms.logging import log_provider_created, log_sms_pushed
from .profiles import VendorProfile, SOLSMS

CHANNEL_NAME = "SMS"
ADDRESS_NAME = "Mobile number"
MAX_OTP_LEN = 6
MAX_BODY_LEN = 140

RE_NUM = re.compile(r"\+?([0-9]){8,15}")


def build_http_client(timeout: int) -> httpx.Client:
    # At most one idle keep-alive connection.
    return httpx.Client(
        timeout=httpx.Timeout(float(timeout)),
        limits=httpx.Limits(max_keepalive_connections=1),
    )


class SmsProvider:
    """SMS channel backed by a bulk-SMS HTTP API described by a VendorProfile."""

    def __init__(self, cfg: SmsConfig, profile: VendorProfile = SOLSMS, client: httpx.Client | None = None):
        if not cfg.root_url:
            cfg = cfg.model_copy(update={"root_url": profile.default_url})
        self.cfg = cfg
        self.profile = profile
        self.client = client or build_http_client(cfg.effective_timeout)
        log_provider_created(profile.id, cfg.root_url, cfg.effective_timeout)

    @classmethod
    def from_json(cls, raw: bytes | str, profile: VendorProfile = SOLSMS) -> 'SmsProvider':
        return cls(parse_config(raw), profile)

    def id(self) -> str:
        return self.profile.id

    def channel_name(self) -> str:
        return CHANNEL_NAME

    def address_name(self) -> str:
        return ADDRESS_NAME

    def channel_desc(self) -> str:
        return (f"We've sent a {MAX_OTP_LEN} digit code in an SMS to your mobile. "
                "Enter it here to verify your mobile number.")

    def address_desc(self) -> str:
        return self.profile.address_desc

    def validate_address(self, to: str) -> None:
        """Loose phone number check: any embedded run of 8-15 digits passes."""
        if not RE_NUM.search(to or ""):
            raise InvalidAddressError("invalid mobile number")

    def push(self, to: str, subject: str, body: bytes | str) -> None:
        """Send `body` to `to`. SMS has no subject, so `subject` is ignored.

        The configured timeout is a deadline for the whole exchange, body
        included: a vendor trickling bytes cannot hold the call open.
        """
        message = body.decode("utf-8", errors="replace") if isinstance(body, (bytes, bytearray)) else body
        form = self.profile.form(self.cfg.api_key, self.cfg.sender, to, message)
        timeout = self.cfg.effective_timeout
        deadline = time.monotonic() + timeout
        try:
            with self.client.stream("POST", self.cfg.root_url, data=form) as resp:
                chunks = []
                for chunk in resp.iter_bytes():
                    chunks.append(chunk)
                    if time.monotonic() > deadline:
                        raise httpx.ReadTimeout(f"response not completed within {timeout}s", request=resp.request)
                if time.monotonic() > deadline:
                    raise httpx.ReadTimeout(f"response not completed within {timeout}s", request=resp.request)
                text = b"".join(chunks).decode(resp.encoding or "utf-8", errors="replace")
        except httpx.HTTPError as e:
            log_sms_pushed(self.profile.id, to, "transport_error", detail=str(e))
            raise TransportError(f"{self.profile.id} request failed: {e}") from e
        if self.profile.success_marker not in text:
            log_sms_pushed(self.profile.id, to, "rejected", detail=text[:200], status_code=resp.status_code)
            raise DeliveryError(text)
        log_sms_pushed(self.profile.id, to, "sent", status_code=resp.status_code)

    def max_address_len(self) -> int:
        return self.profile.max_address_len

    def max_otp_len(self) -> int:
        return MAX_OTP_LEN

    def max_body_len(self) -> int:
        return MAX_BODY_LEN

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> 'SmsProvider':
        return self

    def __exit__(self, *exc) -> None:
        self.close()
