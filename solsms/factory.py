from __future__ import annotations
from solsms.core.settings import Settings, get_settings
from solsms.errors import ConfigError, InvalidAddressError
from solsms.logging import log_sms_pushed, set_log_level, set_log_provider
from solsms.provider import Provider
from solsms.providers.profiles import VENDOR_PROFILES
from solsms.providers.sms import SmsProvider, RE_NUM, CHANNEL_NAME, ADDRESS_NAME, MAX_OTP_LEN, MAX_BODY_LEN


class NoopSmsProvider:
    """Logs pushes instead of sending them. Used when no vendor is configured."""

    def id(self) -> str:
        return "noop"

    def channel_name(self) -> str:
        return CHANNEL_NAME

    def channel_desc(self) -> str:
        return "Development SMS channel; codes are written to the log."

    def address_name(self) -> str:
        return ADDRESS_NAME

    def address_desc(self) -> str:
        return "Please enter your mobile number"

    def validate_address(self, to: str) -> None:
        if not RE_NUM.search(to or ""):
            raise InvalidAddressError("invalid mobile number")

    def push(self, to: str, subject: str, body: bytes) -> None:
        message = body.decode("utf-8", errors="replace") if isinstance(body, (bytes, bytearray)) else body
        log_sms_pushed(self.id(), to, "noop", length=len(message))

    def max_address_len(self) -> int:
        return 0

    def max_otp_len(self) -> int:
        return MAX_OTP_LEN

    def max_body_len(self) -> int:
        return MAX_BODY_LEN


def new(config: bytes | str, vendor: str = "solsms") -> Provider:
    """Build a provider for `vendor` from its JSON config blob.

    Supported options:
      RootURL: optional root URL of the API
      APIKey: API key
      Sender: sender name
      Timeout: optional HTTP timeout in seconds (default 5)
    """
    profile = VENDOR_PROFILES.get(vendor.lower())
    if profile is None:
        raise ConfigError(f"Unsupported SMS vendor {vendor}")
    return SmsProvider.from_json(config, profile)


def get_sms_provider(settings: Settings | None = None) -> Provider:
    """Factory driven by env settings.

    - SMS_VENDOR=noop, or no SMS_PROVIDER_CONFIG: NoopSmsProvider.
    - otherwise: the vendor adapter built from SMS_PROVIDER_CONFIG.
    """
    settings = settings or get_settings()
    set_log_level(settings.LOG_LEVEL)
    vendor = settings.SMS_VENDOR.lower()
    if vendor == "noop" or not settings.SMS_PROVIDER_CONFIG:
        set_log_provider("noop")
        return NoopSmsProvider()
    provider = new(settings.SMS_PROVIDER_CONFIG, vendor)
    set_log_provider(provider.id())
    return provider


__all__ = ['NoopSmsProvider', 'new', 'get_sms_provider']
