from __future__ import annotations


class SmsProviderError(RuntimeError):
    pass


class ConfigError(SmsProviderError):
    """Provider configuration is malformed or incomplete."""


class InvalidAddressError(SmsProviderError):
    pass


class TransportError(SmsProviderError):
    """The vendor endpoint could not be reached or timed out."""


class DeliveryError(SmsProviderError):
    """The vendor was reached but did not report success.

    `detail` holds the raw vendor response text, verbatim.
    """

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


__all__ = ['SmsProviderError', 'ConfigError', 'InvalidAddressError', 'TransportError', 'DeliveryError']
