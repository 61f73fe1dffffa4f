from .errors import SmsProviderError, ConfigError, InvalidAddressError, TransportError, DeliveryError
from .provider import Provider
from .factory import new, get_sms_provider, NoopSmsProvider

__all__ = [
    'Provider', 'new', 'get_sms_provider', 'NoopSmsProvider',
    'SmsProviderError', 'ConfigError', 'InvalidAddressError', 'TransportError', 'DeliveryError',
]
