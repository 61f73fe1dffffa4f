from .profiles import VendorProfile, SOLSMS, SINFINI, VENDOR_PROFILES
from .sms import SmsProvider

__all__ = [
    'VendorProfile', 'SOLSMS', 'SINFINI', 'VENDOR_PROFILES',
    'SmsProvider',
]
