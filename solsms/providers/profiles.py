from __future__ import annotations
from dataclasses import dataclass

SUCCESS_MARKER = "responsecode 200"


@dataclass(frozen=True)
class VendorProfile:
    """Per-vendor wire details. Each profile is authoritative for its own API."""
    id: str
    default_url: str
    key_field: str
    discriminator: tuple[str, str]
    address_desc: str
    max_address_len: int  # 0 means no limit
    success_marker: str = SUCCESS_MARKER

    def form(self, api_key: str, sender: str, to: str, message: str) -> dict[str, str]:
        name, value = self.discriminator
        return {
            name: value,
            self.key_field: api_key,
            "sender": sender,
            "to": to,
            "message": message,
        }


# Kaleyra v4 alerts API.
SOLSMS = VendorProfile(
    id="solsms",
    default_url="https://api-alerts.kaleyra.com/v4/",
    key_field="api_key",
    discriminator=("method", "sms"),
    address_desc="Please enter your mobile number",
    max_address_len=10,
)

# Legacy Solutions Infini web2sms API.
SINFINI = VendorProfile(
    id="sinfini",
    default_url="https://alerts.sinfini.com/api/web2sms.php",
    key_field="workingkey",
    discriminator=("api", "http"),
    address_desc="Please enter your mobile number with the country code",
    max_address_len=0,
)

VENDOR_PROFILES: dict[str, VendorProfile] = {p.id: p for p in (SOLSMS, SINFINI)}

__all__ = ['VendorProfile', 'SOLSMS', 'SINFINI', 'VENDOR_PROFILES', 'SUCCESS_MARKER']
