from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class Provider(Protocol):
    """Capability set the host OTP gateway expects from a delivery channel.

    The host only ever holds a `Provider`; concrete adapters are built through
    `solsms.factory`.
    """

    def id(self) -> str: ...

    def channel_name(self) -> str: ...

    def channel_desc(self) -> str: ...

    def address_name(self) -> str: ...

    def address_desc(self) -> str: ...

    def validate_address(self, to: str) -> None: ...

    def push(self, to: str, subject: str, body: bytes) -> None: ...

    def max_address_len(self) -> int: ...

    def max_otp_len(self) -> int: ...

    def max_body_len(self) -> int: ...


__all__ = ['Provider']
