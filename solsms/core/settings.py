"""Configuration for the SMS provider.

Two layers:
  * `SmsConfig` - the per-provider JSON blob handed over by the host gateway
    (RootURL, APIKey, Sender, Timeout, MaxIdleConns). Frozen after parsing.
  * `Settings` - process-level knobs read from the environment via
    pydantic-settings. Use `get_settings()` for a cached instance.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from solsms.errors import ConfigError

DEFAULT_TIMEOUT = 5


class SmsConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    root_url: str = Field("", alias="RootURL", description="Optional root URL of the vendor API")
    api_key: str = Field("", alias="APIKey")
    sender: str = Field("", alias="Sender", description="Sender name registered with the vendor")
    timeout: int = Field(0, alias="Timeout", ge=0, description="HTTP timeout in seconds; 0 means default")
    max_idle_conns: int = Field(0, alias="MaxIdleConns", description="Accepted for compatibility; unused")

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        # Keys match case-insensitively, e.g. "apikey" fills APIKey.
        if not isinstance(data, dict):
            return data
        aliases = {f.alias.lower(): f.alias for f in cls.model_fields.values() if f.alias}
        return {aliases.get(k.lower(), k) if isinstance(k, str) else k: v for k, v in data.items()}

    @property
    def effective_timeout(self) -> int:
        return self.timeout or DEFAULT_TIMEOUT


def parse_config(raw: bytes | str) -> SmsConfig:
    """Parse and validate the JSON configuration blob.

    Raises ConfigError if the blob does not parse or lacks APIKey/Sender.
    """
    try:
        cfg = SmsConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError(f"cannot parse SMS provider config: {e}") from e
    if not cfg.api_key or not cfg.sender:
        raise ConfigError("invalid APIKey or Sender")
    return cfg


class Settings(BaseSettings):
    SMS_VENDOR: str = Field("solsms", description="Vendor profile id, or 'noop' for the logging-only provider")
    SMS_PROVIDER_CONFIG: Optional[str] = Field(None, description="JSON provider config blob (RootURL, APIKey, Sender, ...)")
    LOG_LEVEL: str = Field("INFO", description="Log level for the solsms logger")

    model_config = SettingsConfigDict(env_file=None, case_sensitive=False, extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance loaded from the environment."""
    return Settings()


__all__ = ["SmsConfig", "parse_config", "Settings", "get_settings", "DEFAULT_TIMEOUT"]
