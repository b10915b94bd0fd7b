from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _mask(s: str | None, keep: int = 4) -> str | None:
    if not s:
        return None
    return (s[:keep] + "…") if len(s) > keep else "…"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- web3.storage ---
    web3_storage_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("WEB3_STORAGE_TOKEN", "NEXT_PUBLIC_WEB3_STORAGE_TOKEN"),
    )
    web3_storage_api_url: str = Field(
        default="https://api.web3.storage",
        validation_alias="WEB3_STORAGE_API_URL",
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("web3_storage_token", mode="before")
    @classmethod
    def _empty_token_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def debug_dump(self) -> dict[str, Any]:
        return {
            "web3_storage_token": _mask(self.web3_storage_token),
            "web3_storage_api_url": self.web3_storage_api_url,
            "log_level": self.log_level,
        }


def get_settings() -> Settings:
    """Fresh settings on every call, so env changes are picked up."""
    return Settings()


def get_access_token() -> str | None:
    """Current web3.storage token, or None when it is not configured."""
    return get_settings().web3_storage_token
