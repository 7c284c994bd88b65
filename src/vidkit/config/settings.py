"""Settings for the vidkit CLI loaded from environment variables and config files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vidkit.config import CONFIG_ROOT
from vidkit.models.options import URLValidationOptions


class UnknownProfileError(KeyError):
    """Raised when a validation profile name is not configured."""


class ProfileConfig(BaseModel):
    """Named validation profiles available to the CLI."""

    profiles: Dict[str, URLValidationOptions] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


def _load_profiles(profile_path: Path) -> ProfileConfig:
    if not profile_path.exists():
        return ProfileConfig()

    raw_data = yaml.safe_load(profile_path.read_text(encoding="utf-8")) or {}

    profiles: Dict[str, URLValidationOptions] = {}
    for name, config in (raw_data.get("profiles") or {}).items():
        profiles[name] = URLValidationOptions(**(config or {}))
    return ProfileConfig(profiles=profiles)


class Settings(BaseSettings):
    """Defaults for the ``vidkit`` command line."""

    allow_no_protocol: bool = Field(default=True, alias="VIDKIT_ALLOW_NO_PROTOCOL")
    allow_no_www: bool = Field(default=True, alias="VIDKIT_ALLOW_NO_WWW")
    allow_query_params: bool = Field(default=True, alias="VIDKIT_ALLOW_QUERY_PARAMS")
    log_level: str = Field(default="INFO", alias="VIDKIT_LOG_LEVEL")

    profile_config: ProfileConfig = Field(default_factory=lambda: _load_profiles(CONFIG_ROOT / "profiles.yaml"))

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def debug(self) -> bool:
        return self.log_level == "DEBUG"

    def default_options(self) -> URLValidationOptions:
        """Validation options assembled from the ``VIDKIT_ALLOW_*`` variables."""

        return URLValidationOptions(
            allow_no_protocol=self.allow_no_protocol,
            allow_no_www=self.allow_no_www,
            allow_query_params=self.allow_query_params,
        )

    def resolve_profile(self, name: Optional[str]) -> URLValidationOptions:
        """Return the options for profile ``name``, or the env defaults when ``name`` is ``None``."""

        if name is None:
            return self.default_options()
        try:
            return self.profile_config.profiles[name]
        except KeyError:
            raise UnknownProfileError(name) from None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the CLI settings."""

    return Settings()


__all__ = ["ProfileConfig", "Settings", "UnknownProfileError", "get_settings"]
