"""Client settings loaded from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nexmo_sms.errors import ConfigurationError
from nexmo_sms.rest.builder import DEFAULT_BASE_URL

_TRUE_VALUES = ("1", "true", "yes", "on")


class ClientSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1)
    api_secret: str = Field(min_length=1, repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0)
    verify_tls: bool = True

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Read NEXMO_API_KEY, NEXMO_API_SECRET and optional overrides."""
        try:
            api_key = os.environ["NEXMO_API_KEY"]
            api_secret = os.environ["NEXMO_API_SECRET"]
        except KeyError as exc:
            raise ConfigurationError(f"Missing environment variable {exc.args[0]}") from None
        try:
            return cls(
                api_key=api_key,
                api_secret=api_secret,
                base_url=os.environ.get("NEXMO_BASE_URL", DEFAULT_BASE_URL),
                timeout=float(os.environ.get("NEXMO_TIMEOUT", "30")),
                verify_tls=os.environ.get("NEXMO_VERIFY_TLS", "true").lower() in _TRUE_VALUES,
            )
        except (ValueError, ValidationError) as exc:
            raise ConfigurationError(f"Invalid client settings: {exc}") from exc
