from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class TwilioConfiguration(BaseModel):
    """Account credentials used to authenticate every outbound request."""

    model_config = ConfigDict(frozen=True)

    account_id: str = Field(min_length=1)
    account_secret: str = Field(min_length=1)


class Settings(BaseModel):
    # --- Twilio credentials ---
    # Both must be set for a client to be built from the environment.
    twilio_account_sid: str | None = None
    twilio_auth_token: str | None = None

    def model_post_init(self, __context: object) -> None:  # type: ignore[override]
        # Read the env at construction time (not import time) so that
        # get_settings.cache_clear() picks up changes.
        if self.twilio_account_sid is None:
            object.__setattr__(self, "twilio_account_sid", os.getenv("TWILIO_ACCOUNT_SID"))
        if self.twilio_auth_token is None:
            object.__setattr__(self, "twilio_auth_token", os.getenv("TWILIO_AUTH_TOKEN"))

    def twilio_configuration(self) -> TwilioConfiguration | None:
        """Return the credentials, or None when either variable is unset."""
        if not self.twilio_account_sid or not self.twilio_auth_token:
            return None
        return TwilioConfiguration(
            account_id=self.twilio_account_sid,
            account_secret=self.twilio_auth_token,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
