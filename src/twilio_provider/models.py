from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# --- Outbound ---


class OutgoingSMS(BaseModel):
    """
    A message to send through the Messages API.

    Field aliases are Twilio's form parameter names, so

      OutgoingSMS(from_="+15005550006", to="+14155550100", body="Hi")

    posts as From=...&To=...&Body=...
    """

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="From")
    to: str = Field(alias="To")
    body: str = Field(alias="Body")
    media_url: list[str] | None = Field(default=None, alias="MediaUrl")

    def to_form(self) -> dict[str, Any]:
        # a list value becomes one MediaUrl=... pair per entry
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Inbound webhook ---


class IncomingSMS(BaseModel):
    """Form payload Twilio posts to the inbound message webhook."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message_sid: str | None = Field(default=None, alias="MessageSid")
    account_sid: str | None = Field(default=None, alias="AccountSid")
    messaging_service_sid: str | None = Field(default=None, alias="MessagingServiceSid")
    from_: str = Field(alias="From")
    to: str = Field(alias="To")
    body: str = Field(default="", alias="Body")
    num_media: int = Field(default=0, alias="NumMedia")
    from_city: str | None = Field(default=None, alias="FromCity")
    from_state: str | None = Field(default=None, alias="FromState")
    from_zip: str | None = Field(default=None, alias="FromZip")
    from_country: str | None = Field(default=None, alias="FromCountry")


# --- Lookup ---


class CarrierType(str, Enum):
    MOBILE = "mobile"
    LANDLINE = "landline"
    VOIP = "voip"


class CarrierResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    type: CarrierType
    mobile_country_code: str | None = None
    mobile_network_code: str | None = None
    error_code: int | None = None


class LookupResponse(BaseModel):
    """
    Decoded reply of GET /v1/PhoneNumbers/{number}?Type=carrier.

    Twilio's keys are snake_case already, which matches the field names.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    phone_number: str
    carrier: CarrierResponse
    caller_name: dict[str, Any] | None = None
    country_code: str | None = None
    national_format: str | None = None
    add_ons: dict[str, Any] | None = None
    url: str | None = None


# --- Webhook reply ---


class SMSMessage(BaseModel):
    body: str = ""
    to: str | None = None
    from_: str | None = None
    media_url: list[str] = Field(default_factory=list)


class SMSResponse(BaseModel):
    """What to send back to Twilio when it delivers an inbound message."""

    messages: list[SMSMessage] = Field(default_factory=list)

    @classmethod
    def reply(cls, body: str) -> SMSResponse:
        return cls(messages=[SMSMessage(body=body)])
