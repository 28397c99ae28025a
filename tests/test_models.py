from __future__ import annotations

import pytest
from pydantic import ValidationError

from twilio_provider.models import (
    CarrierResponse,
    CarrierType,
    IncomingSMS,
    LookupResponse,
    OutgoingSMS,
)

LOOKUP_BODY = """
{
  "caller_name": null,
  "country_code": "US",
  "phone_number": "+14155550100",
  "national_format": "(415) 555-0100",
  "carrier": {
    "mobile_country_code": "310",
    "mobile_network_code": "456",
    "name": "Example Mobile",
    "type": "mobile",
    "error_code": null
  },
  "add_ons": null,
  "url": "https://lookups.twilio.com/v1/PhoneNumbers/+14155550100?Type=carrier"
}
"""


def test_carrier_decodes_known_type() -> None:
    carrier = CarrierResponse.model_validate_json('{"name":"Example Mobile","type":"mobile"}')

    assert carrier.name == "Example Mobile"
    assert carrier.type is CarrierType.MOBILE


@pytest.mark.parametrize("value", ["landline", "voip"])
def test_carrier_decodes_other_types(value: str) -> None:
    carrier = CarrierResponse.model_validate({"name": "X", "type": value})
    assert carrier.type.value == value


def test_carrier_rejects_unknown_type() -> None:
    with pytest.raises(ValidationError):
        CarrierResponse.model_validate_json('{"name":"Example Mobile","type":"pager"}')


def test_lookup_response_decodes_twilio_body() -> None:
    lookup = LookupResponse.model_validate_json(LOOKUP_BODY)

    assert lookup.phone_number == "+14155550100"
    assert lookup.national_format == "(415) 555-0100"
    assert lookup.country_code == "US"
    assert lookup.carrier.mobile_network_code == "456"
    assert lookup.carrier.type is CarrierType.MOBILE
    assert lookup.caller_name is None


def test_lookup_response_requires_carrier() -> None:
    with pytest.raises(ValidationError):
        LookupResponse.model_validate({"phone_number": "+14155550100"})


def test_outgoing_sms_form_uses_twilio_names() -> None:
    sms = OutgoingSMS(from_="+15005550006", to="+14155550100", body="Hi")

    assert sms.to_form() == {"From": "+15005550006", "To": "+14155550100", "Body": "Hi"}


def test_outgoing_sms_form_includes_media() -> None:
    sms = OutgoingSMS(
        from_="+15005550006",
        to="+14155550100",
        body="Look",
        media_url=["https://example.com/a.png"],
    )

    assert sms.to_form()["MediaUrl"] == ["https://example.com/a.png"]


def test_incoming_sms_from_webhook_form() -> None:
    incoming = IncomingSMS.model_validate(
        {
            "MessageSid": "SM123",
            "AccountSid": "AC123",
            "From": "+14155550100",
            "To": "+15005550006",
            "Body": "Dumela",
            "NumMedia": "0",
            "SmsStatus": "received",
        }
    )

    assert incoming.from_ == "+14155550100"
    assert incoming.body == "Dumela"
    assert incoming.num_media == 0
