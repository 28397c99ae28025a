from __future__ import annotations

from twilio.twiml.messaging_response import MessagingResponse

from .models import SMSResponse


def generate_twiml(response: SMSResponse) -> str:
    """
    Render an SMSResponse as a TwiML <Response> document.

    Each message becomes a <Message> element; the twilio library takes care
    of XML escaping. An empty body gives an empty <Message /> element.
    """
    twiml = MessagingResponse()
    for message in response.messages:
        element = twiml.message(message.body, to=message.to, from_=message.from_)
        for url in message.media_url:
            element.media(url)
    return twiml.to_xml()
