from __future__ import annotations

import logging
from typing import Any, Final
from urllib.parse import quote

import httpx
from fastapi import Response
from pydantic import ValidationError

from .auth import basic_auth_header
from .config import TwilioConfiguration, get_settings
from .errors import ConfigurationMissing, NotFoundError
from .models import LookupResponse, OutgoingSMS, SMSResponse
from .twiml import generate_twiml

logger = logging.getLogger(__name__)

MESSAGES_URL: Final[str] = "https://api.twilio.com/2010-04-01/Accounts/{account_id}/Messages.json"
LOOKUP_URL: Final[str] = "https://lookups.twilio.com/v1/PhoneNumbers/{number}?Type=carrier"


class Twilio:
    """
    Thin async client for the Messages and Lookup APIs.

    A client always holds a configuration; use `Twilio.from_settings()` to
    build one from TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN.

    Pass `http_client` to share a pooled httpx.AsyncClient (its lifetime is
    then the caller's business). Without one, each call opens and closes
    its own client.
    """

    def __init__(
        self,
        configuration: TwilioConfiguration,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.configuration = configuration
        self._http_client = http_client

    @classmethod
    def from_settings(cls, http_client: httpx.AsyncClient | None = None) -> Twilio:
        configuration = get_settings().twilio_configuration()
        if configuration is None:
            raise ConfigurationMissing()
        return cls(configuration, http_client=http_client)

    async def send(self, sms: OutgoingSMS) -> httpx.Response:
        """
        POST the message to the Messages API.

        The raw response is returned as-is; callers check the status / body.
        """
        headers = basic_auth_header(self.configuration)
        url = MESSAGES_URL.format(account_id=self.configuration.account_id)
        logger.debug("POST %s to=%s", url, sms.to)
        return await self._request("POST", url, headers=headers, data=sms.to_form())

    async def lookup(self, number: str) -> LookupResponse:
        """
        Fetch carrier information for `number`.

        Whitespace is stripped before building the URL, so "+1 415 555 0100"
        and "+14155550100" hit the same resource. If the reply cannot be
        decoded into a LookupResponse, NotFoundError is raised with the number
        as it was passed in. Transport errors are not caught.
        """
        headers = basic_auth_header(self.configuration)
        trimmed = "".join(number.split())
        # "?", "&" or "#" in the number must not leak into the query string
        url = LOOKUP_URL.format(number=quote(trimmed, safe="+"))
        logger.debug("GET %s", url)
        response = await self._request("GET", url, headers=headers)

        try:
            return LookupResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                "Lookup for %s could not be decoded (status %s)", trimmed, response.status_code
            )
            raise NotFoundError(number, cause=e) from e

    def respond(self, response: SMSResponse) -> Response:
        return respond(response)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.request(method, url, **kwargs)
        async with httpx.AsyncClient() as client:
            return await client.request(method, url, **kwargs)


def respond(response: SMSResponse) -> Response:
    """
    Wrap the TwiML for `response` in a 200 application/xml HTTP response.

    Needs neither credentials nor network, so webhook handlers can call it
    without a configured client.
    """
    return Response(
        content=generate_twiml(response),
        status_code=200,
        media_type="application/xml",
    )
