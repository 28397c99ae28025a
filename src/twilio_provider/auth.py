from __future__ import annotations

import base64

from .config import TwilioConfiguration
from .errors import EncodingError


def encode_credentials(account_id: str, account_secret: str) -> str:
    """
    Return the Basic-Auth token for "<account_id>:<account_secret>".
    """
    try:
        raw = f"{account_id}:{account_secret}".encode()
    except UnicodeEncodeError as e:
        # e.g. lone surrogates smuggled in through the environment
        raise EncodingError() from e
    return base64.b64encode(raw).decode("ascii")


def basic_auth_header(configuration: TwilioConfiguration) -> dict[str, str]:
    token = encode_credentials(configuration.account_id, configuration.account_secret)
    return {"Authorization": f"Basic {token}"}
