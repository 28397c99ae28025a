from __future__ import annotations


class TwilioError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationMissing(TwilioError, RuntimeError):
    """
    Twilio credentials were never configured.

    This is a deployment mistake, not something to recover from at runtime:
    set TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN or call configure(app, ...).
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Twilio not configured. Set TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN "
            "or call configure(app, TwilioConfiguration(...))"
        )


class EncodingError(TwilioError):
    """The account id / secret pair could not be turned into a Basic-Auth token."""

    def __init__(self) -> None:
        super().__init__("Could not encode Twilio credentials")


class NotFoundError(TwilioError, LookupError):
    """
    A phone number lookup could not be decoded.

    Every decode failure (bad JSON, missing fields, unknown carrier type, an
    error body from Twilio) collapses into this one error. The underlying
    exception is kept on `cause` (and `__cause__`) for debugging only.
    """

    status_code = 404

    def __init__(self, number: str, cause: BaseException | None = None) -> None:
        super().__init__(f"The requested resource {number} was not found.")
        self.number = number
        self.cause = cause
