from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Form, Request, Response
from fastapi.responses import JSONResponse

from .client import Twilio, respond
from .config import TwilioConfiguration, get_settings
from .errors import ConfigurationMissing, NotFoundError
from .models import IncomingSMS, SMSResponse

logger = logging.getLogger(__name__)

# --- Configuration store (one per application instance) ---


def configure(app: FastAPI, configuration: TwilioConfiguration | None) -> None:
    app.state.twilio_configuration = configuration


def get_configuration(app: FastAPI) -> TwilioConfiguration:
    configuration = getattr(app.state, "twilio_configuration", None)
    if configuration is None:
        raise ConfigurationMissing()
    return configuration


def get_twilio(request: Request) -> Twilio:
    """
    FastAPI dependency: a client bound to the current application's credentials.
    """
    return Twilio(get_configuration(request.app))


# --- App ---


@asynccontextmanager
async def lifespan(app: FastAPI):
    # configure(app, ...) called by the host takes precedence over the env
    if getattr(app.state, "twilio_configuration", None) is None:
        configuration = get_settings().twilio_configuration()
        if configuration is None:
            logger.warning("TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN not set; send/lookup unavailable")
        configure(app, configuration)
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="twilio-provider", version="0.1.0", lifespan=lifespan)

    @app.exception_handler(NotFoundError)
    async def lookup_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse({"detail": str(exc)}, status_code=exc.status_code)

    @app.post("/sms/inbound")
    async def sms_inbound(
        From_: str = Form(..., alias="From"),
        To: str = Form(..., alias="To"),
        Body: str = Form("", alias="Body"),
        MessageSid: str | None = Form(None, alias="MessageSid"),
        AccountSid: str | None = Form(None, alias="AccountSid"),
        NumMedia: int = Form(0, alias="NumMedia"),
    ) -> Response:
        """
        Twilio SMS webhook endpoint.

        Acknowledges the inbound message with a TwiML reply.
        """
        incoming = IncomingSMS(
            from_=From_,
            to=To,
            body=Body,
            message_sid=MessageSid,
            account_sid=AccountSid,
            num_media=NumMedia,
        )
        logger.info("Inbound SMS %s from %s", incoming.message_sid, incoming.from_)
        return respond(SMSResponse.reply(f"Received: {incoming.body}"))

    @app.get("/lookup/{number}")
    async def lookup(number: str, twilio: Twilio = Depends(get_twilio)) -> dict[str, object]:
        result = await twilio.lookup(number)
        return result.model_dump(mode="json")

    return app


app = create_app()
