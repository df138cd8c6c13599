"""
Twilio SMS / WhatsApp webhook.
Twilio posts form-encoded messages and expects TwiML back.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from twilio.request_validator import RequestValidator
from twilio.twiml.messaging_response import MessagingResponse

from salesbot.api.deps import get_facade
from salesbot.config import settings
from salesbot.core.facade import CommerceFacade

router = APIRouter(tags=["whatsapp"])
logger = logging.getLogger(__name__)


def _public_url(request: Request) -> str:
    """URL Twilio signed: the configured public base when behind a proxy."""
    if not settings.base_url:
        return str(request.url)
    url = settings.public_base_url + request.url.path
    if request.url.query:
        url += f"?{request.url.query}"
    return url


def is_valid_signature(request: Request, params: dict) -> bool:
    """Check X-Twilio-Signature. Always valid when validation is off."""
    if not settings.twilio_auth_token or not settings.twilio_validate_signature:
        return True

    signature = request.headers.get("X-Twilio-Signature", "")
    validator = RequestValidator(settings.twilio_auth_token)
    return validator.validate(_public_url(request), params, signature)


@router.post("/twilio-webhook")
async def twilio_webhook(request: Request, facade: CommerceFacade = Depends(get_facade)) -> Response:
    form = await request.form()
    params = {key: value for key, value in form.items() if isinstance(value, str)}

    if not is_valid_signature(request, params):
        logger.warning("Rejected Twilio webhook with invalid signature")
        return Response(status_code=403)

    incoming = params.get("Body", "")
    sender = params.get("From", "")
    logger.info(f"WhatsApp message from {sender}: {incoming[:50]!r}")

    reply = await facade.handle_message(f"wa:{sender}", incoming, channel="whatsapp")

    twiml = MessagingResponse()
    twiml.message(reply.as_plain_text())
    return Response(content=str(twiml), media_type="text/xml")
