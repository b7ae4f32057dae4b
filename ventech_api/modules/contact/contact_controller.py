# ventech_api/modules/contact/contact_controller.py

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.requests import ClientDisconnect

from ventech_api.common.config import Settings
from ventech_api.common.dependencies import get_app_settings, get_email_client
from ventech_api.common.utils.email_service import ResendEmailClient
from ventech_api.common.utils.global_messages import GlobalMessages
from ventech_api.modules.contact import contact_service, schemas
from ventech_api.modules.contact.contact_service import ContactErrorKind

router = APIRouter(prefix="/api/contact", tags=["contact"])
logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

class BodyTooLarge(Exception):
    pass

@router.post(
    "",
    response_model=schemas.ContactFormResponse,
    responses={
        400: {"model": schemas.ContactFormResponse},
        413: {"model": schemas.ContactFormResponse},
        500: {"model": schemas.ContactFormResponse},
    },
)
async def submit_contact_form(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    email_client: Optional[ResendEmailClient] = Depends(get_email_client),
):
    """
    Relay a contact form submission to the admin inbox and confirm receipt to the sender.

    Accepts a JSON body (or a url-encoded form) with **name**, **email**, **message**
    and optional **phone** and **company**.
    """
    try:
        raw = await read_contact_payload(request, settings.MAX_BODY_SIZE)
    except BodyTooLarge:
        logger.warning("Contact form body exceeds the configured size limit")
        result = contact_service.contact_failure(ContactErrorKind.BODY_TOO_LARGE, GlobalMessages.REQUEST_TOO_LARGE)
    except ClientDisconnect as e:
        logger.warning(f"Body stream error: {e!r}")
        result = contact_service.contact_failure(ContactErrorKind.BODY_STREAM, GlobalMessages.INVALID_REQUEST_FORMAT)
    else:
        result = await contact_service.process_contact_form(raw, settings, email_client)

    response = schemas.ContactFormResponse(success=result.success, message=result.message)
    return JSONResponse(status_code=result.status_code, content=response.model_dump())

async def read_contact_payload(request: Request, max_body_size: int) -> Any:
    """
    Read the request body, enforcing ``max_body_size``.

    Url-encoded forms are returned as a dict; anything else is returned as raw
    bytes for the validator to decode.
    """
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > max_body_size:
        raise BodyTooLarge()

    body = await request.body()
    if len(body) > max_body_size:
        raise BodyTooLarge()

    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() == FORM_CONTENT_TYPE:
        form = await request.form()
        return dict(form)
    return body
