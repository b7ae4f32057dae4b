import json
import logging
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any, Optional

from fastapi import status
from pydantic import ValidationError

from ventech_api.common.config import Settings
from ventech_api.common.utils.email_service import (
    ResendEmailClient,
    build_admin_notification,
    build_confirmation,
)
from ventech_api.common.utils.global_messages import GlobalMessages
from ventech_api.modules.contact.schemas import ContactFormRequest

logger = logging.getLogger(__name__)


class ContactErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    MALFORMED_BODY = "malformed_body"
    BODY_STREAM = "body_stream"
    BODY_TOO_LARGE = "body_too_large"
    VALIDATION = "validation"
    DELIVERY = "delivery"
    UNKNOWN = "unknown"


STATUS_BY_ERROR = {
    ContactErrorKind.CONFIGURATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ContactErrorKind.MALFORMED_BODY: status.HTTP_400_BAD_REQUEST,
    ContactErrorKind.BODY_STREAM: status.HTTP_400_BAD_REQUEST,
    ContactErrorKind.BODY_TOO_LARGE: HTTPStatus.REQUEST_ENTITY_TOO_LARGE.value,
    ContactErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ContactErrorKind.DELIVERY: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ContactErrorKind.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# First failing field -> user-facing message
FIELD_ERROR_MESSAGES = {
    "name": GlobalMessages.NAME_REQUIRED,
    "email": GlobalMessages.INVALID_EMAIL,
    "phone": GlobalMessages.INVALID_PHONE,
    "company": GlobalMessages.INVALID_COMPANY,
    "message": GlobalMessages.MESSAGE_REQUIRED,
}


@dataclass
class ContactValidationResult:
    """Outcome of validating a raw contact form payload."""
    data: Optional[ContactFormRequest] = None
    error: Optional[ContactErrorKind] = None
    error_message: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class ContactSubmissionResult:
    """Outcome of a contact form submission, ready to be sent as a response."""
    status_code: int
    success: bool
    message: str
    error: Optional[ContactErrorKind] = None


def contact_failure(error: ContactErrorKind, message: str) -> ContactSubmissionResult:
    return ContactSubmissionResult(
        status_code=STATUS_BY_ERROR[error],
        success=False,
        message=message,
        error=error,
    )


def validate_contact_form(raw: Any) -> ContactValidationResult:
    """
    Validate a contact form payload.

    Args:
        raw: A decoded mapping, or a JSON document as ``str``/``bytes``.

    Returns:
        ContactValidationResult: the parsed form, or the first error found
        (checked in the order name, email, phone, company, message).
    """
    if isinstance(raw, (bytes, bytearray, str)):
        try:
            raw = _decode_json(raw)
        except (ValueError, RecursionError):
            return ContactValidationResult(
                error=ContactErrorKind.MALFORMED_BODY,
                error_message=GlobalMessages.INVALID_JSON,
            )

    if not isinstance(raw, dict):
        raw = {}

    try:
        data = ContactFormRequest.model_validate(raw)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = first_error["loc"][0] if first_error["loc"] else None
        return ContactValidationResult(
            error=ContactErrorKind.VALIDATION,
            error_message=FIELD_ERROR_MESSAGES.get(field, GlobalMessages.INVALID_REQUEST_FORMAT),
        )

    return ContactValidationResult(data=data)


def _decode_json(raw):
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if not raw.strip():
        return {}
    value = json.loads(raw)
    # Bodies posted as a JSON-encoded string carry the document one level down
    if isinstance(value, str):
        value = json.loads(value)
    return value


async def process_contact_form(
    raw: Any,
    settings: Settings,
    email_client: Optional[ResendEmailClient],
) -> ContactSubmissionResult:
    """
    Validate a submission and relay it by email.

    The admin notification must go out for the submission to succeed. A failed
    confirmation email to the submitter is logged and otherwise ignored.
    """
    try:
        if not settings.email_configured or email_client is None:
            logger.error("RESEND_API_KEY environment variable is not set")
            return contact_failure(ContactErrorKind.CONFIGURATION, GlobalMessages.EMAIL_NOT_CONFIGURED)

        validation = validate_contact_form(raw)
        if not validation.success:
            if validation.error == ContactErrorKind.MALFORMED_BODY:
                logger.warning("Contact form body is not valid JSON")
            return contact_failure(validation.error, validation.error_message)

        form_data = validation.data.model_dump()

        admin_email = build_admin_notification(form_data)
        admin_result = await email_client.send(
            settings.EMAIL_SENDER,
            settings.CONTACT_RECIPIENT,
            admin_email["subject"],
            admin_email["html"],
        )
        if not admin_result.success:
            logger.error(f"Failed to send admin email: {admin_result.error}")
            return contact_failure(ContactErrorKind.DELIVERY, GlobalMessages.EMAIL_SEND_FAILED)

        confirmation = build_confirmation(form_data, settings.COMPANY_NAME)
        user_result = await email_client.send(
            settings.EMAIL_SENDER,
            form_data["email"],
            confirmation["subject"],
            confirmation["html"],
        )
        if not user_result.success:
            logger.warning(f"Failed to send confirmation email: {user_result.error}")

        logger.info(f"Contact form submission relayed (admin email id: {admin_result.id})")
        return ContactSubmissionResult(
            status_code=status.HTTP_200_OK,
            success=True,
            message=GlobalMessages.CONTACT_SENT,
        )
    except Exception:
        logger.exception("Contact form error")
        return contact_failure(ContactErrorKind.UNKNOWN, GlobalMessages.CONTACT_UNEXPECTED_ERROR)
