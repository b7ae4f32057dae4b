import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import httpx
import jinja2
from markupsafe import Markup, escape

from ventech_api.common.config import Settings

logger = logging.getLogger(__name__)

# ventech_api/common/utils/email_service.py -> ventech_api/templates/emails
BASE_DIR = Path(__file__).resolve().parent.parent.parent
TEMPLATE_DIR = BASE_DIR / "templates" / "emails"


def nl2br(value: Optional[str]) -> Markup:
    """Escape ``value`` and turn its newlines into ``<br>`` tags."""
    if not value:
        return Markup("")
    return Markup("<br>").join(escape(line) for line in value.split("\n"))


template_loader = jinja2.FileSystemLoader(searchpath=str(TEMPLATE_DIR))
template_env = jinja2.Environment(loader=template_loader, autoescape=True)
template_env.filters["nl2br"] = nl2br


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    try:
        template = template_env.get_template(template_name)
        return template.render(**context)
    except jinja2.TemplateError:
        logger.exception(f"Error rendering template {template_name}")
        raise


@dataclass
class EmailSendResult:
    """Result of a single send call against the email API."""
    id: Optional[str] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


class ResendEmailClient:
    """Minimal async client for the Resend ``/emails`` endpoint."""

    def __init__(self, api_key: str, base_url: str = "https://api.resend.com", timeout: float = 30.0):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResendEmailClient":
        return cls(
            api_key=settings.RESEND_API_KEY,
            base_url=settings.RESEND_API_BASE_URL,
            timeout=settings.EMAIL_API_TIMEOUT,
        )

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout)

    async def send(self, sender: str, to: Union[str, List[str]], subject: str, html: str) -> EmailSendResult:
        """
        Send one HTML email.

        API-level failures (non-2xx responses) come back as an ``EmailSendResult``
        with ``error`` set. Transport failures (connection errors, timeouts) are
        raised as ``httpx.HTTPError``.
        """
        recipients = [to] if isinstance(to, str) else list(to)
        payload = {
            "from": sender,
            "to": recipients,
            "subject": subject,
            "html": html,
        }

        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/emails",
                headers=self.headers,
                json=payload,
            )

        if response.is_success:
            data = _json_or_empty(response)
            return EmailSendResult(id=data.get("id"))

        data = _json_or_empty(response)
        error = data.get("message") or response.reason_phrase or f"HTTP {response.status_code}"
        return EmailSendResult(error=error)


def _json_or_empty(response: httpx.Response) -> Dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def build_admin_notification(form_data: Dict[str, Any]) -> Dict[str, str]:
    """
    Compose the notification email sent to the admin inbox.

    Args:
        form_data (dict): Validated contact form fields.

    Returns:
        dict: ``subject`` and ``html`` for the email.
    """
    return {
        "subject": f"New Contact Form Submission from {form_data['name']}",
        "html": render_template("contact_admin.html", form_data),
    }


def build_confirmation(form_data: Dict[str, Any], company_name: str) -> Dict[str, str]:
    """Compose the acknowledgement email sent back to the submitter."""
    context = {"name": form_data["name"], "company_name": company_name}
    return {
        "subject": f"We received your message - {company_name}",
        "html": render_template("contact_confirmation.html", context),
    }
