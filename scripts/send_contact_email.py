import asyncio
import logging
import os
import sys

# Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ventech_api.common.config import get_settings
from ventech_api.common.dependencies import get_email_client
from ventech_api.modules.contact.contact_service import process_contact_form

logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")

async def send_contact_email(recipient: str):
    """Push one submission through the real contact pipeline using the .env settings."""
    settings = get_settings()
    submission = {
        "name": "Contact Form Check",
        "email": recipient,
        "company": "BlackBugs Technologies",
        "message": "This is a test submission.\nIf you can read this, the relay works.",
    }

    print(f"Sending contact form submission as {recipient}...")
    result = await process_contact_form(submission, settings, get_email_client(settings))
    print(f"{result.status_code}: {result.message}")

if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python scripts/send_contact_email.py <submitter-email>")
    asyncio.run(send_contact_email(sys.argv[1]))
