# ventech_api/common/dependencies.py

from typing import Optional
from fastapi import Depends, Request

from ventech_api.common.config import Settings
from ventech_api.common.utils.email_service import ResendEmailClient

def get_app_settings(request: Request) -> Settings:
    """
    Dependency returning the Settings instance the application was created with.
    """
    return request.app.state.settings

def get_email_client(settings: Settings = Depends(get_app_settings)) -> Optional[ResendEmailClient]:
    """
    Dependency returning a Resend client, or None when no API key is configured.
    """
    if not settings.email_configured:
        return None
    return ResendEmailClient.from_settings(settings)
