# ventech_api/modules/general/general_controller.py

from fastapi import APIRouter, Depends

from ventech_api.common.config import Settings
from ventech_api.common.dependencies import get_app_settings
from ventech_api.common.utils.global_messages import GlobalMessages
from ventech_api.modules.general import schemas

router = APIRouter(prefix="/api", tags=["general"])

@router.get("/ping", response_model=schemas.MessageResponse)
async def ping(settings: Settings = Depends(get_app_settings)):
    """
    Liveness check. Replies with PING_MESSAGE, or "ping" when it is not set.
    """
    return schemas.MessageResponse(message=settings.PING_MESSAGE)

@router.get("/demo", response_model=schemas.MessageResponse)
async def demo():
    return schemas.MessageResponse(message=GlobalMessages.DEMO_MESSAGE)
