# ventech_api/modules/frontend/frontend_controller.py

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import FileResponse, JSONResponse

from ventech_api.common.config import Settings
from ventech_api.common.dependencies import get_app_settings
from ventech_api.common.utils.global_messages import GlobalMessages

# Registered last: every GET that no other route claims lands here.
router = APIRouter(tags=["frontend"], include_in_schema=False)
logger = logging.getLogger(__name__)

RESERVED_PREFIXES = ("/api/", "/health")

def resolve_static_file(dist_path: Path, requested: str) -> Optional[Path]:
    """
    Map a request path onto a file inside the bundle directory.

    Returns None when the path is empty, missing, not a regular file, or
    resolves outside ``dist_path``.
    """
    if not requested:
        return None
    root = dist_path.resolve()
    candidate = (root / requested.lstrip("/")).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate

@router.get("/{full_path:path}")
async def serve_frontend(
    full_path: str,
    request: Request,
    settings: Settings = Depends(get_app_settings),
):
    if request.url.path.startswith(RESERVED_PREFIXES):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": GlobalMessages.API_ENDPOINT_NOT_FOUND},
        )

    static_file = resolve_static_file(settings.SPA_DIST_PATH, full_path)
    if static_file:
        return FileResponse(static_file)

    index_file = settings.SPA_DIST_PATH / "index.html"
    if not index_file.is_file():
        logger.error(f"Frontend entry document missing: {index_file}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": GlobalMessages.FRONTEND_NOT_FOUND},
        )
    return FileResponse(index_file)
