# ventech_api/router/routers.py

from fastapi import FastAPI
from ventech_api.modules.contact.contact_controller import router as contact_router
from ventech_api.modules.frontend.frontend_controller import router as frontend_router
from ventech_api.modules.general.general_controller import router as general_router

def include_routers(app: FastAPI) -> None:
    app.include_router(general_router)
    app.include_router(contact_router)
    # Catch-all, must stay last
    app.include_router(frontend_router)
