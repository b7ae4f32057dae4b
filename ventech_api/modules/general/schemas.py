# ventech_api/modules/general/schemas.py

from pydantic import BaseModel

class MessageResponse(BaseModel):
    message: str
