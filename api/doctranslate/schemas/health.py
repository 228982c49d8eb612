from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str
    model: str
    api_key_configured: bool
