from typing import Optional

from pydantic import BaseModel, StrictStr


class TextRequest(BaseModel):
    text: Optional[StrictStr] = None


class TextResponse(BaseModel):
    text: str
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
    success: bool = False


class HealthResponse(BaseModel):
    status: str
    message: str
