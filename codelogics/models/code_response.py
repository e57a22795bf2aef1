"""Response models for the code generation API."""

from pydantic import BaseModel, Field

from .enums import ResponseSource


class CodeResponse(BaseModel):
    """Successful reply to a generation request.

    ``code`` carries the full markdown answer (not only code) and
    ``source`` names the stage of the fallback chain that wrote it.
    """

    success: bool = True
    code: str
    source: ResponseSource


class CodeHealthResponse(BaseModel):
    """Body of ``GET /api/code/health``."""

    status: str = "OK"
    message: str = "Code API is running"
    timestamp: str


class HealthResponse(BaseModel):
    """Body of the top-level ``GET /health``."""

    status: str = "OK"
    timestamp: str
    uptime: float = Field(..., description="Seconds since the application started.")
