"""API controller for code generation.

The generate endpoint is a plain function so FastAPI runs the blocking
provider chain in its worker thread pool.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from loguru import logger

from ..models.code_request import CodeRequest
from ..models.code_response import CodeHealthResponse, CodeResponse
from ..services.code_service import CodeService, get_code_service

router = APIRouter(prefix="/api/code", tags=["Code"])


@router.post("/generate", response_model=CodeResponse)
def generate_endpoint(
    request: CodeRequest,
    service: CodeService = Depends(get_code_service),
) -> CodeResponse:
    """Answer a developer prompt.

    Always responds with 200 once the request body is valid; provider
    outages and internal failures degrade to a local answer whose
    ``source`` says which stage wrote it.  A ``PromptValidationError``
    raised by the service is turned into a 400 by the application's
    exception handler.
    """
    result = service.generate(request.prompt)
    logger.info("Answer generated by {}", result.source.value)
    return CodeResponse(code=result.text, source=result.source)


@router.get("/health", response_model=CodeHealthResponse)
def code_health_endpoint() -> CodeHealthResponse:
    """Health check for the code API."""
    return CodeHealthResponse(timestamp=datetime.now(timezone.utc).isoformat())
