"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Reports the current quote count (read lock only, never blocks writers long)
"""

from fastapi import APIRouter, Depends, status

from quotes_api import __version__
from quotes_api.api.routes.quotes import get_quote_service
from quotes_api.core.repository_protocols import QuoteUseCases

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
def health_check(service: QuoteUseCases = Depends(get_quote_service)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "quotes-api",
        "version": __version__,
        "quotes": service.count_quotes(),
    }
