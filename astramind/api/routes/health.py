"""
Health Check Routes - System health and monitoring endpoints.

These endpoints are used for:
1. Load balancer health checks
2. Container liveness/readiness probes
3. Quick system status verification
"""
from fastapi import APIRouter, Depends

from astramind import __version__
from astramind.api.dependencies import get_services
from astramind.core.logging_config import get_logger
from astramind.llm.client import LLMClient
from astramind.models import HealthResponse
from astramind.services.container import ServiceContainer

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get("", response_model=HealthResponse, summary="Health check endpoint")
async def health_check() -> HealthResponse:
    """
    Perform a basic health check.

    Verifies that the API is running and responsive. It does not contact
    the AI provider.
    """
    logger.debug("Health check requested")
    return HealthResponse(status="healthy", version=__version__)


@router.get("/ready", response_model=HealthResponse, summary="Readiness check endpoint")
async def readiness_check(services: ServiceContainer = Depends(get_services)) -> HealthResponse:
    """
    Perform a readiness check.

    Reports the configured provider and current store counts. A missing
    provider credential does not make the service unready; chat calls
    will fail individually instead.
    """
    logger.debug("Readiness check requested")

    provider = None
    client = getattr(services.gateway, "llm_client", None)
    if isinstance(client, LLMClient):
        provider = client.provider if client.is_configured else f"{client.provider} (no api key)"

    return HealthResponse(
        status="ready",
        version=__version__,
        provider=provider,
        store=services.storage.stats(),
    )
