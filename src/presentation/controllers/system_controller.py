"""System endpoints exposing liveness, readiness and status."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.application.dtos.health_dto import DecisionDTO, StatusDTO
from src.application.use_cases.health_use_cases import EvaluateHealthUseCase
from src.domain.entities.health import HealthStatus, ProbeKind
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


async def _evaluate(
    kind: ProbeKind,
    response: Response,
    use_case: EvaluateHealthUseCase,
) -> DecisionDTO:
    decision = await use_case.execute(kind)
    if decision.status is not HealthStatus.HEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.info(
            "health.check.not_healthy",
            kind=kind.value,
            status=decision.status.value,
        )
    return decision


@router.get(
    "/healthz",
    response_model=DecisionDTO,
    responses={503: {"model": DecisionDTO}},
)
@inject
async def liveness(
    response: Response,
    evaluate_health_use_case: EvaluateHealthUseCase = Depends(
        Provide["evaluate_health_use_case"]
    ),
) -> DecisionDTO:
    """Liveness probe: is the process alive and able to respond."""
    return await _evaluate(ProbeKind.LIVENESS, response, evaluate_health_use_case)


@router.get(
    "/readyz",
    response_model=DecisionDTO,
    responses={503: {"model": DecisionDTO}},
)
@inject
async def readiness(
    response: Response,
    evaluate_health_use_case: EvaluateHealthUseCase = Depends(
        Provide["evaluate_health_use_case"]
    ),
) -> DecisionDTO:
    """Readiness probe: can the process serve traffic right now."""
    return await _evaluate(ProbeKind.READINESS, response, evaluate_health_use_case)


@router.get("/status", response_model=StatusDTO)
async def service_status() -> StatusDTO:
    """Return a constant payload for load balancers and container checks."""
    return StatusDTO()
