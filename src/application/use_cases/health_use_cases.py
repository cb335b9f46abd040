"""Use cases for the liveness and readiness endpoints."""

from src.application.dtos.health_dto import DecisionDTO
from src.domain.entities.health import ProbeKind
from src.domain.ports.health_check import IHealthCheckService


class EvaluateHealthUseCase:
    """Use case responsible for returning the health decision of one kind."""

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        expose_errors: bool = False,
    ) -> None:
        self._health_check_service = health_check_service
        self._expose_errors = expose_errors

    async def execute(self, kind: ProbeKind) -> DecisionDTO:
        decision = await self._health_check_service.evaluate(kind)
        return DecisionDTO.from_domain(decision, expose_errors=self._expose_errors)
