import time
from typing import Any, Dict, List, Optional, Union
from ..config import ProbeConfig, ProbeSettings
from ..domain.models import (
    Faulted,
    HealthCheckContext,
    HealthCheckResult,
    HealthStatus,
    ProbeResult,
    Unhealthy,
)
from .executor import ProbeExecutor, SessionFactory
from ..connectors.factory import get_session

class RavenDBHealthCheck:
    """
    Facade Pattern: the HealthCheck the host framework registers and calls.
    Translates probe outcomes into the host's three-state result.
    """
    def __init__(
        self,
        connection_string: Union[str, List[str], None],
        database_name: Optional[str] = None,
        *,
        certificate_pem_path: Optional[str] = None,
        trust_store_path: Optional[str] = None,
        name: str = "ravendb",
        session_factory: SessionFactory = get_session,
    ):
        # Raises ConfigurationError right here, never during a check
        self.config = ProbeConfig.create(
            urls=connection_string,
            database=database_name,
            certificate_pem_path=certificate_pem_path,
            trust_store_path=trust_store_path,
        )
        self._name = name
        self._executor = ProbeExecutor(self.config, session_factory)

    @classmethod
    def from_settings(cls, settings: ProbeSettings, **kwargs) -> "RavenDBHealthCheck":
        config = settings.to_probe_config()
        return cls(
            list(config.urls),
            config.database,
            certificate_pem_path=config.certificate_pem_path,
            trust_store_path=config.trust_store_path,
            **kwargs,
        )

    @property
    def name(self) -> str:
        return self._name

    async def check_health(self, context: Optional[HealthCheckContext] = None) -> HealthCheckResult:
        start_time = time.perf_counter()
        outcome = await self._executor.check()
        latency = (time.perf_counter() - start_time) * 1000  # ms

        data = self._describe(latency)
        return self._to_result(outcome, context, data)

    def _describe(self, latency_ms: float) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "urls": list(self.config.urls),
            "latency_ms": round(latency_ms, 2),
        }
        if self.config.database:
            data["database"] = self.config.database
        return data

    @staticmethod
    def _to_result(
        outcome: ProbeResult,
        context: Optional[HealthCheckContext],
        data: Dict[str, Any],
    ) -> HealthCheckResult:
        if isinstance(outcome, Unhealthy):
            return HealthCheckResult.unhealthy(outcome.reason, data=data)

        if isinstance(outcome, Faulted):
            # Severity of a fault belongs to the host's registration
            status = context.registration.failure_status if context else HealthStatus.UNHEALTHY
            return HealthCheckResult(
                status=status,
                description=str(outcome.cause) or type(outcome.cause).__name__,
                exception=outcome.cause,
                data=data,
            )

        return HealthCheckResult.healthy(data=data)
