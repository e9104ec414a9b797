from enum import Enum
from typing import Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"

# --- Probe outcomes ---------------------------------------------------------

class Healthy(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["healthy"] = "healthy"

class Unhealthy(BaseModel):
    """Cluster reachable, but the requested database is not there."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["unhealthy"] = "unhealthy"
    reason: str

class Faulted(BaseModel):
    """Session init or the administrative call failed (incl. cancellation)."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["faulted"] = "faulted"
    cause: BaseException

ProbeResult = Union[Healthy, Unhealthy, Faulted]

# --- Host framework contract ------------------------------------------------

class HealthCheckRegistration(BaseModel):
    """
    Registration details owned by the host framework.
    failure_status is what a faulted check reports.
    """
    failure_status: HealthStatus = HealthStatus.UNHEALTHY

class HealthCheckContext(BaseModel):
    registration: HealthCheckRegistration = Field(default_factory=HealthCheckRegistration)

class HealthCheckResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: HealthStatus
    description: Optional[str] = None
    exception: Optional[BaseException] = None
    data: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def healthy(cls, description: Optional[str] = None, data: Optional[Dict[str, Any]] = None) -> "HealthCheckResult":
        return cls(status=HealthStatus.HEALTHY, description=description, data=data or {})

    @classmethod
    def unhealthy(
        cls,
        description: Optional[str] = None,
        exception: Optional[BaseException] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> "HealthCheckResult":
        return cls(status=HealthStatus.UNHEALTHY, description=description, exception=exception, data=data or {})
