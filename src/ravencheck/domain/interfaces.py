from typing import List, Optional, Protocol, runtime_checkable
from .models import HealthCheckContext, HealthCheckResult

@runtime_checkable
class ClientSession(Protocol):
    """
    One open connection context to the cluster.
    Owned by a single check invocation and closed before it returns.
    """
    def get_database_names(self, start: int, page_size: int) -> List[str]:
        ...

    def close(self) -> None:
        ...

    def __enter__(self) -> "ClientSession":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...

@runtime_checkable
class HealthCheck(Protocol):
    """Check abstraction consumed by the host framework."""

    @property
    def name(self) -> str:
        ...

    async def check_health(self, context: Optional[HealthCheckContext] = None) -> HealthCheckResult:
        ...
