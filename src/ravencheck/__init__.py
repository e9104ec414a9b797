"""
Health check probe for RavenDB clusters.

    check = RavenDBHealthCheck("http://raven.local:8080", "orders")
    result = await check.check_health()
"""

from .config import ProbeConfig, ProbeSettings
from .domain.models import (
    Faulted,
    HealthCheckContext,
    HealthCheckRegistration,
    HealthCheckResult,
    HealthStatus,
    Healthy,
    ProbeResult,
    Unhealthy,
)
from .domain.interfaces import ClientSession, HealthCheck
from .exceptions import ConfigurationError, RavenCheckException, SessionError
from .probe import RavenDBHealthCheck
from .probe.executor import ProbeExecutor

__all__ = [
    "RavenDBHealthCheck",
    "ProbeExecutor",
    "ProbeConfig",
    "ProbeSettings",
    "HealthStatus",
    "HealthCheckResult",
    "HealthCheckContext",
    "HealthCheckRegistration",
    "HealthCheck",
    "ClientSession",
    "ProbeResult",
    "Healthy",
    "Unhealthy",
    "Faulted",
    "RavenCheckException",
    "ConfigurationError",
    "SessionError",
]
