"""
Health checks with dependency validation.

- /health/live (Liveness): Basic app responsiveness - no external deps
- /health/ready (Readiness): Database and uploads disk checks
- /health (Combined): Readiness plus service metadata

Response Format
---------------
{
    "status": "ready" | "not_ready" | "live",
    "timestamp": "2025-01-01T12:00:00+00:00",
    "version": "1.0.0",
    "checks": {
        "database": {"status": "pass", "response_ms": 3},
        "disk": {"status": "pass", "usage_percent": 45.0}
    }
}
"""

from asyncio import wait_for
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from time import perf_counter
from typing import Any

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from psutil import disk_usage
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.status import HTTP_200_OK, HTTP_503_SERVICE_UNAVAILABLE

from cms.configs import settings
from cms.db.database import transaction

DATABASE_TIMEOUT = 2.0


class CheckStatus(StrEnum):
    """Status values for individual health checks."""

    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


class OverallStatus(StrEnum):
    """Overall health status."""

    READY = "ready"
    NOT_READY = "not_ready"
    LIVE = "live"


@dataclass
class ComponentCheck:
    """Result of an individual health check component."""

    status: CheckStatus
    response_ms: int | None = None
    message: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"status": self.status.value}
        if self.response_ms is not None:
            result["response_ms"] = self.response_ms
        if self.message is not None:
            result["message"] = self.message
        if self.details:
            result.update(self.details)
        return result


@dataclass
class HealthStatus:
    """
    Complete health status response.

    Attributes
    ----------
    status : OverallStatus
        Overall health status
    timestamp : str
        ISO format timestamp
    version : str
        Application version
    checks : dict[str, ComponentCheck]
        Individual component checks
    """

    status: OverallStatus
    timestamp: str
    version: str
    checks: dict[str, ComponentCheck] = field(default_factory=dict)

    @property
    def is_healthy(self) -> bool:
        return self.status in (OverallStatus.READY, OverallStatus.LIVE)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "timestamp": self.timestamp,
            "version": self.version,
            "checks": {name: check.to_dict() for name, check in self.checks.items()},
        }


def _now() -> str:
    return datetime.now(UTC).isoformat()


def _elapsed_ms(start: float) -> int:
    return int((perf_counter() - start) * 1000)


async def check_database() -> ComponentCheck:
    """Run ``SELECT 1`` against the configured database."""
    start = perf_counter()
    try:
        async with transaction() as session:
            await wait_for(session.execute(text("SELECT 1")), timeout=DATABASE_TIMEOUT)
    except TimeoutError:
        return ComponentCheck(
            status=CheckStatus.FAIL,
            response_ms=_elapsed_ms(start),
            message="Database check timed out",
        )
    except (SQLAlchemyError, OSError, RuntimeError) as e:
        return ComponentCheck(
            status=CheckStatus.FAIL,
            response_ms=_elapsed_ms(start),
            message=f"Database check failed: {type(e).__name__}",
        )
    return ComponentCheck(status=CheckStatus.PASS, response_ms=_elapsed_ms(start))


def check_disk() -> ComponentCheck:
    """Check free space on the volume holding the uploads directory."""
    target = settings.UPLOADS_DIR if settings.UPLOADS_DIR.exists() else "."
    try:
        usage_percent = disk_usage(str(target)).percent
    except OSError as e:
        return ComponentCheck(status=CheckStatus.WARN, message=f"Could not check disk: {e!s}")

    if usage_percent > 95:
        status = CheckStatus.FAIL
    elif usage_percent > 90:
        status = CheckStatus.WARN
    else:
        status = CheckStatus.PASS
    return ComponentCheck(status=status, details={"usage_percent": usage_percent})


async def check_readiness() -> HealthStatus:
    """Validate the database and disk; any failing check marks the service not ready."""
    checks = {"database": await check_database(), "disk": check_disk()}
    failed = any(check.status == CheckStatus.FAIL for check in checks.values())
    return HealthStatus(
        status=OverallStatus.NOT_READY if failed else OverallStatus.READY,
        timestamp=_now(),
        version=settings.APP_VERSION,
        checks=checks,
    )


def check_liveness() -> HealthStatus:
    return HealthStatus(status=OverallStatus.LIVE, timestamp=_now(), version=settings.APP_VERSION)


def setup_health_routes(app: FastAPI) -> None:
    """Register ``/health``, ``/health/live`` and ``/health/ready`` on the app."""

    @app.get("/health", tags=["🩺 Health"], summary="Service and database status")
    async def health() -> ORJSONResponse:
        status = await check_readiness()
        content = {"service": settings.APP_NAME, **status.to_dict()}
        code = HTTP_200_OK if status.is_healthy else HTTP_503_SERVICE_UNAVAILABLE
        return ORJSONResponse(content=content, status_code=code)

    @app.get("/health/live", tags=["🩺 Health"], summary="Liveness probe")
    async def liveness() -> ORJSONResponse:
        return ORJSONResponse(content=check_liveness().to_dict())

    @app.get("/health/ready", tags=["🩺 Health"], summary="Readiness probe")
    async def readiness() -> ORJSONResponse:
        status = await check_readiness()
        code = HTTP_200_OK if status.is_healthy else HTTP_503_SERVICE_UNAVAILABLE
        return ORJSONResponse(content=status.to_dict(), status_code=code)
