from collections.abc import MutableMapping
from datetime import UTC, datetime
from time import perf_counter
from typing import Any
from uuid import UUID

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def utcnow() -> datetime:
    """Timezone-aware current time, used for every timestamp column."""
    return datetime.now(UTC)


def epoch_ms() -> int:
    return int(utcnow().timestamp() * 1000)


def time_taken(start_time: float) -> str:
    elapsed = perf_counter() - start_time
    if elapsed < 1:
        return f"{elapsed * 1000:.1f}ms"
    minutes, seconds = divmod(elapsed, 60)
    return f"{int(minutes)}m {seconds:.2f}s"


def parse_uuid(value: str | UUID) -> UUID | None:
    """Return ``value`` as a UUID, or None when it is not a valid identifier."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (ValueError, AttributeError, TypeError):
        return None


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary
