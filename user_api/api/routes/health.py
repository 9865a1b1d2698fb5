"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - timestamp captured at request time, ISO-8601 UTC with millisecond precision and Z suffix
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from user_api.core.domain_types import ServiceStatus

router = APIRouter(prefix="/health", tags=["health"])


def utc_timestamp() -> str:
    """Current UTC time as e.g. 2024-05-01T12:00:00.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": ServiceStatus.HEALTHY.value,
        "timestamp": utc_timestamp(),
    }
