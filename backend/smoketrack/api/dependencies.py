"""Request Dependencies - caller identity, clock, and civil zone for route handlers.

Invariants:
    - Identity comes from the X-User-Id header set by the upstream auth layer
    - Missing or malformed identity raises UnauthenticatedError (401) before any DB work
    - Routes read time only through get_clock (overridden in tests)
"""

from datetime import tzinfo
from uuid import UUID

from fastapi import Depends, Header, Query
from fastapi.exceptions import RequestValidationError

from smoketrack.config import Settings, get_settings
from smoketrack.core.civil_time import civil_zone
from smoketrack.core.clock import Clock
from smoketrack.core.domain_types import UserId
from smoketrack.core.errors import UnauthenticatedError
from smoketrack.infrastructure.clock import system_clock


USER_ID_HEADER = "X-User-Id"


async def get_current_user_id(
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
) -> UserId:
    if not x_user_id:
        raise UnauthenticatedError()
    try:
        return UserId(UUID(x_user_id))
    except ValueError:
        raise UnauthenticatedError("Invalid caller identity")


def get_clock() -> Clock:
    return system_clock


def get_civil_zone() -> tzinfo:
    return civil_zone(get_settings().civil_utc_offset_hours)


def get_violation_limit(
    limit: int | None = Query(None),
    settings: Settings = Depends(get_settings),
) -> int:
    """Page size for the violation list, bounded by current settings."""
    if limit is None:
        return settings.violation_list_default_limit
    if not 1 <= limit <= settings.violation_list_max_limit:
        raise RequestValidationError([{
            "loc": ("query", "limit"),
            "msg": f"limit must be between 1 and {settings.violation_list_max_limit}",
            "type": "value_error",
        }])
    return limit
