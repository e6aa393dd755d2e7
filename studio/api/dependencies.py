"""
Dependency wiring for the API routers.

The storage backend and auth service are built once by ``create_app`` and kept
on ``app.state``; these functions hand them to route handlers.
"""

from fastapi import HTTPException, Request, status

from studio.core.exceptions import InvalidEntityIdError
from studio.core.validators import parse_entity_id
from studio.services.auth_service import AdminAuthService
from studio.storage.interface import Storage


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_auth_service(request: Request) -> AdminAuthService:
    return request.app.state.auth_service


def parse_path_id(raw_id: str, entity: str) -> int:
    """
    Parse a path id or raise HTTP 400.

    Args:
        raw_id: The id segment from the URL
        entity: Entity label used in the error message ("service", "project")
    """
    try:
        return parse_entity_id(raw_id)
    except InvalidEntityIdError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {entity} ID"
        )
