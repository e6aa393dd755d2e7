"""
Admin API Endpoints

Routes used by the admin dashboard:
- Login check against the environment credentials
- CRUD for services and projects
- Read-only listings of contacts and users

Note: these routes carry no authorization check. The login endpoint only
answers whether the credentials match; the dashboard decides on its own
whether to show itself. Anyone who can reach the API can call these routes.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from studio.api.dependencies import get_auth_service, get_storage, parse_path_id
from studio.api.schemas import (
    ContactRead,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    ServiceCreate,
    ServiceRead,
    ServiceUpdate,
    UserRead,
)
from studio.core.rate_limit import limiter, login_rate_limit
from studio.services.auth_service import AdminAuthService
from studio.storage.interface import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin")


def _server_error(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": MessageResponse}},
    summary="Check admin credentials",
    description="Compares the submitted credentials with ADMIN_USERNAME/ADMIN_PASSWORD. No token is issued.",
)
@limiter.limit(login_rate_limit)
async def login(
    request: Request,  # Required for rate limiting
    body: LoginRequest,
    auth_service: AdminAuthService = Depends(get_auth_service),
) -> LoginResponse:
    try:
        authenticated = auth_service.verify(body.username, body.password)
    except Exception:
        logger.exception("Error processing login")
        raise _server_error("Error processing login")

    if not authenticated:
        logger.info(f"Admin login failed for username {body.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    logger.info(f"Admin login succeeded for username {body.username!r}")
    return LoginResponse(success=True)


# Services

@router.get("/services", response_model=list[ServiceRead])
async def admin_list_services(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_services()
    except Exception:
        logger.exception("Error fetching services")
        raise _server_error("Error fetching services")


@router.post(
    "/services",
    response_model=ServiceRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_service(body: ServiceCreate, storage: Storage = Depends(get_storage)):
    try:
        service = await storage.create_service(body)
    except Exception:
        logger.exception("Error creating service")
        raise _server_error("Error creating service")

    logger.info(f"Service created: id={service.id}")
    return service


@router.put(
    "/services/{service_id}",
    response_model=ServiceRead,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def update_service(
    service_id: str,
    body: ServiceUpdate,
    storage: Storage = Depends(get_storage),
):
    entity_id = parse_path_id(service_id, "service")

    try:
        service = await storage.update_service(
            entity_id, body.model_dump(exclude_unset=True, exclude_none=True)
        )
    except Exception:
        logger.exception(f"Error updating service {entity_id}")
        raise _server_error("Error updating service")

    if service is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found"
        )
    return service


@router.delete(
    "/services/{service_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def delete_service(service_id: str, storage: Storage = Depends(get_storage)):
    entity_id = parse_path_id(service_id, "service")

    try:
        deleted = await storage.delete_service(entity_id)
    except Exception:
        logger.exception(f"Error deleting service {entity_id}")
        raise _server_error("Error deleting service")

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found"
        )

    logger.info(f"Service deleted: id={entity_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Projects

@router.get("/projects", response_model=list[ProjectRead])
async def admin_list_projects(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_projects()
    except Exception:
        logger.exception("Error fetching projects")
        raise _server_error("Error fetching projects")


@router.post(
    "/projects",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_project(body: ProjectCreate, storage: Storage = Depends(get_storage)):
    """Create a project. ``scope`` may be a list or a comma-separated string."""
    try:
        project = await storage.create_project(body)
    except Exception:
        logger.exception("Error creating project")
        raise _server_error("Error creating project")

    logger.info(f"Project created: id={project.id}")
    return project


@router.put(
    "/projects/{project_id}",
    response_model=ProjectRead,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def update_project(
    project_id: str,
    body: ProjectUpdate,
    storage: Storage = Depends(get_storage),
):
    entity_id = parse_path_id(project_id, "project")

    try:
        project = await storage.update_project(
            entity_id, body.model_dump(exclude_unset=True, exclude_none=True)
        )
    except Exception:
        logger.exception(f"Error updating project {entity_id}")
        raise _server_error("Error updating project")

    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    return project


@router.delete(
    "/projects/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
)
async def delete_project(project_id: str, storage: Storage = Depends(get_storage)):
    entity_id = parse_path_id(project_id, "project")

    try:
        deleted = await storage.delete_project(entity_id)
    except Exception:
        logger.exception(f"Error deleting project {entity_id}")
        raise _server_error("Error deleting project")

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )

    logger.info(f"Project deleted: id={entity_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Read-only collections

@router.get("/contacts", response_model=list[ContactRead])
async def admin_list_contacts(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_contacts()
    except Exception:
        logger.exception("Error fetching contacts")
        raise _server_error("Error fetching contacts")


@router.get("/users", response_model=list[UserRead])
async def admin_list_users(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_users()
    except Exception:
        logger.exception("Error fetching users")
        raise _server_error("Error fetching users")
