"""
Public API Endpoints

Routes used by the public site pages:
- Services and Projects listings/details (Home, Services, Projects pages)
- Contact form submission (Contact page)

Endpoints only handle:
- Request validation (Pydantic models, path id parsing)
- Rate limiting of the contact form
- Error handling and HTTP responses
- Delegating to the injected storage backend
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from studio.api.dependencies import get_storage, parse_path_id
from studio.api.schemas import (
    ContactCreate,
    ContactResponse,
    MessageResponse,
    ProjectRead,
    ServiceRead,
    ValidationErrorResponse,
)
from studio.core.rate_limit import contact_rate_limit, limiter
from studio.storage.interface import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

CONTACT_CONFIRMATION = "Thank you for your message! We will contact you soon."


@router.get(
    "/services",
    response_model=list[ServiceRead],
    summary="List services",
)
async def list_services(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_services()
    except Exception:
        logger.exception("Error fetching services")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching services"
        )


@router.get(
    "/services/{service_id}",
    response_model=ServiceRead,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
    summary="Get a service",
)
async def get_service(service_id: str, storage: Storage = Depends(get_storage)):
    """
    Get a single service by id.

    Raises:
        HTTPException 400: If the id is not an integer
        HTTPException 404: If no service has this id
    """
    entity_id = parse_path_id(service_id, "service")

    try:
        service = await storage.get_service(entity_id)
    except Exception:
        logger.exception(f"Error fetching service {entity_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching service"
        )

    if service is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found"
        )
    return service


@router.get(
    "/projects",
    response_model=list[ProjectRead],
    summary="List projects",
    description="Optionally filtered by a category substring (e.g. ?category=modern)",
)
async def list_projects(
    category: Optional[str] = Query(None, description="Substring of the categories field"),
    storage: Storage = Depends(get_storage),
):
    try:
        if category:
            return await storage.get_projects_by_category(category)
        return await storage.get_all_projects()
    except Exception:
        logger.exception("Error fetching projects")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching projects"
        )


@router.get(
    "/projects/{project_id}",
    response_model=ProjectRead,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
    summary="Get a project",
)
async def get_project(project_id: str, storage: Storage = Depends(get_storage)):
    entity_id = parse_path_id(project_id, "project")

    try:
        project = await storage.get_project(entity_id)
    except Exception:
        logger.exception(f"Error fetching project {entity_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching project"
        )

    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )
    return project


@router.post(
    "/contact",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}},
    summary="Submit the contact form",
)
@limiter.limit(contact_rate_limit)
async def submit_contact(
    request: Request,  # Required for rate limiting (slowapi expects parameter named 'request')
    body: ContactCreate,
    storage: Storage = Depends(get_storage),
) -> ContactResponse:
    """
    Store a contact form submission.

    Body validation failures are answered with 400 by the app-level
    validation handler before this function runs, so nothing is stored.
    """
    try:
        contact = await storage.create_contact(body)
    except Exception:
        logger.exception("Error submitting contact form")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error submitting contact form"
        )

    logger.info(f"Contact form submitted: id={contact.id} service={contact.service!r}")
    return ContactResponse(message=CONTACT_CONFIRMATION, contact=contact.model_dump())
