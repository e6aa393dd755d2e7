"""
API Request and Response Schemas

This module defines the request and response models for the API.
Separated from endpoints to keep concerns separated and enable reuse.

Design Principles:
- Create models extend the storage ``*Base`` models, so a validated request
  body can be handed straight to storage
- Update models make every field optional; only supplied fields are merged
- Read models add ``id`` and shape every JSON response
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, field_validator
from sqlmodel import Field, SQLModel

from studio.core.validators import normalize_scope
from studio.db.models import ContactBase, ProjectBase, ServiceBase, UserBase


class MessageResponse(BaseModel):
    """Body of every error response."""
    message: str


class ValidationErrorDetail(BaseModel):
    path: list[Union[str, int]]
    message: str
    type: str


class ValidationErrorResponse(BaseModel):
    message: str = "Validation error"
    errors: list[ValidationErrorDetail]


# Auth

class LoginRequest(BaseModel):
    """Admin credentials. Missing fields simply fail the credential check."""
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    success: bool = True


# Users

class UserRead(UserBase):
    id: int


# Services

class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(SQLModel):
    title: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None


class ServiceRead(ServiceBase):
    id: int


# Projects

class ProjectCreate(ProjectBase):
    """Scope may be sent as a list or as a comma-separated string."""

    @field_validator("scope", mode="before")
    @classmethod
    def split_scope(cls, value: Any) -> Any:
        return normalize_scope(value)


class ProjectUpdate(SQLModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    categories: Optional[str] = None
    details: Optional[str] = None
    scope: Optional[list[str]] = None
    location: Optional[str] = None
    size: Optional[str] = None
    duration: Optional[str] = None
    style: Optional[str] = None
    year: Optional[str] = None

    @field_validator("scope", mode="before")
    @classmethod
    def split_scope(cls, value: Any) -> Any:
        return normalize_scope(value)


class ProjectRead(ProjectBase):
    id: int


# Contacts

class ContactCreate(ContactBase):
    """Public contact form submission."""
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: Optional[str] = None
    service: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactRead(ContactBase):
    id: int


class ContactResponse(BaseModel):
    message: str
    contact: ContactRead
