"""
Database Models for the Studio Backend

This module defines the SQLModel schemas for:
- User: Accounts known to the backend (admin auth itself is env-based)
- Service: Design services offered by the studio
- Project: Portfolio entries shown on the Projects page
- Contact: Messages submitted through the public contact form

Each entity has a ``*Base`` model carrying the writable fields (used as the
storage create input and as the parent of the API schemas) and a table model
adding the auto-incrementing ``id``.

Design Decisions:
- Project.categories is a denormalized comma-joined tag string, filtered by
  substring containment rather than normalized into a tag table
- Project.scope is stored as a JSON list so both SQLite and PostgreSQL can hold it
- No foreign keys: Contact.service is the service *name* picked on the form
"""

from typing import Optional

from sqlalchemy import JSON, Column, String, Text
from sqlmodel import Field, SQLModel


class UserBase(SQLModel):
    username: str


class User(UserBase, table=True):
    """Registered user. No password is persisted here."""
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True, index=True)
    )


class ServiceBase(SQLModel):
    title: str
    description: str
    icon: str  # Pictogram identifier, e.g. "bi-palette"


class Service(ServiceBase, table=True):
    __tablename__ = "services"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(sa_column=Column(Text, nullable=False))


class ProjectBase(SQLModel):
    title: str
    description: str
    image: str
    categories: str
    details: str
    scope: list[str] = Field(default_factory=list)
    location: str
    size: str
    duration: str
    style: str
    year: str


class Project(ProjectBase, table=True):
    """
    Portfolio project.

    Fields:
    - categories: Comma-joined tags ("residential,modern"); callers split on
      comma and trim
    - scope: Ordered list of work items
    """
    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(sa_column=Column(Text, nullable=False))
    details: str = Field(sa_column=Column(Text, nullable=False))
    scope: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False)
    )


class ContactBase(SQLModel):
    name: str
    email: str
    phone: Optional[str] = None
    service: str
    message: str


class Contact(ContactBase, table=True):
    """Contact form submission. Read-only once stored."""
    __tablename__ = "contacts"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True)
    )
    message: str = Field(sa_column=Column(Text, nullable=False))
