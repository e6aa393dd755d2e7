"""Initial schema

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create initial database schema:
    - users: Registered usernames (admin auth is env-based)
    - services: Service catalog
    - projects: Portfolio projects (scope stored as JSON list)
    - contacts: Contact form submissions

    Tables created at startup by SQLModel.metadata.create_all are skipped.
    """
    bind = op.get_bind()
    existing_tables = inspect(bind).get_table_names()

    if 'users' not in existing_tables:
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
            sa.Column('username', sa.String(length=255), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sqlite_autoincrement=True,
        )
        op.create_index('ix_users_username', 'users', ['username'], unique=True)

    if 'services' not in existing_tables:
        op.create_table(
            'services',
            sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('icon', sa.String(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sqlite_autoincrement=True,
        )

    if 'projects' not in existing_tables:
        op.create_table(
            'projects',
            sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('image', sa.String(), nullable=False),
            sa.Column('categories', sa.String(), nullable=False),
            sa.Column('details', sa.Text(), nullable=False),
            sa.Column('scope', sa.JSON(), nullable=False),
            sa.Column('location', sa.String(), nullable=False),
            sa.Column('size', sa.String(), nullable=False),
            sa.Column('duration', sa.String(), nullable=False),
            sa.Column('style', sa.String(), nullable=False),
            sa.Column('year', sa.String(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sqlite_autoincrement=True,
        )

    if 'contacts' not in existing_tables:
        op.create_table(
            'contacts',
            sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('email', sa.String(), nullable=False),
            sa.Column('phone', sa.String(length=50), nullable=True),
            sa.Column('service', sa.String(), nullable=False),
            sa.Column('message', sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sqlite_autoincrement=True,
        )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('contacts')
    op.drop_table('projects')
    op.drop_table('services')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
