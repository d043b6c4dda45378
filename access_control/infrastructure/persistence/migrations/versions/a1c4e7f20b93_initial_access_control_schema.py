"""Initial schema: app_user, role, permission, role_permission

Revision ID: a1c4e7f20b93
Revises:
Create Date: 2026-10-18 09:12:40.511203

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1c4e7f20b93"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def _created_by() -> sa.Column:
    return sa.Column(
        "created_by",
        sa.String(),
        sa.ForeignKey("app_user.id", ondelete="SET NULL"),
        nullable=True,
    )


def upgrade() -> None:
    """Create user, role and permission catalog tables."""
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("username", sa.String(length=150), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "role",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("code", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("requested_permissions", sa.JSON(), nullable=False),
        _created_by(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code", name="uq_role_code"),
    )
    op.create_index(op.f("ix_role_created_by"), "role", ["created_by"], unique=False)

    op.create_table(
        "permission",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("module", sa.String(), nullable=False),
        sa.Column("action", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _created_by(),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code", name="uq_permission_code"),
    )
    op.create_index(
        "ix_permission_module_action", "permission", ["module", "action"], unique=False
    )
    op.create_index(
        op.f("ix_permission_created_by"), "permission", ["created_by"], unique=False
    )

    op.create_table(
        "role_permission",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("role_id", sa.String(), nullable=False),
        sa.Column("permission_id", sa.String(), nullable=False),
        _created_by(),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["role_id"], ["role.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["permission_id"], ["permission.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("role_id", "permission_id", name="uq_role_permission"),
    )
    op.create_index(
        "ix_role_permission_role", "role_permission", ["role_id"], unique=False
    )
    op.create_index(
        op.f("ix_role_permission_created_by"),
        "role_permission",
        ["created_by"],
        unique=False,
    )


def downgrade() -> None:
    """Drop all access-control tables."""
    op.drop_index(op.f("ix_role_permission_created_by"), table_name="role_permission")
    op.drop_index("ix_role_permission_role", table_name="role_permission")
    op.drop_table("role_permission")
    op.drop_index(op.f("ix_permission_created_by"), table_name="permission")
    op.drop_index("ix_permission_module_action", table_name="permission")
    op.drop_table("permission")
    op.drop_index(op.f("ix_role_created_by"), table_name="role")
    op.drop_table("role")
    op.drop_table("app_user")
