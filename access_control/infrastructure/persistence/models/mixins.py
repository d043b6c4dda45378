"""Column mixins shared by the access-control tables.

Every row has a CUID key. Roles, catalog entries and links also record the
user who created them; AuditedEntityMixin bundles that with timestamps.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from access_control.shared.utils.generators import generate_cuid


class CuidMixin:
    """String primary key ``id`` minted by generate_cuid on insert."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """``created_at`` / ``updated_at`` filled by the database clock."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class CreatorMixin:
    """``created_by``: the acting user's id. Deleting that user leaves NULL here."""

    @declared_attr
    def created_by(cls) -> Mapped[str | None]:
        return mapped_column(
            String,
            ForeignKey("app_user.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        )


class AuditedEntityMixin(CuidMixin, TimestampMixin, CreatorMixin):
    """Key, timestamps and creator: the columns of roles and catalog entries."""
