"""User ORM model. Owned by the identity system; read here to resolve creators."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from access_control.infrastructure.persistence.database import Base
from access_control.infrastructure.persistence.models.mixins import (
    CuidMixin,
    TimestampMixin,
)


class User(CuidMixin, TimestampMixin, Base):
    """User. Table: app_user. Unique username and email."""

    __tablename__ = "app_user"

    username: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
