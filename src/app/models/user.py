import uuid
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.experience import Experience
    from app.models.user_skill import UserSkill


class User(TimestampMixin, Base):
    __tablename__ = "users"

    # Mirrors the auth provider's user id, so it is never generated here.
    id: Mapped[uuid.UUID] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    fullname: Mapped[str] = mapped_column(String(200), nullable=False)
    role: Mapped[str] = mapped_column(String(30), nullable=False)

    experiences: Mapped[list["Experience"]] = relationship(back_populates="user")
    user_skills: Mapped[list["UserSkill"]] = relationship(back_populates="user")

    def __repr__(self) -> str:
        return f"<User {self.fullname} ({self.email})>"
