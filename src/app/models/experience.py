import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, CreatedAtMixin, TimestampMixin, UUIDPrimaryKeyMixin
from app.models.skill import Skill

if TYPE_CHECKING:
    from app.models.user import User


class Experience(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "experiences"

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        "userid", ForeignKey("users.id"), nullable=True, index=True
    )
    company: Mapped[str] = mapped_column(String(200), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(nullable=False, default="")
    start_date: Mapped[date] = mapped_column("startdate", Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column("enddate", Date, nullable=True)
    current: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    user: Mapped["User"] = relationship(back_populates="experiences")
    experience_skills: Mapped[list["ExperienceSkill"]] = relationship(
        back_populates="experience"
    )

    def __repr__(self) -> str:
        return f"<Experience {self.title} @ {self.company}>"


class ExperienceSkill(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "experience_skills"

    experience_id: Mapped[uuid.UUID | None] = mapped_column(
        "experienceid", ForeignKey("experiences.id"), nullable=True, index=True
    )
    skill_id: Mapped[uuid.UUID | None] = mapped_column(
        "skillid", ForeignKey("skills.id"), nullable=True, index=True
    )

    experience: Mapped[Experience] = relationship(back_populates="experience_skills")
    skill: Mapped[Skill | None] = relationship()
