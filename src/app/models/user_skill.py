import datetime as dt
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from app.models.skill import Skill, SkillVersion

if TYPE_CHECKING:
    from app.models.user import User


class UserSkill(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "user_skills"

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        "userid", ForeignKey("users.id"), nullable=True, index=True
    )
    skill_id: Mapped[uuid.UUID | None] = mapped_column(
        "skillid", ForeignKey("skills.id"), nullable=True
    )
    version_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("skill_versions.id"), nullable=True
    )
    level: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(nullable=True)
    has_certification: Mapped[bool | None] = mapped_column(
        "hascertification", Boolean, nullable=True
    )
    # Inline certification columns predate the certifications table.
    certification_name: Mapped[str | None] = mapped_column(
        "certificationname", String(200), nullable=True
    )
    certification_date: Mapped[dt.date | None] = mapped_column(
        "certificationdate", Date, nullable=True
    )
    certification_expiry: Mapped[dt.date | None] = mapped_column(
        "certificationexpiry", Date, nullable=True
    )
    has_trainings: Mapped[bool | None] = mapped_column("hastrainings", Boolean, nullable=True)

    user: Mapped["User"] = relationship(back_populates="user_skills")
    skill: Mapped[Skill | None] = relationship()
    version: Mapped[SkillVersion | None] = relationship()
    trainings: Mapped[list["Training"]] = relationship(back_populates="user_skill")
    certifications: Mapped[list["Certification"]] = relationship(back_populates="user_skill")

    def __repr__(self) -> str:
        return f"<UserSkill {self.skill_id} level={self.level}>"


class Training(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "trainings"

    user_skill_id: Mapped[uuid.UUID] = mapped_column(
        "userskill_id", ForeignKey("user_skills.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    provider: Mapped[str | None] = mapped_column(String(200), nullable=True)

    user_skill: Mapped[UserSkill] = relationship(back_populates="trainings")


class Certification(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "certifications"

    user_skill_id: Mapped[uuid.UUID] = mapped_column(
        "userskill_id", ForeignKey("user_skills.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    expiry_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)

    user_skill: Mapped[UserSkill] = relationship(back_populates="certifications")
