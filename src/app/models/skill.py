import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, CreatedAtMixin, UUIDPrimaryKeyMixin


class SkillFamily(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "skill_families"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=True
    )

    skills: Mapped[list["Skill"]] = relationship(back_populates="family")

    def __repr__(self) -> str:
        return f"<SkillFamily {self.name}>"


class Skill(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # 'hard' for technical skills, 'soft' otherwise
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str | None] = mapped_column(nullable=True)
    family_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("skill_families.id"), nullable=False, index=True
    )

    family: Mapped[SkillFamily] = relationship(back_populates="skills", lazy="joined")
    versions: Mapped[list["SkillVersion"]] = relationship(back_populates="skill")

    def __repr__(self) -> str:
        return f"<Skill {self.name} ({self.type})>"


class SkillVersion(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "skill_versions"

    skill_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("skills.id"), nullable=False, index=True
    )
    version_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=True
    )

    skill: Mapped[Skill] = relationship(back_populates="versions")
