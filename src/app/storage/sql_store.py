import uuid
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Certification, Experience, ExperienceSkill, Skill, User, UserSkill
from app.schemas.records import (
    CertificationRecord,
    ExperienceRecord,
    SkillReference,
    TrainingRecord,
    UserRecord,
    UserSkillRecord,
)
from app.storage.skill_store import SkillStore


def _skill_reference(skill: Skill | None) -> SkillReference | None:
    if skill is None:
        return None
    return SkillReference(
        id=skill.id,
        name=skill.name,
        kind=skill.type,
        family=skill.family.name if skill.family else None,
    )


class SqlSkillStore(SkillStore):
    """SkillStore reading the hosted PostgreSQL schema through SQLAlchemy."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def get_user(self, user_id: uuid.UUID) -> UserRecord | None:
        result = await self._db.execute(select(User).where(User.id == user_id))
        user = result.scalar_one_or_none()
        return UserRecord.model_validate(user) if user else None

    async def list_experiences(self, user_id: uuid.UUID) -> list[ExperienceRecord]:
        result = await self._db.execute(
            select(Experience)
            .where(Experience.user_id == user_id)
            .options(
                selectinload(Experience.experience_skills)
                .selectinload(ExperienceSkill.skill)
                .selectinload(Skill.family)
            )
            .order_by(Experience.start_date.desc())
        )

        records: list[ExperienceRecord] = []
        for exp in result.scalars().all():
            skills = [_skill_reference(link.skill) for link in exp.experience_skills]
            records.append(
                ExperienceRecord(
                    id=exp.id,
                    user_id=exp.user_id,
                    company=exp.company,
                    title=exp.title,
                    description=exp.description,
                    start_date=exp.start_date,
                    end_date=exp.end_date,
                    current=exp.current,
                    skills=[s for s in skills if s is not None],
                )
            )
        return records

    async def list_user_skills(self, user_id: uuid.UUID) -> list[UserSkillRecord]:
        result = await self._db.execute(
            select(UserSkill)
            .where(UserSkill.user_id == user_id)
            .options(
                selectinload(UserSkill.skill).selectinload(Skill.family),
                selectinload(UserSkill.version),
                selectinload(UserSkill.trainings),
            )
        )

        records: list[UserSkillRecord] = []
        for us in result.scalars().all():
            records.append(
                UserSkillRecord(
                    id=us.id,
                    user_id=us.user_id,
                    skill=_skill_reference(us.skill),
                    version_name=us.version.version_name if us.version else None,
                    level=us.level,
                    comment=us.comment,
                    has_certification=us.has_certification,
                    certification_name=us.certification_name,
                    certification_date=us.certification_date,
                    certification_expiry=us.certification_expiry,
                    has_trainings=us.has_trainings,
                    trainings=[TrainingRecord.model_validate(t) for t in us.trainings],
                )
            )
        return records

    async def list_certifications(
        self, user_skill_ids: Sequence[uuid.UUID]
    ) -> list[CertificationRecord]:
        if not user_skill_ids:
            return []
        result = await self._db.execute(
            select(Certification).where(Certification.user_skill_id.in_(list(user_skill_ids)))
        )
        return [CertificationRecord.model_validate(c) for c in result.scalars().all()]
