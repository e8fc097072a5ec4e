import uuid
from abc import ABC, abstractmethod
from collections.abc import Sequence

from app.schemas.records import (
    CertificationRecord,
    ExperienceRecord,
    UserRecord,
    UserSkillRecord,
)


class SkillStore(ABC):
    @abstractmethod
    async def get_user(self, user_id: uuid.UUID) -> UserRecord | None:
        """Return the user, or None if the id does not resolve."""
        ...

    @abstractmethod
    async def list_experiences(self, user_id: uuid.UUID) -> list[ExperienceRecord]:
        """Experiences with their linked skills and families, most recent start first."""
        ...

    @abstractmethod
    async def list_user_skills(self, user_id: uuid.UUID) -> list[UserSkillRecord]:
        """User-skills with skill, skill version and nested trainings."""
        ...

    @abstractmethod
    async def list_certifications(
        self, user_skill_ids: Sequence[uuid.UUID]
    ) -> list[CertificationRecord]:
        """Certifications attached to any of the given user-skills."""
        ...
