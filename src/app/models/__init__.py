from app.models.base import Base
from app.models.experience import Experience, ExperienceSkill
from app.models.skill import Skill, SkillFamily, SkillVersion
from app.models.user import User
from app.models.user_skill import Certification, Training, UserSkill

__all__ = [
    "Base",
    "Certification",
    "Experience",
    "ExperienceSkill",
    "Skill",
    "SkillFamily",
    "SkillVersion",
    "Training",
    "User",
    "UserSkill",
]
