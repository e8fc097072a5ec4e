"""Read-only records produced by a ``SkillStore``.

Dates are parsed leniently: a value that is not a valid date becomes ``None``
so the aggregation can skip the row instead of failing the whole request.
"""

import datetime as dt
import uuid
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def parse_lenient_date(value: object) -> dt.date | None:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return dt.datetime.fromisoformat(value.strip()).date()
        except ValueError:
            return None
    return None


class SkillKind(StrEnum):
    TECHNICAL = "technical"
    SOFT = "soft"


class SkillReference(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID | None = None
    name: str
    kind: SkillKind = SkillKind.SOFT
    family: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def map_legacy_kind(cls, value: object) -> object:
        # The store tags technical skills as 'hard'.
        if isinstance(value, str):
            lowered = value.lower()
            if lowered in ("hard", "technical"):
                return SkillKind.TECHNICAL
            if lowered == "soft":
                return SkillKind.SOFT
        return value


class UserRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str | None = None
    fullname: str | None = None
    role: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class ExperienceRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID | None = None
    company: str | None = None
    title: str | None = None
    description: str | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    current: bool = False
    skills: list[SkillReference] = Field(default_factory=list)
    # Set when an end date was given but could not be parsed; None then
    # means unknown, not ongoing.
    end_date_invalid: bool = False

    @model_validator(mode="before")
    @classmethod
    def flag_invalid_end_date(cls, data: object) -> object:
        if isinstance(data, dict):
            raw = data.get("end_date")
            blank = raw is None or (isinstance(raw, str) and not raw.strip())
            if not blank and parse_lenient_date(raw) is None:
                data = {**data, "end_date_invalid": True}
        return data

    @property
    def has_valid_span(self) -> bool:
        return self.start_date is not None and not self.end_date_invalid

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, value: object) -> dt.date | None:
        return parse_lenient_date(value)

    @field_validator("current", mode="before")
    @classmethod
    def none_is_false(cls, value: object) -> bool:
        return bool(value)


class TrainingRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    date: dt.date | None = None
    provider: str | None = None
    user_skill_id: uuid.UUID | None = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: object) -> dt.date | None:
        return parse_lenient_date(value)


class CertificationRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    date: dt.date | None = None
    expiry_date: dt.date | None = None
    user_skill_id: uuid.UUID | None = None

    @field_validator("date", "expiry_date", mode="before")
    @classmethod
    def parse_dates(cls, value: object) -> dt.date | None:
        return parse_lenient_date(value)


class UserSkillRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID | None = None
    skill: SkillReference | None = None
    version_name: str | None = None
    level: int | None = None
    comment: str | None = None
    has_certification: bool = False
    certification_name: str | None = None
    certification_date: dt.date | None = None
    certification_expiry: dt.date | None = None
    has_trainings: bool = False
    trainings: list[TrainingRecord] = Field(default_factory=list)

    @field_validator("certification_date", "certification_expiry", mode="before")
    @classmethod
    def parse_dates(cls, value: object) -> dt.date | None:
        return parse_lenient_date(value)

    @field_validator("has_certification", "has_trainings", mode="before")
    @classmethod
    def none_is_false(cls, value: object) -> bool:
        return bool(value)
