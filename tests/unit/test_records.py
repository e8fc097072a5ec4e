"""Unit tests for the store record schemas."""

import uuid
from datetime import UTC, date, datetime
from types import SimpleNamespace

import pytest

from app.schemas.records import (
    ExperienceRecord,
    SkillKind,
    SkillReference,
    TrainingRecord,
    UserSkillRecord,
    parse_lenient_date,
)

pytestmark = pytest.mark.unit


class TestParseLenientDate:
    def test_iso_string(self) -> None:
        assert parse_lenient_date("2021-03-04") == date(2021, 3, 4)

    def test_timestamp_string(self) -> None:
        assert parse_lenient_date("2021-03-04T10:00:00+00:00") == date(2021, 3, 4)

    def test_datetime_becomes_date(self) -> None:
        assert parse_lenient_date(datetime(2021, 3, 4, 8, tzinfo=UTC)) == date(2021, 3, 4)

    @pytest.mark.parametrize("value", ["not-a-date", "", None, 20210304, "2021-13-40"])
    def test_unparseable_is_none(self, value) -> None:
        assert parse_lenient_date(value) is None


class TestSkillReference:
    def test_hard_maps_to_technical(self) -> None:
        assert SkillReference(name="Python", kind="hard").kind == SkillKind.TECHNICAL

    def test_soft_kind(self) -> None:
        assert SkillReference(name="Teamwork", kind="SOFT").kind == SkillKind.SOFT

    def test_family_is_optional(self) -> None:
        assert SkillReference(name="Python").family is None


class TestExperienceRecord:
    def test_malformed_dates_become_none(self) -> None:
        exp = ExperienceRecord(id=uuid.uuid4(), start_date="garbage", end_date="2022-01-01")
        assert exp.start_date is None
        assert exp.end_date == date(2022, 1, 1)

    def test_null_current_flag_is_false(self) -> None:
        exp = ExperienceRecord(id=uuid.uuid4(), current=None)
        assert exp.current is False

    def test_unparseable_end_date_is_flagged(self) -> None:
        exp = ExperienceRecord(id=uuid.uuid4(), start_date="2020-01-01", end_date="2020-13-45")
        assert exp.end_date is None
        assert exp.end_date_invalid is True
        assert exp.has_valid_span is False

    @pytest.mark.parametrize("end_date", [None, "", "  "])
    def test_missing_end_date_is_ongoing(self, end_date) -> None:
        exp = ExperienceRecord(id=uuid.uuid4(), start_date="2020-01-01", end_date=end_date)
        assert exp.end_date is None
        assert exp.end_date_invalid is False
        assert exp.has_valid_span is True


class TestUserSkillRecord:
    def test_null_flags_are_false(self) -> None:
        us = UserSkillRecord(id=uuid.uuid4(), has_certification=None, has_trainings=None)
        assert us.has_certification is False
        assert us.has_trainings is False

    def test_nested_trainings_from_attributes(self) -> None:
        training = SimpleNamespace(
            name="Kubernetes 101", date=date(2022, 5, 1), provider="CNCF", user_skill_id=None
        )
        record = TrainingRecord.model_validate(training)
        assert record.name == "Kubernetes 101"
        assert record.provider == "CNCF"
