"""Unit tests for the tenure calculator."""

import uuid
from datetime import date

import pytest

from app.schemas.cv import TenureSpan
from app.schemas.records import ExperienceRecord
from app.services.locale import ENGLISH, FRENCH
from app.services.tenure import (
    compute_envelope,
    compute_tenure,
    compute_tenure_for_company,
    format_tenure,
)

pytestmark = pytest.mark.unit


def _exp(company: str, start: date | None, end: date | str | None) -> ExperienceRecord:
    return ExperienceRecord(id=uuid.uuid4(), company=company, start_date=start, end_date=end)


class TestComputeTenure:
    def test_years_and_months(self) -> None:
        span = compute_tenure(date(2020, 1, 15), date(2023, 4, 10))
        assert span == TenureSpan(years=3, months=2)
        assert format_tenure(span, FRENCH) == "3 ans 2 mois"

    def test_same_calendar_month_is_less_than_a_month(self) -> None:
        span = compute_tenure(date(2023, 5, 2), date(2023, 5, 28))
        assert span == TenureSpan(years=0, months=0)
        assert format_tenure(span, FRENCH) == "Moins d'un mois"

    def test_ongoing_uses_injected_today(self) -> None:
        fixed_now = date(2024, 6, 15)
        start = date(2021, 2, 1)
        assert compute_tenure(start, None, today=fixed_now) == compute_tenure(start, fixed_now)

    def test_month_borrow_across_year(self) -> None:
        assert compute_tenure(date(2020, 11, 1), date(2022, 2, 1)) == TenureSpan(years=1, months=3)

    def test_month_counts_once_end_day_reaches_start_day(self) -> None:
        assert compute_tenure(date(2020, 1, 15), date(2020, 2, 14)).is_zero
        assert compute_tenure(date(2020, 1, 15), date(2020, 2, 15)) == TenureSpan(months=1)

    def test_december_to_january_short_span(self) -> None:
        assert compute_tenure(date(2020, 12, 15), date(2021, 1, 10)).is_zero

    def test_end_before_start_is_zero(self) -> None:
        assert compute_tenure(date(2023, 5, 1), date(2022, 3, 1)).is_zero


class TestFormatTenure:
    def test_singular_year_only(self) -> None:
        assert format_tenure(TenureSpan(years=1), FRENCH) == "1 an"

    def test_months_only(self) -> None:
        assert format_tenure(TenureSpan(months=5), FRENCH) == "5 mois"

    def test_not_applicable(self) -> None:
        assert format_tenure(None, FRENCH) == "N/A"

    def test_english_pluralization(self) -> None:
        assert format_tenure(TenureSpan(years=2, months=1), ENGLISH) == "2 years 1 month"
        assert format_tenure(TenureSpan(), ENGLISH) == "Less than a month"


class TestCompanyTenure:
    def test_overlapping_stints_merge_into_envelope(self) -> None:
        experiences = [
            _exp("Acme", date(2019, 1, 1), date(2020, 6, 1)),
            _exp("Acme", date(2020, 1, 1), date(2021, 1, 1)),
        ]
        span = compute_tenure_for_company(experiences, "Acme")
        assert span == compute_tenure(date(2019, 1, 1), date(2021, 1, 1))
        assert span == TenureSpan(years=2, months=0)

    def test_company_match_is_case_insensitive(self) -> None:
        experiences = [_exp("ACME", date(2019, 1, 1), date(2020, 1, 1))]
        assert compute_tenure_for_company(experiences, "acme") == TenureSpan(years=1)

    def test_match_is_exact_not_substring(self) -> None:
        experiences = [_exp("DXC Technology", date(2019, 1, 1), date(2020, 1, 1))]
        assert compute_tenure_for_company(experiences, "DXC") is None

    def test_no_match_is_not_applicable(self) -> None:
        experiences = [_exp("Acme", date(2019, 1, 1), date(2020, 1, 1))]
        span = compute_tenure_for_company(experiences, "Globex")
        assert span is None
        assert format_tenure(span, FRENCH) == "N/A"

    def test_ongoing_stint_extends_to_today(self) -> None:
        experiences = [
            _exp("Acme", date(2019, 1, 1), date(2020, 1, 1)),
            _exp("Acme", date(2021, 1, 1), None),
        ]
        span = compute_tenure_for_company(experiences, "Acme", today=date(2024, 7, 1))
        assert span == TenureSpan(years=5, months=6)


class TestEnvelope:
    def test_invalid_start_dates_are_excluded(self) -> None:
        experiences = [
            _exp("Acme", None, date(2030, 1, 1)),
            _exp("Globex", date(2020, 1, 1), date(2021, 3, 1)),
        ]
        assert compute_envelope(experiences) == TenureSpan(years=1, months=2)

    def test_unparseable_end_date_is_excluded(self) -> None:
        experiences = [
            _exp("Acme", date(2010, 1, 1), "2020-13-45"),
            _exp("Globex", date(2020, 1, 1), date(2021, 3, 1)),
        ]
        span = compute_envelope(experiences, today=date(2024, 6, 15))
        assert span == TenureSpan(years=1, months=2)

    def test_no_usable_experience_is_not_applicable(self) -> None:
        assert compute_envelope([]) is None
        assert compute_envelope([_exp("Acme", None, None)]) is None
