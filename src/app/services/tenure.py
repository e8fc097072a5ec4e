"""Calendar-month tenure arithmetic for experiences.

Tenure is counted in completed calendar months, not elapsed days: a month
counts once the end day reaches the start day, so 2020-01-15 to 2020-02-14 is
zero months and 2020-01-15 to 2020-02-15 is one. Overlapping experiences are
merged into one envelope (earliest start to latest end) rather than summed.
"""

from collections.abc import Iterable
from datetime import date

from app.schemas.cv import TenureSpan
from app.schemas.records import ExperienceRecord
from app.services.locale import CVLocale


def compute_tenure(start: date, end: date | None = None, *, today: date | None = None) -> TenureSpan:
    """Years and remaining months between ``start`` and ``end`` (or today when ongoing)."""
    if end is None:
        end = today or date.today()

    years = end.year - start.year
    months = end.month - start.month
    # Unlike the source system, a month ending before the start day is not
    # counted, so spans ending mid-month come out one month shorter.
    if end.day < start.day:
        months -= 1
    if months < 0:
        years -= 1
        months += 12

    if years < 0:
        return TenureSpan()
    return TenureSpan(years=years, months=months)


def format_tenure(span: TenureSpan | None, locale: CVLocale) -> str:
    """Render a span as e.g. "2 ans 3 mois"; ``None`` means not applicable."""
    if span is None:
        return locale.not_applicable
    if span.is_zero:
        return locale.less_than_a_month

    parts = []
    if span.years > 0:
        parts.append(locale.years(span.years))
    if span.months > 0:
        parts.append(locale.months(span.months))
    return " ".join(parts)


def compute_envelope(
    experiences: Iterable[ExperienceRecord], *, today: date | None = None
) -> TenureSpan | None:
    """Tenure from the earliest start to the latest effective end.

    Experiences without a valid start date, or with an unparseable end date,
    are left out. Returns ``None``
    when nothing usable remains.
    """
    today = today or date.today()
    starts: list[date] = []
    ends: list[date] = []
    for exp in experiences:
        if not exp.has_valid_span:
            continue
        starts.append(exp.start_date)
        ends.append(exp.end_date or today)

    if not starts:
        return None
    return compute_tenure(min(starts), max(ends), today=today)


def compute_tenure_for_company(
    experiences: Iterable[ExperienceRecord],
    company_name: str,
    *,
    today: date | None = None,
) -> TenureSpan | None:
    """Merged tenure across every experience at ``company_name`` (case-insensitive)."""
    wanted = company_name.lower()
    matching = [exp for exp in experiences if exp.company and exp.company.lower() == wanted]
    if not matching:
        return None
    return compute_envelope(matching, today=today)
