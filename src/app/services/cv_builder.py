"""Projection of the fetched CV source into the renderer's flat view model."""

import logging
from datetime import date

from app.schemas.cv import (
    CVDocumentData,
    CVSource,
    DomainExpertiseRow,
    EmploymentHistoryItem,
    ProfessionalActivityRow,
    TechnicalSkillRow,
)
from app.schemas.records import (
    CertificationRecord,
    ExperienceRecord,
    SkillKind,
    UserSkillRecord,
)
from app.services.locale import CVLocale
from app.services.tenure import (
    compute_envelope,
    compute_tenure,
    compute_tenure_for_company,
    format_tenure,
)

logger = logging.getLogger(__name__)


def _experience_tenure(exp: ExperienceRecord, locale: CVLocale, today: date) -> str | None:
    if not exp.has_valid_span:
        return None
    return format_tenure(compute_tenure(exp.start_date, exp.end_date, today=today), locale)


def role_in_company(experiences: list[ExperienceRecord], locale: CVLocale) -> str:
    if not experiences or not experiences[0].title:
        return locale.not_applicable
    return experiences[0].title


def domain_expertise_rows(
    experiences: list[ExperienceRecord], locale: CVLocale, today: date
) -> list[DomainExpertiseRow]:
    """One row per (family, skill); a later experience overwrites an earlier tenure."""
    domains: dict[str, dict[str, str]] = {}
    for exp in experiences:
        tenure = _experience_tenure(exp, locale, today)
        if tenure is None:
            logger.debug("Experience %s has no valid date span, skipped for domains", exp.id)
            continue
        for skill in exp.skills:
            if not skill.family:
                continue
            domains.setdefault(skill.family, {})[skill.name] = tenure

    return [
        DomainExpertiseRow(domain=domain, specific_area=skill_name, experience_yrs_months=tenure)
        for domain, skills in domains.items()
        for skill_name, tenure in skills.items()
    ]


def technical_primary_skills(
    experiences: list[ExperienceRecord], locale: CVLocale, today: date
) -> list[TechnicalSkillRow]:
    """Technical skills once each, with the tenure of the first experience using them."""
    rows: dict[str, TechnicalSkillRow] = {}
    for exp in experiences:
        tenure = _experience_tenure(exp, locale, today)
        if tenure is None:
            continue
        for skill in exp.skills:
            if skill.kind != SkillKind.TECHNICAL or skill.name in rows:
                continue
            rows[skill.name] = TechnicalSkillRow(skill_name=skill.name, experience_yrs_months=tenure)
    return list(rows.values())


def _year_sort_key(row: ProfessionalActivityRow) -> int:
    return row.year if isinstance(row.year, int) else 0


def professional_activities_rows(
    certifications: list[CertificationRecord],
    user_skills: list[UserSkillRecord],
    locale: CVLocale,
) -> list[ProfessionalActivityRow]:
    """Certifications and trainings, most recent year first; unknown years last."""
    rows: list[ProfessionalActivityRow] = []

    for cert in certifications:
        rows.append(
            ProfessionalActivityRow(
                course_certification_name=cert.name,
                institution=locale.certification_institution,
                year=cert.date.year if cert.date else locale.not_applicable,
            )
        )

    for us in user_skills:
        if us.has_trainings:
            for training in us.trainings:
                rows.append(
                    ProfessionalActivityRow(
                        course_certification_name=training.name,
                        institution=training.provider or locale.not_applicable,
                        year=training.date.year if training.date else locale.not_applicable,
                    )
                )

        if us.has_certification:
            name = (
                us.certification_name
                or (us.skill.name if us.skill else None)
                or locale.unnamed_certification
            )
            rows.append(
                ProfessionalActivityRow(
                    course_certification_name=name,
                    institution=locale.user_skill_certification_institution,
                    year=(
                        us.certification_date.year
                        if us.certification_date
                        else locale.not_applicable
                    ),
                )
            )

    rows.sort(key=_year_sort_key, reverse=True)
    return rows


def split_responsibilities(description: str | None) -> list[str]:
    if not description:
        return []
    return [line.removeprefix("- ") for line in description.split("\n")]


def _history_end_date(exp: ExperienceRecord, locale: CVLocale) -> str:
    if exp.end_date_invalid:
        return locale.not_applicable
    if exp.end_date is None:
        return locale.ongoing
    return exp.end_date.strftime(locale.date_format)


def employment_history_items(
    experiences: list[ExperienceRecord],
    locale: CVLocale,
    project_location: str,
) -> list[EmploymentHistoryItem]:
    items = []
    for exp in experiences:
        items.append(
            EmploymentHistoryItem(
                project_name=exp.title or locale.not_applicable,
                client=exp.company or locale.not_applicable,
                project_location=project_location,
                start_date=(
                    exp.start_date.strftime(locale.date_format)
                    if exp.start_date
                    else locale.not_applicable
                ),
                end_date=_history_end_date(exp, locale),
                project_description=exp.description or "",
                responsibilities=split_responsibilities(exp.description),
            )
        )
    return items


def build_cv_data(
    source: CVSource,
    *,
    locale: CVLocale,
    company_name: str,
    main_company: str,
    project_location: str,
    location: str,
    contact_no: str,
    summary_points: list[str] | None = None,
    today: date | None = None,
) -> CVDocumentData:
    """Assemble the renderer's view model from one user's CV source."""
    today = today or date.today()
    user = source.user
    experiences = source.experiences

    last_updated = user.updated_at.date() if user.updated_at else today

    return CVDocumentData(
        fullname=user.fullname or locale.not_applicable,
        role_in_company=role_in_company(experiences, locale),
        email_id=user.email or locale.not_applicable,
        total_experience=format_tenure(compute_envelope(experiences, today=today), locale),
        company_experience=format_tenure(
            compute_tenure_for_company(experiences, company_name, today=today), locale
        ),
        experience_summary_points=summary_points or [locale.default_summary],
        domain_expertise_rows=domain_expertise_rows(experiences, locale, today),
        technical_expertise_primary_skills=technical_primary_skills(experiences, locale, today),
        professional_activities_rows=professional_activities_rows(
            source.certifications, source.user_skills, locale
        ),
        employment_history_items=employment_history_items(experiences, locale, project_location),
        main_company=main_company,
        contact_no=contact_no,
        location=location,
        last_updated=last_updated.strftime(locale.date_format),
    )
