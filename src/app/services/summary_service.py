import logging
from datetime import date

from google import genai
from google.genai import types

from app.schemas.records import ExperienceRecord
from app.services.locale import CVLocale
from app.services.tenure import compute_tenure, format_tenure

logger = logging.getLogger(__name__)

SUMMARY_PROMPT = (
    "Write a concise experience summary for a CV in 3-4 bullet points, "
    "each starting with '•'. Write it in the language with code '{language}'.\n"
    "Focus on achievements and overall expertise.\n\n"
    "Roles: {roles}.\n"
    "Key skills: {skills}."
)


def _build_prompt(experiences: list[ExperienceRecord], locale: CVLocale, today: date) -> str:
    roles = []
    for exp in experiences:
        duration = ""
        if exp.has_valid_span:
            span = compute_tenure(exp.start_date, exp.end_date, today=today)
            duration = f" ({format_tenure(span, locale)})"
        roles.append(f"{exp.title} at {exp.company}{duration}: {exp.description or ''}")

    skills = dict.fromkeys(skill.name for exp in experiences for skill in exp.skills)
    return SUMMARY_PROMPT.format(
        language=locale.code,
        roles="; ".join(roles),
        skills=", ".join(skills),
    )


def _split_points(text: str) -> list[str]:
    return [point.strip() for point in text.split("•") if point.strip()]


async def generate_summary_points(
    client: genai.Client | None,
    experiences: list[ExperienceRecord],
    model: str,
    locale: CVLocale,
    *,
    today: date | None = None,
) -> list[str]:
    """Ask Gemini for summary bullet points; never raises.

    Without a client or experiences the locale's default text is returned; a
    failed call yields the locale's error text.
    """
    if client is None or not experiences:
        return [locale.default_summary]

    prompt = _build_prompt(experiences, locale, today or date.today())
    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=types.GenerateContentConfig(temperature=0.3),
        )
    except Exception as e:
        logger.error("Experience summary generation failed: %s", e)
        return [locale.summary_error]

    points = _split_points(response.text or "")
    return points or [locale.default_summary]
