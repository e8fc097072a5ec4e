from pydantic import BaseModel, ConfigDict


class CVLocale(BaseModel):
    """Wording and formats used when rendering a CV in one language."""

    model_config = ConfigDict(frozen=True)

    code: str
    year_singular: str
    year_plural: str
    month_singular: str
    month_plural: str
    less_than_a_month: str
    not_applicable: str
    ongoing: str
    date_format: str
    default_summary: str
    summary_error: str
    unnamed_certification: str
    certification_institution: str
    user_skill_certification_institution: str

    def years(self, n: int) -> str:
        return f"{n} {self.year_plural if n > 1 else self.year_singular}"

    def months(self, n: int) -> str:
        return f"{n} {self.month_plural if n > 1 else self.month_singular}"


FRENCH = CVLocale(
    code="fr",
    year_singular="an",
    year_plural="ans",
    month_singular="mois",
    month_plural="mois",
    less_than_a_month="Moins d'un mois",
    not_applicable="N/A",
    ongoing="Présent",
    date_format="%d/%m/%Y",
    default_summary="Summary généré par défaut.",
    summary_error="Erreur lors de la génération du résumé d'expérience.",
    unnamed_certification="Certification sans nom",
    certification_institution="N/A (Certification)",
    user_skill_certification_institution="N/A (via User Skill)",
)

ENGLISH = CVLocale(
    code="en",
    year_singular="year",
    year_plural="years",
    month_singular="month",
    month_plural="months",
    less_than_a_month="Less than a month",
    not_applicable="N/A",
    ongoing="Present",
    date_format="%d/%m/%Y",
    default_summary="Default generated summary.",
    summary_error="Error while generating the experience summary.",
    unnamed_certification="Unnamed Certification",
    certification_institution="N/A (Certification)",
    user_skill_certification_institution="N/A (via User Skill)",
)

DUTCH = CVLocale(
    code="nl",
    year_singular="jaar",
    year_plural="jaar",
    month_singular="maand",
    month_plural="maanden",
    less_than_a_month="Minder dan een maand",
    not_applicable="N/A",
    ongoing="Heden",
    date_format="%d-%m-%Y",
    default_summary="Standaard gegenereerde samenvatting.",
    summary_error="Fout bij het genereren van de ervaringssamenvatting.",
    unnamed_certification="Naamloze certificering",
    certification_institution="N/A (Certificering)",
    user_skill_certification_institution="N/A (via vaardigheid)",
)

LOCALES: dict[str, CVLocale] = {loc.code: loc for loc in (FRENCH, ENGLISH, DUTCH)}


def get_locale(code: str) -> CVLocale:
    try:
        return LOCALES[code.lower()]
    except KeyError:
        raise ValueError(f"Unsupported CV locale: {code!r}") from None
