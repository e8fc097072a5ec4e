from pydantic import BaseModel, ConfigDict, Field

from app.schemas.records import (
    CertificationRecord,
    ExperienceRecord,
    UserRecord,
    UserSkillRecord,
)


class TenureSpan(BaseModel):
    model_config = ConfigDict(frozen=True)

    years: int = Field(0, ge=0)
    months: int = Field(0, ge=0, le=11)

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0


class CVSource(BaseModel):
    """Everything read from the store for one CV request."""

    user: UserRecord
    experiences: list[ExperienceRecord] = []
    user_skills: list[UserSkillRecord] = []
    certifications: list[CertificationRecord] = []


class DomainExpertiseRow(BaseModel):
    domain: str
    specific_area: str
    experience_yrs_months: str


class TechnicalSkillRow(BaseModel):
    skill_name: str
    experience_yrs_months: str


class EducationRow(BaseModel):
    degree_qualification: str
    college_university: str
    year_attained: str


class ProfessionalActivityRow(BaseModel):
    course_certification_name: str
    institution: str
    year: int | str
    years_of_experience: str = ""


class EmploymentHistoryItem(BaseModel):
    project_name: str
    client: str
    project_location: str
    start_date: str
    end_date: str
    team_size: str = "..."
    project_description: str
    responsibilities: list[str] = []
    other_contributions: list[str] = []


class CVDocumentData(BaseModel):
    """Flat payload handed to the document renderer."""

    fullname: str
    role_in_company: str
    email_id: str
    total_experience: str
    company_experience: str
    experience_summary_points: list[str]
    domain_expertise_rows: list[DomainExpertiseRow]
    technical_expertise_primary_skills: list[TechnicalSkillRow]
    technical_expertise_secondary_skills: list[TechnicalSkillRow] = []
    education_background_rows: list[EducationRow] = []
    professional_activities_rows: list[ProfessionalActivityRow]
    employment_history_items: list[EmploymentHistoryItem]
    main_company: str
    contact_no: str
    location: str
    last_updated: str


class TemplateDiagnostic(BaseModel):
    id: str
    message: str
    explanation: str = ""


class CVErrorResponse(BaseModel):
    error: str
    details: str | list[TemplateDiagnostic] | None = None
