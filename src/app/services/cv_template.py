"""Default CV template, built with python-docx when none is installed.

The template uses docxtpl tags: ``{{ }}`` placeholders, ``{%p %}`` paragraph
loops and ``{%tr %}`` table-row loops over the CV view model fields.
"""

from io import BytesIO

from docx import Document

TABLES: list[tuple[str, str, list[tuple[str, str]]]] = [
    (
        "Domain Expertise",
        "domain_expertise_rows",
        [("Domain", "domain"), ("Specific Area", "specific_area"),
         ("Experience", "experience_yrs_months")],
    ),
    (
        "Technical Expertise",
        "technical_expertise_primary_skills",
        [("Skill", "skill_name"), ("Experience", "experience_yrs_months")],
    ),
    (
        "Education Background",
        "education_background_rows",
        [("Degree / Qualification", "degree_qualification"),
         ("College / University", "college_university"), ("Year", "year_attained")],
    ),
    (
        "Professional Activities, Certifications and Trainings",
        "professional_activities_rows",
        [("Course / Certification", "course_certification_name"),
         ("Institution", "institution"), ("Year", "year")],
    ),
]


def _add_loop_table(doc, collection: str, columns: list[tuple[str, str]]) -> None:
    table = doc.add_table(rows=1, cols=len(columns))
    table.style = "Table Grid"
    for cell, (header, _) in zip(table.rows[0].cells, columns, strict=True):
        cell.text = header

    table.add_row().cells[0].text = f"{{%tr for row in {collection} %}}"
    values = table.add_row().cells
    for cell, (_, field) in zip(values, columns, strict=True):
        cell.text = f"{{{{ row.{field} }}}}"
    table.add_row().cells[0].text = "{%tr endfor %}"


def build_default_template() -> bytes:
    """Return the bytes of a DOCX template covering every CV field."""
    doc = Document()
    doc.add_heading("{{ fullname }}", level=0)
    doc.add_paragraph("{{ role_in_company }} | {{ email_id }}")
    doc.add_paragraph("Total experience: {{ total_experience }}")
    doc.add_paragraph("Experience at {{ main_company }}: {{ company_experience }}")

    doc.add_heading("Experience Summary", level=1)
    doc.add_paragraph("{%p for point in experience_summary_points %}")
    doc.add_paragraph("{{ point }}", style="List Bullet")
    doc.add_paragraph("{%p endfor %}")

    for title, collection, columns in TABLES:
        doc.add_heading(title, level=1)
        _add_loop_table(doc, collection, columns)

    doc.add_heading("Employment History", level=1)
    doc.add_paragraph("{%p for item in employment_history_items %}")
    doc.add_heading("{{ item.project_name }} - {{ item.client }}", level=2)
    doc.add_paragraph(
        "{{ item.project_location }} | {{ item.start_date }} - {{ item.end_date }}"
        " | Team size: {{ item.team_size }}"
    )
    doc.add_paragraph("{%p for responsibility in item.responsibilities %}")
    doc.add_paragraph("{{ responsibility }}", style="List Bullet")
    doc.add_paragraph("{%p endfor %}")
    doc.add_paragraph("{%p endfor %}")

    doc.add_paragraph("{{ location }} | {{ contact_no }} | Last updated: {{ last_updated }}")

    out = BytesIO()
    doc.save(out)
    return out.getvalue()
