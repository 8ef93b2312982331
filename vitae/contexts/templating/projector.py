"""
Placeholder Projector

Projects a DocumentModel into the flat placeholder namespace used by templates.

Two kinds of keys are produced:
- Aggregate keys (SKILLS, WORK_EXPERIENCE, ...) summarizing a whole section. These
  are always present, mapping to "" when the section is absent or empty.
- Indexed keys (JOB_TITLE_1, SKILL_3, ...) with one key per field per entry, 1-based,
  capped per section (see defaults.INDEX_CAPS). Entries past the cap still count
  toward the aggregate.

Each section has its own builder returning a partial map; project() composes them.
Projection is pure: no logging, no I/O, and it never raises on malformed fields.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from vitae.contexts.templating.defaults import (
    AGGREGATE_KEYS,
    BLOCK_SEPARATOR,
    EDUCATION_FORMAT,
    EXPERIENCE_FORMAT,
    INDEX_CAPS,
    INLINE_SEPARATOR,
    LANGUAGE_FORMAT,
    LINE_SEPARATOR,
    OTHER_SECTION_KEYS,
    PROJECT_FORMAT,
    REFERENCE_FORMAT,
)
from vitae.contexts.templating.document_data_structure import (
    DocumentModel,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    OtherSections,
    PersonalInfo,
    ProjectEntry,
    ReferenceEntry,
    SkillEntry,
)

PlaceholderMap = Dict[str, str]


def split_full_name(full_name: str) -> Dict[str, str]:
    """
    Split a full name into NAME/SURNAME/FULL_NAME.

    The first whitespace-separated token is the first name, the last token is the
    surname (only when there is more than one token). Middle names are dropped.

    Examples:
        >>> split_full_name("Jane Mary Doe")
        {'NAME': 'Jane', 'SURNAME': 'Doe', 'FULL_NAME': 'Jane Mary Doe'}
        >>> split_full_name("Prince")
        {'NAME': 'Prince', 'SURNAME': '', 'FULL_NAME': 'Prince'}
    """
    tokens = full_name.split()
    return {
        "NAME": tokens[0] if tokens else "",
        "SURNAME": tokens[-1] if len(tokens) > 1 else "",
        "FULL_NAME": full_name,
    }


def split_address(address: str) -> Dict[str, str]:
    """
    Split a comma-separated address into CITY/COUNTY/POSTCODE.

    Examples:
        >>> split_address("Nairobi, Nairobi County")
        {'CITY': 'Nairobi', 'COUNTY': 'Nairobi County', 'POSTCODE': ''}
    """
    parts = [part.strip() for part in address.split(",")] if address else []
    parts += [""] * (3 - len(parts))
    return {"CITY": parts[0], "COUNTY": parts[1], "POSTCODE": parts[2]}


def format_experience(entry: ExperienceEntry) -> str:
    return EXPERIENCE_FORMAT.format(
        position=entry.position,
        company=entry.company,
        location=entry.location,
        start_date=entry.start_date,
        end_date=entry.end_date,
    )


def format_education(entry: EducationEntry) -> str:
    return EDUCATION_FORMAT.format(
        degree=entry.degree,
        field_of_study=entry.field_of_study,
        school=entry.school,
        start_date=entry.start_date,
        end_date=entry.end_date,
    )


def format_project(entry: ProjectEntry) -> str:
    return PROJECT_FORMAT.format(
        name=entry.name, description=entry.description, technologies=entry.technologies
    )


def format_language(entry: LanguageEntry) -> str:
    return LANGUAGE_FORMAT.format(language=entry.language, proficiency=entry.proficiency)


def format_reference(entry: ReferenceEntry) -> str:
    return REFERENCE_FORMAT.format(
        name=entry.name,
        position=entry.position,
        company=entry.company,
        phone=entry.phone,
        email=entry.email,
    )


def _capped(entries: List[Any], section: str):
    """Yield (1-based index, entry) pairs up to the section's cap."""
    return zip(range(1, INDEX_CAPS[section] + 1), entries)


# Section builders


def project_personal(personal: Optional[PersonalInfo]) -> PlaceholderMap:
    """Personal keys; all of them present whenever the section exists."""
    if personal is None:
        return {}

    return {
        **split_full_name(personal.full_name),
        "EMAIL": personal.email,
        "PHONE": personal.phone,
        **split_address(personal.address),
        "TAGLINE": personal.tagline,
        "PROFESSIONAL_SUMMARY": personal.summary,
    }


def project_experience(experience: Optional[List[ExperienceEntry]]) -> PlaceholderMap:
    entries = experience or []
    placeholders = {"WORK_EXPERIENCE": BLOCK_SEPARATOR.join(format_experience(e) for e in entries)}

    for i, entry in _capped(entries, "experience"):
        placeholders[f"WORK_EXPERIENCE_{i}"] = format_experience(entry)
        placeholders[f"JOB_TITLE_{i}"] = entry.position
        placeholders[f"EMPLOYER_{i}"] = entry.company
        placeholders[f"WORK_LOCATION_{i}"] = entry.location
        placeholders[f"WORK_START_DATE_{i}"] = entry.start_date
        placeholders[f"WORK_END_DATE_{i}"] = entry.end_date
        placeholders[f"WORK_DESCRIPTION_{i}"] = entry.description
        placeholders[f"WORK_ACHIEVEMENTS_{i}"] = LINE_SEPARATOR.join(entry.achievements)

    return placeholders


def project_education(education: Optional[List[EducationEntry]]) -> PlaceholderMap:
    entries = education or []
    placeholders = {"EDUCATION": BLOCK_SEPARATOR.join(format_education(e) for e in entries)}

    for i, entry in _capped(entries, "education"):
        placeholders[f"EDUCATION_{i}"] = format_education(entry)
        placeholders[f"INSTITUTION_{i}"] = entry.school
        placeholders[f"EDUCATION_LOCATION_{i}"] = entry.location
        placeholders[f"DEGREE_{i}"] = entry.degree
        placeholders[f"FIELD_OF_STUDY_{i}"] = entry.field_of_study
        placeholders[f"GRADUATION_DATE_{i}"] = entry.end_date
        placeholders[f"EDUCATION_DESCRIPTION_{i}"] = entry.description

    return placeholders


def project_skills(skills: Optional[List[SkillEntry]]) -> PlaceholderMap:
    entries = skills or []
    placeholders = {"SKILLS": INLINE_SEPARATOR.join(skill.name for skill in entries)}

    for i, skill in _capped(entries, "skills"):
        placeholders[f"SKILL_{i}"] = skill.name

    return placeholders


def project_projects(projects: Optional[List[ProjectEntry]]) -> PlaceholderMap:
    """Projects become ACHIEVEMENTS / ACHIEVEMENT_i."""
    achievements = [format_project(entry) for entry in projects or []]
    placeholders = {"ACHIEVEMENTS": BLOCK_SEPARATOR.join(achievements)}

    for i, achievement in _capped(achievements, "projects"):
        placeholders[f"ACHIEVEMENT_{i}"] = achievement

    return placeholders


def project_languages(languages: Optional[List[LanguageEntry]]) -> PlaceholderMap:
    entries = languages or []
    return {"LANGUAGES": INLINE_SEPARATOR.join(format_language(e) for e in entries)}


def project_references(references: Optional[List[ReferenceEntry]]) -> PlaceholderMap:
    entries = references or []
    placeholders = {"REFERENCES": BLOCK_SEPARATOR.join(format_reference(e) for e in entries)}

    for i, entry in _capped(entries, "references"):
        placeholders[f"REFERENCE_{i}"] = format_reference(entry)
        placeholders[f"REFERENCE_NAME_{i}"] = entry.name
        placeholders[f"REFERENCE_POSITION_{i}"] = entry.position
        placeholders[f"REFERENCE_COMPANY_{i}"] = entry.company
        placeholders[f"REFERENCE_PHONE_{i}"] = entry.phone
        placeholders[f"REFERENCE_EMAIL_{i}"] = entry.email

    return placeholders


def project_other(other: Optional[OtherSections]) -> PlaceholderMap:
    sections = other or OtherSections()
    return {
        key: LINE_SEPARATOR.join(getattr(sections, attribute))
        for attribute, key in OTHER_SECTION_KEYS.items()
    }


def project(document: Union[DocumentModel, Mapping[str, Any]]) -> PlaceholderMap:
    """
    Project a document into a placeholder map.

    Args:
        document: DocumentModel, or a producer mapping accepted by
                  DocumentModel.from_dict()

    Returns:
        Fresh dict mapping placeholder keys to string values. Every aggregate key
        is present; indexed keys exist only for entries within the section cap.

    Examples:
        >>> placeholders = project({"skills": [{"name": "SQL"}, {"name": "Go"}]})
        >>> placeholders["SKILLS"]
        'SQL, Go'
        >>> placeholders["SKILL_2"]
        'Go'
    """
    if not isinstance(document, DocumentModel):
        document = DocumentModel.from_dict(document if isinstance(document, Mapping) else {})

    placeholders: PlaceholderMap = dict.fromkeys(AGGREGATE_KEYS, "")
    placeholders.update(project_personal(document.personal))
    placeholders.update(project_experience(document.experience))
    placeholders.update(project_education(document.education))
    placeholders.update(project_skills(document.skills))
    placeholders.update(project_projects(document.projects))
    placeholders.update(project_languages(document.languages))
    placeholders.update(project_references(document.references))
    placeholders.update(project_other(document.other))

    return placeholders
