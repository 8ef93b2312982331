"""
Document Data Structures

Defines the structured document model consumed by the placeholder projector.
Every section is optional: None means the producer did not supply the section,
an empty list means it supplied the section with no entries.

Producers (editor forms, AI generation output, YAML/JSON files) use camelCase keys
(fullName, startDate, fieldOfStudy). DocumentModel.from_dict() accepts those as well
as the snake_case attribute names, and never raises on malformed field values.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from vitae.contexts.templating.exceptions import InvalidDocumentStructureError
from vitae.contexts.templating.logger import log_document_loaded
from vitae.utils.text_processing import as_text, as_text_list

T = TypeVar("T")

# End date shown for a position flagged as current
CURRENT_POSITION_END_DATE = "Present"


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first key present (and not None) in data."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _text(data: Mapping[str, Any], *keys: str) -> str:
    return as_text(_pick(data, *keys))


@dataclass
class PersonalInfo:
    """
    Scalar personal details.

    Attributes:
        full_name: Complete name as entered (split into NAME/SURNAME on projection)
        email: Email address
        phone: Phone number
        address: Comma-separated "city, county, postcode" string
        tagline: Short professional tagline
        summary: Professional summary paragraph
    """

    full_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    tagline: str = ""
    summary: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PersonalInfo":
        full_name = _text(data, "full_name", "fullName")
        if not full_name:
            # Editor forms that collect first/last name separately
            parts = [_text(data, "first_name", "firstName"), _text(data, "last_name", "lastName")]
            full_name = " ".join(part for part in parts if part)

        return cls(
            full_name=full_name,
            email=_text(data, "email"),
            phone=_text(data, "phone"),
            address=_text(data, "address"),
            tagline=_text(data, "tagline"),
            summary=_text(data, "summary", "professional_summary", "professionalSummary"),
        )


@dataclass
class ExperienceEntry:
    """Single work history entry."""

    position: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    achievements: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExperienceEntry":
        end_date = _text(data, "end_date", "endDate")
        if not end_date and _pick(data, "current", "currently_work_here", "currentlyWorkHere"):
            end_date = CURRENT_POSITION_END_DATE

        return cls(
            position=_text(data, "position", "job_title", "jobTitle"),
            company=_text(data, "company", "employer"),
            location=_text(data, "location"),
            start_date=_text(data, "start_date", "startDate"),
            end_date=end_date,
            description=_text(data, "description"),
            achievements=as_text_list(_pick(data, "achievements", "responsibilities")),
        )


@dataclass
class EducationEntry:
    """Single education entry."""

    school: str = ""
    degree: str = ""
    field_of_study: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EducationEntry":
        return cls(
            school=_text(data, "school", "institution"),
            degree=_text(data, "degree"),
            field_of_study=_text(data, "field_of_study", "fieldOfStudy"),
            location=_text(data, "location"),
            start_date=_text(data, "start_date", "startDate"),
            end_date=_text(data, "end_date", "endDate", "graduation_date", "graduationDate"),
            description=_text(data, "description"),
        )


@dataclass
class SkillEntry:
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SkillEntry":
        return cls(name=_text(data, "name"))


@dataclass
class ProjectEntry:
    """Project entry, projected into the ACHIEVEMENTS placeholders."""

    name: str = ""
    description: str = ""
    technologies: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectEntry":
        technologies = _pick(data, "technologies")
        if isinstance(technologies, (list, tuple)):
            technologies = ", ".join(as_text_list(technologies))

        return cls(
            name=_text(data, "name"),
            description=_text(data, "description"),
            technologies=as_text(technologies),
        )


@dataclass
class LanguageEntry:
    language: str = ""
    proficiency: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LanguageEntry":
        return cls(
            language=_text(data, "language", "name"),
            proficiency=_text(data, "proficiency", "level"),
        )


@dataclass
class ReferenceEntry:
    name: str = ""
    position: str = ""
    company: str = ""
    phone: str = ""
    email: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReferenceEntry":
        return cls(
            name=_text(data, "name"),
            position=_text(data, "position"),
            company=_text(data, "company"),
            phone=_text(data, "phone"),
            email=_text(data, "email"),
        )


@dataclass
class OtherSections:
    """
    Free-form list sections without per-entry placeholders.

    Each attribute maps to one aggregate placeholder (see defaults.OTHER_SECTION_KEYS).
    """

    certifications: List[str] = field(default_factory=list)
    websites: List[str] = field(default_factory=list)
    software: List[str] = field(default_factory=list)
    accomplishments: List[str] = field(default_factory=list)
    additional_info: List[str] = field(default_factory=list)
    affiliations: List[str] = field(default_factory=list)
    interests: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OtherSections":
        return cls(
            certifications=as_text_list(_pick(data, "certifications")),
            websites=as_text_list(_pick(data, "websites")),
            software=as_text_list(_pick(data, "software")),
            accomplishments=as_text_list(_pick(data, "accomplishments")),
            additional_info=as_text_list(
                _pick(data, "additional_info", "additionalInfo", "additionalinfo")
            ),
            affiliations=as_text_list(_pick(data, "affiliations")),
            interests=as_text_list(_pick(data, "interests")),
        )


def _entries(
    value: Any, builder: Callable[[Mapping[str, Any]], T]
) -> Optional[List[T]]:
    """
    Build a list of entries from a producer sequence.

    Returns None (section absent) when value is not a list. Items that are not
    mappings carry no fields and are skipped.
    """
    if not isinstance(value, (list, tuple)):
        return None
    return [builder(item) for item in value if isinstance(item, Mapping)]


def _skill_entries(value: Any) -> Optional[List[SkillEntry]]:
    """Skills may be plain strings or {name} mappings."""
    if not isinstance(value, (list, tuple)):
        return None

    skills = []
    for item in value:
        if isinstance(item, Mapping):
            skills.append(SkillEntry.from_dict(item))
        elif isinstance(item, str):
            skills.append(SkillEntry(name=item))
    return skills


_OTHER_SECTION_ALIASES = (
    "certifications",
    "websites",
    "software",
    "accomplishments",
    "additional_info",
    "additionalInfo",
    "additionalinfo",
    "affiliations",
    "interests",
)


@dataclass
class DocumentModel:
    """
    Complete resume or cover-letter document.

    Attributes:
        personal: Scalar personal details (None when absent)
        experience: Work history in display order
        education: Education history in display order
        skills: Skill names in display order
        projects: Projects, rendered as achievements
        languages: Spoken languages with proficiency
        references: Professional references
        other: Free-form list sections (certifications, interests, ...)
    """

    personal: Optional[PersonalInfo] = None
    experience: Optional[List[ExperienceEntry]] = None
    education: Optional[List[EducationEntry]] = None
    skills: Optional[List[SkillEntry]] = None
    projects: Optional[List[ProjectEntry]] = None
    languages: Optional[List[LanguageEntry]] = None
    references: Optional[List[ReferenceEntry]] = None
    other: Optional[OtherSections] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DocumentModel":
        """
        Build a DocumentModel from a producer mapping.

        Args:
            data: Mapping with any subset of the document sections

        Returns:
            DocumentModel instance

        Raises:
            InvalidDocumentStructureError: If data is not a mapping
        """
        if not isinstance(data, Mapping):
            raise InvalidDocumentStructureError(
                "Document must be a mapping of sections",
                actual_type=type(data).__name__,
            )

        personal_data = _pick(data, "personal", "personalInfo", "personal_info")
        if not isinstance(personal_data, Mapping):
            personal_data = None

        # Summary and tagline sit at the top level in some producers
        top_level_personal = {
            key: data[key]
            for key in ("summary", "tagline")
            if data.get(key) is not None
        }
        if top_level_personal:
            personal_data = {**top_level_personal, **(personal_data or {})}

        other_data = data.get("other")
        if not isinstance(other_data, Mapping):
            other_data = {key: data[key] for key in _OTHER_SECTION_ALIASES if key in data}

        return cls(
            personal=PersonalInfo.from_dict(personal_data) if personal_data is not None else None,
            experience=_entries(data.get("experience"), ExperienceEntry.from_dict),
            education=_entries(data.get("education"), EducationEntry.from_dict),
            skills=_skill_entries(data.get("skills")),
            projects=_entries(data.get("projects"), ProjectEntry.from_dict),
            languages=_entries(data.get("languages"), LanguageEntry.from_dict),
            references=_entries(data.get("references"), ReferenceEntry.from_dict),
            other=OtherSections.from_dict(other_data) if other_data else None,
        )

    def section_counts(self) -> Dict[str, Optional[int]]:
        """Number of entries per repeatable section (None when absent)."""
        return {
            "experience": None if self.experience is None else len(self.experience),
            "education": None if self.education is None else len(self.education),
            "skills": None if self.skills is None else len(self.skills),
            "projects": None if self.projects is None else len(self.projects),
            "languages": None if self.languages is None else len(self.languages),
            "references": None if self.references is None else len(self.references),
        }


def load_document(document_path: Path) -> DocumentModel:
    """
    Load a document model from a YAML or JSON file.

    Args:
        document_path: Path to .yaml/.yml/.json document file

    Returns:
        DocumentModel instance

    Raises:
        FileNotFoundError: If document_path does not exist
        InvalidDocumentStructureError: If the file cannot be parsed or its root
                                       is not a mapping
    """
    if type(document_path) is str:
        document_path = Path(document_path)

    if not document_path.exists():
        raise FileNotFoundError(f"Document file not found: {document_path}")

    try:
        loaded = OmegaConf.load(document_path)
        data = OmegaConf.to_container(loaded, resolve=True)
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise InvalidDocumentStructureError(
            f"Document file could not be parsed: {e}", source_path=document_path
        ) from e

    if not isinstance(data, dict):
        raise InvalidDocumentStructureError(
            "Document file must contain a mapping of sections",
            source_path=document_path,
            actual_type=type(data).__name__,
        )

    document = DocumentModel.from_dict(data)
    log_document_loaded(document_path, document.section_counts())
    return document
