"""
Placeholder Catalog

Human-facing documentation of every {KEY} token a template may use, organized by
category (personal, experience, education, skills, other, references).

Indexed entries are generated from defaults.INDEX_CAPS, the same caps the projector
uses, so the catalog documents exactly the set of keys project() can emit.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from vitae.contexts.templating.defaults import INDEX_CAPS

CATALOG_TEMPLATE_DIR = Path(__file__).parent / "catalog"
CATALOG_TEMPLATE_NAME = "placeholder_catalog.md.jinja"


@dataclass(frozen=True)
class PlaceholderSpec:
    """
    One documented placeholder.

    Attributes:
        key: Bare key, e.g. "JOB_TITLE_1"
        description: What the placeholder holds
    """

    key: str
    description: str

    @property
    def name(self) -> str:
        """Token form as written in templates, e.g. "{JOB_TITLE_1}"."""
        return f"{{{self.key}}}"


def _indexed(section: str, fields: List[tuple]) -> List[PlaceholderSpec]:
    """Expand (KEY_PREFIX, description-with-{i}) pairs for every index up to the cap."""
    specs = []
    for i in range(1, INDEX_CAPS[section] + 1):
        for prefix, description in fields:
            specs.append(PlaceholderSpec(f"{prefix}_{i}", description.format(i=i)))
    return specs


def _build_catalog() -> Dict[str, List[PlaceholderSpec]]:
    personal = [
        PlaceholderSpec("NAME", "First name"),
        PlaceholderSpec("SURNAME", "Last name"),
        PlaceholderSpec("FULL_NAME", "Complete name"),
        PlaceholderSpec("TAGLINE", "Professional tagline"),
        PlaceholderSpec("CITY", "City location"),
        PlaceholderSpec("COUNTY", "County/state location"),
        PlaceholderSpec("POSTCODE", "Postal/ZIP code"),
        PlaceholderSpec("PHONE", "Phone number"),
        PlaceholderSpec("EMAIL", "Email address"),
    ]

    experience = [PlaceholderSpec("WORK_EXPERIENCE", "All work experiences combined")]
    experience += _indexed(
        "experience",
        [
            ("WORK_EXPERIENCE", "Work experience entry #{i}"),
            ("JOB_TITLE", "Job title for position #{i}"),
            ("EMPLOYER", "Employer name for position #{i}"),
            ("WORK_LOCATION", "Location for position #{i}"),
            ("WORK_START_DATE", "Start date for position #{i}"),
            ("WORK_END_DATE", "End date for position #{i}"),
            ("WORK_DESCRIPTION", "Job description for position #{i}"),
            ("WORK_ACHIEVEMENTS", "Achievements for position #{i}, one per line"),
        ],
    )

    education = [PlaceholderSpec("EDUCATION", "All education entries combined")]
    education += _indexed(
        "education",
        [
            ("EDUCATION", "Education entry #{i}"),
            ("INSTITUTION", "School/university name for education #{i}"),
            ("EDUCATION_LOCATION", "Location for education #{i}"),
            ("DEGREE", "Degree type for education #{i}"),
            ("FIELD_OF_STUDY", "Major/specialization for education #{i}"),
            ("GRADUATION_DATE", "Graduation date for education #{i}"),
            ("EDUCATION_DESCRIPTION", "Description for education #{i}"),
        ],
    )

    skills = [PlaceholderSpec("SKILLS", "All skills combined as a list")]
    skills += _indexed("skills", [("SKILL", "Skill #{i}")])
    skills.append(PlaceholderSpec("ACHIEVEMENTS", "All achievements (projects) combined"))
    skills += _indexed("projects", [("ACHIEVEMENT", "Achievement #{i}")])

    other = [
        PlaceholderSpec("PROFESSIONAL_SUMMARY", "Professional summary"),
        PlaceholderSpec("CERTIFICATIONS", "Certifications section"),
        PlaceholderSpec("LANGUAGES", "Languages section"),
        PlaceholderSpec("WEBSITES", "Websites, portfolios, profiles section"),
        PlaceholderSpec("SOFTWARE", "Software proficiency section"),
        PlaceholderSpec("ACCOMPLISHMENTS", "Accomplishments section"),
        PlaceholderSpec("ADDITIONALINFO", "Additional information section"),
        PlaceholderSpec("AFFILIATIONS", "Affiliations section"),
        PlaceholderSpec("INTERESTS", "Interests section"),
    ]

    references = [PlaceholderSpec("REFERENCES", "All references combined")]
    references += _indexed(
        "references",
        [
            ("REFERENCE", "Reference entry #{i}"),
            ("REFERENCE_NAME", "Name for reference #{i}"),
            ("REFERENCE_POSITION", "Job position for reference #{i}"),
            ("REFERENCE_COMPANY", "Company for reference #{i}"),
            ("REFERENCE_PHONE", "Phone for reference #{i}"),
            ("REFERENCE_EMAIL", "Email for reference #{i}"),
        ],
    )

    return {
        "personal": personal,
        "experience": experience,
        "education": education,
        "skills": skills,
        "other": other,
        "references": references,
    }


PLACEHOLDER_CATALOG: Dict[str, List[PlaceholderSpec]] = _build_catalog()

_ALL_KEYS = frozenset(spec.key for specs in PLACEHOLDER_CATALOG.values() for spec in specs)


def get_placeholders_by_category(category: str) -> List[PlaceholderSpec]:
    """Return the placeholders of one category, or [] for an unknown category."""
    return list(PLACEHOLDER_CATALOG.get(category, []))


def get_all_placeholders() -> List[PlaceholderSpec]:
    """Return every documented placeholder in category order."""
    return [spec for specs in PLACEHOLDER_CATALOG.values() for spec in specs]


def get_all_keys() -> frozenset:
    """Return the set of documented bare keys."""
    return _ALL_KEYS


def is_valid_placeholder(placeholder: str) -> bool:
    """
    Check whether a placeholder is documented.

    Accepts either the token form ("{SKILL_1}") or the bare key ("SKILL_1").
    """
    key = placeholder
    if key.startswith("{") and key.endswith("}"):
        key = key[1:-1]
    return key in _ALL_KEYS


def format_catalog_markdown(category: str = None) -> str:
    """
    Render the catalog as a markdown reference document.

    Args:
        category: Restrict output to one category (default: all categories)

    Returns:
        Markdown text with one table per category
    """
    env = Environment(
        loader=FileSystemLoader(str(CATALOG_TEMPLATE_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    template = env.get_template(CATALOG_TEMPLATE_NAME)

    if category is None:
        categories = PLACEHOLDER_CATALOG
    else:
        categories = {category: get_placeholders_by_category(category)}

    return template.render(categories=categories)
