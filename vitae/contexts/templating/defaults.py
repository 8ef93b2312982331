"""
Default values for VITAE placeholder projection.

Provides shared constants used by:
- projector.py (index caps, separators, entry formats)
- placeholder_catalog.py (generates indexed catalog entries from the same caps)

Keeping both modules on these constants is what keeps the catalog and the
projector's key set identical.
"""

from typing import Dict

# Maximum 1-based index emitted per repeatable section
INDEX_CAPS: Dict[str, int] = {
    "experience": 3,
    "education": 3,
    "skills": 10,
    "projects": 5,
    "references": 3,
}

# Separators used to join aggregate values
BLOCK_SEPARATOR = "\n\n"  # multi-line entries (experience, education, projects, references)
INLINE_SEPARATOR = ", "  # flat lists (skills, languages)
LINE_SEPARATOR = "\n"  # single-field lists (per-entry achievements, other sections)

# Entry formats for aggregate and WORK_EXPERIENCE_i / EDUCATION_i / ACHIEVEMENT_i values
EXPERIENCE_FORMAT = "{position} at {company}, {location} ({start_date} - {end_date})"
EDUCATION_FORMAT = "{degree} in {field_of_study}, {school} ({start_date} - {end_date})"
PROJECT_FORMAT = "{name}: {description} ({technologies})"
LANGUAGE_FORMAT = "{language}: {proficiency}"
REFERENCE_FORMAT = "{name}\n{position} at {company}\nPhone: {phone}\nEmail: {email}"

# Free-form "other" sections: attribute name -> aggregate placeholder key
OTHER_SECTION_KEYS: Dict[str, str] = {
    "certifications": "CERTIFICATIONS",
    "websites": "WEBSITES",
    "software": "SOFTWARE",
    "accomplishments": "ACCOMPLISHMENTS",
    "additional_info": "ADDITIONALINFO",
    "affiliations": "AFFILIATIONS",
    "interests": "INTERESTS",
}

# Aggregate keys that are always present in a projected map
AGGREGATE_KEYS = (
    "WORK_EXPERIENCE",
    "EDUCATION",
    "SKILLS",
    "ACHIEVEMENTS",
    "LANGUAGES",
    "REFERENCES",
    *OTHER_SECTION_KEYS.values(),
)
