"""
VITAE - Versatile Injection of Templated Applicant Entries

A placeholder substitution engine for resumes and cover letters. Structured
document data is projected into a flat, numbered placeholder namespace and
substituted into arbitrary HTML/CSS templates.

Architecture:
- Templating Context: Document model, placeholder catalog, placeholder projection
- Rendering Context: Template loading, placeholder substitution, style composition
"""

__version__ = "0.1.0"
