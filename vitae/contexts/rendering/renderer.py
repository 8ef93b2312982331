"""
Template Renderer

Substitutes a placeholder map into a template string.

Rendering is two passes over one compiled token pattern:
1. Substitution: each {KEY} whose key is in the map is replaced by its value,
   verbatim. Substituted values are never rescanned.
2. Cleanup: every {KEY} token still present is deleted. This includes tokens that
   were not in the map, tokens that arrived inside substituted values, and tokens
   formed by the deletions themselves.

Text that does not match the token grammar ({lower}, {A-B}, unbalanced braces)
passes through untouched. Values are not HTML-escaped.

Rendered output must not be fed back into render(): field values are plain text
and a second pass would interpret any token-shaped text they contain.
"""

import re
from typing import List, Mapping, Optional

from vitae.utils.text_processing import as_text

# Shared by substitution, cleanup and scanning so all three agree on what a token is
PLACEHOLDER_PATTERN = re.compile(r"\{([A-Z_0-9]+)\}")


def substitute_placeholders(template: str, placeholders: Mapping[str, str]) -> str:
    """
    Replace known tokens with their values, leaving unknown tokens in place.

    Keys with empty values replace their token with "".
    """

    def _replace(match: re.Match) -> str:
        key = match.group(1)
        if key in placeholders:
            return as_text(placeholders[key])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def strip_placeholders(text: str) -> str:
    """
    Delete every remaining token matching the placeholder grammar.

    Repeats until nothing matches, since deleting an inner token can join its
    neighbours into a new one ("{A{B}C}" -> "{AC}"). Each pass shortens the text.
    """
    text, removed = PLACEHOLDER_PATTERN.subn("", text)
    while removed:
        text, removed = PLACEHOLDER_PATTERN.subn("", text)
    return text


def render(template: str, placeholders: Mapping[str, str]) -> str:
    """
    Render a template with a placeholder map.

    Args:
        template: Template text containing {KEY} tokens
        placeholders: Mapping of bare keys to replacement strings

    Returns:
        Rendered text with no {KEY} tokens left

    Examples:
        >>> render("Hello {NAME}{MISSING}!", {"NAME": "Ana"})
        'Hello Ana!'
        >>> render("{lower} stays", {})
        '{lower} stays'
    """
    template = as_text(template)
    placeholders = placeholders if isinstance(placeholders, Mapping) else {}
    return strip_placeholders(substitute_placeholders(template, placeholders))


def find_placeholders(template: str) -> List[str]:
    """
    List the keys a template references, in first-appearance order, without duplicates.

    Examples:
        >>> find_placeholders("{NAME} {SURNAME} {NAME}")
        ['NAME', 'SURNAME']
    """
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(as_text(template))))


def compose_styles(html: str, css: Optional[str] = None) -> str:
    """
    Prepend a template's stylesheet to rendered HTML.

    Args:
        html: Rendered template body
        css: Stylesheet text (None or "" leaves html unchanged)

    Returns:
        "<style>{css}</style>" followed by html
    """
    if not css:
        return html
    return f"<style>{css}</style>{html}"
