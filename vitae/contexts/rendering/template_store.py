import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, TemplateNotFound

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("VITAE_TEMPLATES_PATH", "templates"))

HTML_FILENAME = "template.html"
CSS_FILENAME = "style.css"


@dataclass(frozen=True)
class DocumentTemplate:
    """
    Raw template markup and optional stylesheet.

    Attributes:
        name: Template name (directory name in the store)
        html: Template body containing {KEY} placeholders
        css: Stylesheet text, or None when the template ships no style.css
    """

    name: str
    html: str
    css: Optional[str] = None


class TemplateStore:
    """
    Store for loading and caching document templates.

    Templates are stored as {templates_path}/{name}/template.html with an optional
    {templates_path}/{name}/style.css. Sources are read through a Jinja2
    FileSystemLoader, which resolves names safely under the search path; the markup
    itself is returned raw, since placeholder substitution is done by the renderer.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template store.

        Args:
            templates_path: Base directory containing one subdirectory per template.
                            Defaults to VITAE_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, DocumentTemplate] = {}
        self.env = Environment(loader=FileSystemLoader(str(self.templates_path)))

    def _read_source(self, relative_path: str) -> str:
        source, _, _ = self.env.loader.get_source(self.env, relative_path)
        return source

    def get_template(self, name: str) -> DocumentTemplate:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name (e.g., 'classic')

        Returns:
            DocumentTemplate with html and optional css

        Raises:
            TemplateNotFound: If the template's HTML file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        try:
            html = self._read_source(f"{name}/{HTML_FILENAME}")
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.get_template_path(name)}"
            ) from e

        try:
            css = self._read_source(f"{name}/{CSS_FILENAME}")
        except TemplateNotFound:
            css = None

        template = DocumentTemplate(name=name, html=html, css=css)
        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Get the file path for a template's HTML."""
        return self.templates_path / name / HTML_FILENAME

    def list_templates(self) -> List[str]:
        """List names of all templates in the store, sorted."""
        if not self.templates_path.exists():
            return []

        suffix = f"/{HTML_FILENAME}"
        return sorted(
            path[: -len(suffix)]
            for path in self.env.loader.list_templates()
            if path.endswith(suffix)
        )

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
