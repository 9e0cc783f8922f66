"""HTML page rendering from the templates directory."""

import logging
from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError, TemplateNotFound, TemplateSyntaxError

from app.core.errors import RenderError, TemplateNotFoundError

logger = logging.getLogger(__name__)

INDEX_PAGE = "index.html"
REGISTER_PAGE = "register.html"
SUCCESS_PAGE = "success.html"
UPDATE_PAGE = "update.html"
DELETE_PAGE = "delete.html"


class PageRenderer:
    """
    Render named pages to UTF-8 HTML.

    Jinja keeps parsed templates in memory but checks the file's mtime on each
    lookup (auto_reload), so edited pages are picked up without a restart.
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)
        self._templates = Jinja2Templates(directory=str(self.directory))

    def render(self, template_name: str, data: dict[str, Any] | None = None) -> bytes:
        """Render template_name with data. Raises TemplateNotFoundError or RenderError."""
        try:
            template = self._templates.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateNotFoundError(
                f"Template {template_name!r} not found in {self.directory}", cause=e
            ) from e
        except TemplateSyntaxError as e:
            raise RenderError(
                f"Template {template_name!r} has invalid syntax (line {e.lineno})", cause=e
            ) from e
        except OSError as e:
            raise RenderError(f"Could not read template {template_name!r}", cause=e) from e
        try:
            html = template.render(**(data or {}))
        except TemplateError as e:
            raise RenderError(f"Failed to render template {template_name!r}", cause=e) from e
        logger.debug("Rendered %s", template_name)
        return html.encode("utf-8")
