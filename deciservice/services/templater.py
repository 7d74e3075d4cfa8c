"""
Deciservice — Templater (Jinja2)
==================================

What:  Loads, caches and renders the HTML templates of the browser UI.
How:   One jinja2.Environment over the templates directory. Jinja2 keeps
       compiled templates in its own cache, so loading is cheap after the
       first request. Jinja2 errors are translated into the application's
       TemplateLoadError / TemplateRenderError.
Who:   Built once at startup; injected into the browser controller.

Templates:
    page.html         shared shell; includes the partial named by `content`
    notes-list.html   list of notes
    note-edit.html    edit form for `note`
    note-create.html  empty creation form
"""

import logging
from typing import Any, Mapping

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError as JinjaTemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from deciservice.exceptions import TemplateLoadError, TemplateRenderError

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = "page.html"


class Templater:
    """
    Compiles and renders page templates against a variable mapping.

    Undefined variables are errors (StrictUndefined): a template that refers
    to a variable the handler did not provide fails instead of printing blanks.
    """

    def __init__(self, templates_dir: str):
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Load a template by name.

        Raises:
            TemplateLoadError: The template is missing, unreadable or does not parse.
        """
        try:
            return self.env.get_template(name)
        except TemplateNotFound as e:
            logger.error("Template not found: %s (in %s)", name, self.templates_dir)
            raise TemplateLoadError(name, context={"missing": e.name}) from e
        except TemplateSyntaxError as e:
            logger.error("Template syntax error in %s line %s: %s", name, e.lineno, e.message)
            raise TemplateLoadError(name, context={"line": e.lineno}) from e
        except OSError as e:
            logger.error("Cannot read template %s: %s", name, str(e))
            raise TemplateLoadError(name, context={"error_type": type(e).__name__}) from e

    def render(self, name: str, variables: Mapping[str, Any]) -> str:
        """
        Load a template and process it.

        Raises:
            TemplateLoadError: See get_template().
            TemplateRenderError: The template failed while being processed,
                e.g. an undefined variable or a missing included partial.
        """
        template = self.get_template(name)
        try:
            return template.render(**variables)
        except JinjaTemplateError as e:
            logger.error("Cannot process template %s: %s", name, str(e))
            raise TemplateRenderError(name, context={"error_type": type(e).__name__}) from e
