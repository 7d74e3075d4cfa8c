"""
Deciservice — Templater Unit Tests
====================================

What:  Tests for loading and rendering Jinja2 templates.
How:   The shipped templates for the happy path; throwaway templates in a
       tmp_path directory for the failure modes.
"""

import pytest

from deciservice.exceptions import TemplateError, TemplateLoadError, TemplateRenderError
from deciservice.schemas.note import Note
from deciservice.services.templater import PAGE_TEMPLATE, Templater


def page_variables(**values):
    return {"base": "/app", "dist": "/app/dist", "title": "Notes", **values}


@pytest.fixture
def broken_templates(tmp_path):
    (tmp_path / "undefined.html").write_text("Hello {{ nobody }}")
    (tmp_path / "syntax.html").write_text("{% if %}")
    (tmp_path / "includes-missing.html").write_text("{% include 'gone.html' %}")
    return Templater(str(tmp_path))


class TestShippedTemplates:

    def test_list_page(self, templater):
        html = templater.render(PAGE_TEMPLATE, page_variables(
            content="notes-list.html",
            notes=[Note(id=4, uri="notes/4", title="Shopping", body="bread")],
        ))

        assert "<title>Notes</title>" in html
        assert 'href="/app/dist/css/notes.css"' in html
        assert 'href="/app/notes/4/edit"' in html
        assert 'action="/app/notes/delete"' in html

    def test_untitled_note_gets_placeholder(self, templater):
        html = templater.render(PAGE_TEMPLATE, page_variables(
            content="notes-list.html",
            notes=[Note(id=1, title="", body="text only")],
        ))

        assert "(untitled)" in html

    def test_edit_form_escapes_attribute_values(self, templater):
        html = templater.render(PAGE_TEMPLATE, page_variables(
            title="Edit Note",
            content="note-edit.html",
            note=Note(id=2, title='say "hi"', body="</textarea><script>"),
        ))

        assert 'value="say &#34;hi&#34;"' in html
        assert "<script>" not in html

    def test_get_template_caches(self, templater):
        assert templater.get_template("page.html") is templater.get_template("page.html")


class TestTemplateFailures:

    def test_missing_template(self, templater):
        with pytest.raises(TemplateLoadError) as excinfo:
            templater.get_template("does-not-exist.html")
        assert excinfo.value.template == "does-not-exist.html"

    def test_syntax_error_is_load_error(self, broken_templates):
        with pytest.raises(TemplateLoadError):
            broken_templates.render("syntax.html", {})

    def test_undefined_variable_is_render_error(self, broken_templates):
        with pytest.raises(TemplateRenderError):
            broken_templates.render("undefined.html", {})

    def test_missing_include_is_render_error(self, broken_templates):
        with pytest.raises(TemplateRenderError):
            broken_templates.render("includes-missing.html", {})

    def test_page_without_content_variable(self, templater):
        with pytest.raises(TemplateError):
            templater.render(PAGE_TEMPLATE, {"base": "", "dist": "/dist", "title": "x"})
