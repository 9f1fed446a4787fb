"""Tests for two-layer page rendering, content fragments and HTML writes."""

from pathlib import Path

import pytest

from portfolio_site.exceptions import (
    DataValidationError,
    FilesystemError,
    TemplateRenderError,
)
from portfolio_site.pipeline.site_generator import renderer as r


def _templates(tmp_path: Path, page: str, layout: str = "<main>{{ content|safe }}</main>|{{ title }}") -> Path:
    root = tmp_path / "templates"
    (root / "pages").mkdir(parents=True)
    (root / "layouts").mkdir(parents=True)
    (root / "pages" / "page.html").write_text(page, encoding="utf-8")
    (root / "layouts" / "base.html").write_text(layout, encoding="utf-8")
    return root


def test_render_page_nests_page_in_layout(tmp_path: Path) -> None:
    env = r.create_environment(_templates(tmp_path, "<p>{{ title }} body</p>"))
    out = r.render_page(env, "page.html", {"title": "Hello"})
    assert out == "<main><p>Hello body</p></main>|Hello"


def test_render_page_escapes_values_but_not_content(tmp_path: Path) -> None:
    env = r.create_environment(_templates(tmp_path, "<p>{{ name }}</p>"))
    out = r.render_page(env, "page.html", {"title": "T", "name": "<b>x</b>"})
    assert "<p>&lt;b&gt;x&lt;/b&gt;</p>" in out


def test_undefined_field_in_page_raises(tmp_path: Path) -> None:
    env = r.create_environment(_templates(tmp_path, "{{ missing_field }}"))
    with pytest.raises(TemplateRenderError) as excinfo:
        r.render_page(env, "page.html", {"title": "T"})
    assert excinfo.value.context["template"] == "pages/page.html"


def test_undefined_field_in_layout_raises(tmp_path: Path) -> None:
    env = r.create_environment(
        _templates(tmp_path, "ok", layout="{{ content|safe }}{{ footer_text }}")
    )
    with pytest.raises(TemplateRenderError) as excinfo:
        r.render_page(env, "page.html", {"title": "T"})
    assert excinfo.value.context["template"] == "layouts/base.html"


def test_syntax_error_raises(tmp_path: Path) -> None:
    env = r.create_environment(_templates(tmp_path, "{% for x in %}"))
    with pytest.raises(TemplateRenderError, match="Syntax error"):
        r.render_page(env, "page.html", {"title": "T"})


@pytest.mark.parametrize(
    "page",
    ["{{ items|join(',') }}", "{% for item in items %}{{ item }}{% endfor %}"],
)
def test_wrongly_shaped_value_raises(tmp_path: Path, page: str) -> None:
    env = r.create_environment(_templates(tmp_path, page))
    with pytest.raises(TemplateRenderError, match="TypeError") as excinfo:
        r.render_page(env, "page.html", {"title": "T", "items": 5})
    assert excinfo.value.context["template"] == "pages/page.html"


def test_missing_template_raises(tmp_path: Path) -> None:
    env = r.create_environment(_templates(tmp_path, "ok"))
    with pytest.raises(TemplateRenderError, match="not found"):
        r.render_page(env, "nope.html", {"title": "T"})


def test_load_content_fragment_html_verbatim(tmp_path: Path) -> None:
    raw = "<section id='a'>\n  <p>Raw  &amp; kept</p>\n</section>\n"
    (tmp_path / "proj.html").write_text(raw, encoding="utf-8")
    assert r.load_content_fragment("proj", tmp_path) == raw


def test_load_content_fragment_markdown(tmp_path: Path) -> None:
    (tmp_path / "proj.md").write_text("# Title\n\nBody text", encoding="utf-8")
    out = r.load_content_fragment("proj", tmp_path)
    assert out is not None
    assert "<h1>Title</h1>" in out
    assert "<p>Body text</p>" in out


def test_load_content_fragment_markdown_keeps_inline_spacing(tmp_path: Path) -> None:
    (tmp_path / "proj.md").write_text("**bold** *italic* `code`", encoding="utf-8")
    out = r.load_content_fragment("proj", tmp_path)
    assert out == "<p><strong>bold</strong> <em>italic</em> <code>code</code></p>"


def test_load_content_fragment_html_wins_over_markdown(tmp_path: Path) -> None:
    (tmp_path / "proj.html").write_text("<p>html</p>", encoding="utf-8")
    (tmp_path / "proj.md").write_text("markdown", encoding="utf-8")
    assert r.load_content_fragment("proj", tmp_path) == "<p>html</p>"


def test_load_content_fragment_absent(tmp_path: Path) -> None:
    assert r.load_content_fragment("proj", tmp_path) is None
    assert r.load_content_fragment("proj", tmp_path / "no-such-dir") is None


def test_load_content_fragment_markdown_error(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "proj.md").write_text("# Hi", encoding="utf-8")

    def bad(*a, **k):
        raise RuntimeError("boom")

    monkeypatch.setattr("markdown2.markdown", bad)
    with pytest.raises(DataValidationError):
        r.load_content_fragment("proj", tmp_path)


def test_clean_html_output() -> None:
    raw = "<p>\n</p><p>&nbsp;</p><h1>Title</h1>\n<p><br/></p>\n<br/><br/>"
    assert r.clean_html_output(raw) == "<h1>Title</h1>\n\n<br>"


def test_clean_html_output_type_error() -> None:
    with pytest.raises(TypeError):
        r.clean_html_output(123)  # type: ignore[arg-type]


def test_write_html_output_creates_parents(tmp_path: Path) -> None:
    out = tmp_path / "a" / "b" / "index.html"
    r.write_html_output("<html></html>", out)
    assert out.read_text(encoding="utf-8") == "<html></html>"


def test_write_html_output_errors_propagate(monkeypatch, tmp_path: Path) -> None:
    def bad_write_text(self, content, encoding="utf-8"):
        raise OSError("disk full")

    monkeypatch.setattr(Path, "write_text", bad_write_text)
    with pytest.raises(FilesystemError, match="disk full"):
        r.write_html_output("<html></html>", tmp_path / "index.html")
