"""Page rendering utilities for the static portfolio site.

This module turns a page template plus a data context into final HTML using a
two-layer composition: the page template under ``pages/`` is rendered first,
and its output is injected as ``content`` into the shared layout together with
the same context.

System Boundaries
-----------------
- Reads templates from the configured template root and optional content
  fragments from the content directory; writes nothing except through
  ``write_html_output``.
- Jinja2 runs with ``StrictUndefined``: a reference to a missing field is an
  error, never silent empty output.
- All failures are raised (``TemplateRenderError``, ``DataValidationError``,
  ``FilesystemError``); nothing is swallowed.

Example
-------
>>> from pathlib import Path
>>> from portfolio_site.pipeline.site_generator import renderer
>>> env = renderer.create_environment(Path("templates"))
>>> html = renderer.render_page(env, "contact.html", {"title": "Contact", "root": ""})
>>> renderer.write_html_output(html, Path("/tmp/site/contact/index.html"))
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jinja2
import markdown2

from portfolio_site.config import (
    CONTENT_HTML_SUFFIX,
    CONTENT_MARKDOWN_SUFFIX,
    LAYOUT_TEMPLATE,
    MARKDOWN_EXTRAS,
    PAGES_TEMPLATE_SUBDIR,
)
from portfolio_site.exceptions import (
    DataValidationError,
    FilesystemError,
    TemplateRenderError,
)

logger = logging.getLogger(__name__)


def create_environment(templates_dir: Path) -> jinja2.Environment:
    r"""Create the Jinja2 environment used for every page of one build.

    Parameters
    ----------
    templates_dir : Path
        Template root containing ``pages/`` and ``layouts/``.

    Returns
    -------
    jinja2.Environment
        Environment with HTML autoescaping and ``StrictUndefined``.

    Notes
    -----
    Templates load lazily; a missing template root surfaces as
    ``TemplateRenderError`` on the first render.
    """
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(templates_dir)),
        autoescape=jinja2.select_autoescape(["html", "xml"]),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )


def render_template(
    env: jinja2.Environment, template_name: str, variables: Mapping[str, Any]
) -> str:
    """Render one template, mapping every render failure to ``TemplateRenderError``."""
    try:
        return env.get_template(template_name).render(**variables)
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateRenderError(
            f"Syntax error in {exc.name or template_name} line {exc.lineno}: {exc.message}",
            context={"template": template_name, "line": exc.lineno},
        ) from exc
    except jinja2.TemplateNotFound as exc:
        raise TemplateRenderError(
            f"Template not found: {exc.name}", context={"template": template_name}
        ) from exc
    except jinja2.TemplateError as exc:
        raise TemplateRenderError(
            f"Failed to render {template_name}: {exc}",
            context={"template": template_name},
        ) from exc
    except Exception as exc:
        # Filters and loops applied to data of the wrong shape fail here.
        raise TemplateRenderError(
            f"Failed to render {template_name}: {type(exc).__name__}: {exc}",
            context={"template": template_name},
        ) from exc


def render_page(
    env: jinja2.Environment, page_template: str, variables: Mapping[str, Any]
) -> str:
    r"""Render a page template and wrap it in the shared layout.

    Parameters
    ----------
    env : jinja2.Environment
        Environment from ``create_environment``.
    page_template : str
        File name under ``pages/`` (e.g. ``"home.html"``).
    variables : Mapping[str, Any]
        Template variables; passed to both render steps.

    Returns
    -------
    str
        Final HTML of the page.

    Raises
    ------
    TemplateRenderError
        On syntax errors, undefined references or missing templates in
        either layer.
    """
    inner = render_template(env, f"{PAGES_TEMPLATE_SUBDIR}/{page_template}", variables)
    return render_template(env, LAYOUT_TEMPLATE, {**variables, "content": inner})


def clean_html_output(html_content: str) -> str:
    r"""Perform lightweight normalization of HTML converted from Markdown.

    Removes empty paragraphs, redundant breaks and runs of blank lines.
    Whitespace between inline elements is kept.

    Raises
    ------
    TypeError
        If input is not str.

    Examples
    --------
    >>> clean_html_output("<p></p><h1>Hi</h1><p>&nbsp;</p><br><br>")
    '<h1>Hi</h1><br>'
    """
    if not isinstance(html_content, str):
        raise TypeError("Input must be a string.")
    html_content = re.sub(r"<p>\s*</p>", "", html_content)
    html_content = re.sub(r"<p>&nbsp;</p>", "", html_content)
    html_content = re.sub(r"<p><br\s*/?>\s*</p>", "", html_content)
    html_content = re.sub(r"(<br\s*/?>\s*){2,}", "<br>", html_content)
    html_content = re.sub(r"\n\s*\n\s*\n+", "\n\n", html_content)
    return html_content.strip()


def load_content_fragment(slug: str, content_dir: Path) -> str | None:
    r"""Return the custom content fragment for a project, if one exists.

    ``<slug>.html`` is returned verbatim. When only ``<slug>.md`` exists it is
    converted with ``markdown2`` and cleaned. Neither present gives ``None``.

    Parameters
    ----------
    slug : str
        Project identifier used as the file stem.
    content_dir : Path
        Directory holding the fragments. May be absent.

    Raises
    ------
    FilesystemError
        If a fragment exists but cannot be read.
    DataValidationError
        If Markdown conversion fails.

    Examples
    --------
    >>> from pathlib import Path
    >>> load_content_fragment("nosuchproject", Path("/nonexistent")) is None
    True
    """
    html_path = content_dir / f"{slug}{CONTENT_HTML_SUFFIX}"
    markdown_path = content_dir / f"{slug}{CONTENT_MARKDOWN_SUFFIX}"
    if html_path.is_file():
        return _read_text(html_path)
    if not markdown_path.is_file():
        return None
    markdown_text = _read_text(markdown_path)
    try:
        description_html = markdown2.markdown(markdown_text, extras=MARKDOWN_EXTRAS)
    except Exception as exc:
        raise DataValidationError(
            f"Could not convert {markdown_path.name} to HTML: {exc}",
            context={"path": str(markdown_path)},
        ) from exc
    return clean_html_output(str(description_html))


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FilesystemError(
            f"Could not read {path}: {exc}", context={"path": str(path)}
        ) from exc


def write_html_output(html_content: str, output_file: Path) -> None:
    r"""Write HTML to disk, creating parent directories.

    Raises
    ------
    FilesystemError
        On any I/O failure; the build must stop rather than leave a gap.
    """
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(html_content, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(
            f"Could not write {output_file}: {exc}", context={"path": str(output_file)}
        ) from exc
