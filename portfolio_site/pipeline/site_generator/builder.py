"""Site builder: the orchestrating stage of the static site pipeline.

``build_site`` runs every step in a fixed order on one thread:

1. load the project and filter-tag documents,
2. build the deduplicated project index and year groups,
3. remove the previous output tree and recreate the output root,
4. render the home page, the resume and contact pages, and one detail page
   per project without an external URL,
5. copy the static assets and favicon.

Data errors surface in step 1, before anything on disk is touched. Any later
error aborts the build; the partial output is then invalid and is replaced
wholesale by the next successful run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from portfolio_site.config import (
    CONTACT_PAGE_DIR,
    CONTACT_TEMPLATE,
    CONTACT_TITLE,
    HOME_TEMPLATE,
    HOME_TITLE,
    PAGE_FILENAME,
    PROJECT_COLLECTION_DIR,
    PROJECT_TEMPLATE,
    RESUME_PAGE_DIR,
    RESUME_STYLESHEET,
    RESUME_TEMPLATE,
    RESUME_TITLE,
    BuildConfig,
)
from portfolio_site.console import rprint
from portfolio_site.exceptions import FilesystemError
from portfolio_site.fs_utils import safe_rmtree

from .assets import copy_static_assets
from .data_loader import Project, load_site_data
from .project_index import build_project_index
from .renderer import (
    create_environment,
    load_content_fragment,
    render_page,
    write_html_output,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageContext:
    """Per-page rendering configuration.

    ``root`` is the prefix templates put in front of ``/static/...`` links.
    """

    title: str
    root: str
    data: dict[str, Any] = field(default_factory=dict)

    def as_template_vars(self) -> dict[str, Any]:
        return {**self.data, "title": self.title, "root": self.root}


@dataclass
class BuildResult:
    output_dir: Path
    pages: list[Path] = field(default_factory=list)
    skipped_external: list[str] = field(default_factory=list)
    assets: list[Path] = field(default_factory=list)
    project_count: int = 0
    year_group_count: int = 0


def root_prefix(depth: int) -> str:
    """Return the asset path prefix for a page ``depth`` directories below the root.

    Pages assume deployment at a web root, so every depth maps to ``""`` and
    links stay absolute (``/static/...``).
    """
    return ""


def project_page_path(slug: str) -> Path:
    """Return the output-relative path of a project's detail page."""
    return Path(PROJECT_COLLECTION_DIR) / slug / PAGE_FILENAME


def clean_output_dir(output_dir: Path, protected: tuple[Path, ...] = ()) -> None:
    """Delete any previous output tree and recreate an empty output root."""
    safe_rmtree(output_dir, protected)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(
            f"Could not create output directory {output_dir}: {exc}",
            context={"path": str(output_dir)},
        ) from exc


def _home_context(filter_tags: list, year_groups: list) -> PageContext:
    return PageContext(
        title=HOME_TITLE,
        root=root_prefix(0),
        data={"filter_tags": filter_tags, "year_groups": year_groups},
    )


def _resume_context() -> PageContext:
    root = root_prefix(1)
    return PageContext(
        title=RESUME_TITLE,
        root=root,
        data={
            "head_extra": f'<link rel="stylesheet" href="{root}/{RESUME_STYLESHEET}">'
        },
    )


def _contact_context() -> PageContext:
    return PageContext(title=CONTACT_TITLE, root=root_prefix(1))


def _project_context(project: Project, content: str | None) -> PageContext:
    return PageContext(
        title=project.title,
        root=root_prefix(2),
        data={"project": project, "content": content},
    )


def build_site(config: BuildConfig) -> BuildResult:
    r"""Build the complete static site described by ``config``.

    Parameters
    ----------
    config : BuildConfig
        Input and output locations for this build.

    Returns
    -------
    BuildResult
        Written pages (relative to the output root), skipped external
        projects, copied assets and index counts.

    Raises
    ------
    ConfigurationError
        If a data file or the static directory is missing.
    DataValidationError
        If a data document or content fragment is malformed.
    TemplateRenderError
        If any template fails to render.
    FilesystemError
        If cleaning, writing or copying fails.
    """
    rprint("Loading data...")
    site_data = load_site_data(config.projects_file, config.filter_tags_file)
    index = build_project_index(site_data.sections)
    rprint(
        f"Found {len(index.projects)} unique projects in "
        f"{len(index.year_groups)} year groups"
    )

    output_dir = config.output_dir
    clean_output_dir(output_dir, config.input_paths())
    result = BuildResult(
        output_dir=output_dir,
        project_count=len(index.projects),
        year_group_count=len(index.year_groups),
    )
    env = create_environment(config.templates_dir)

    def emit(relative_path: Path, template: str, context: PageContext) -> None:
        html = render_page(env, template, context.as_template_vars())
        write_html_output(html, output_dir / relative_path)
        result.pages.append(relative_path)
        rprint(f"  -> {relative_path.as_posix()}")

    rprint("\nBuilding pages...")
    emit(
        Path(PAGE_FILENAME),
        HOME_TEMPLATE,
        _home_context(site_data.filter_tags, index.year_groups),
    )
    emit(Path(RESUME_PAGE_DIR) / PAGE_FILENAME, RESUME_TEMPLATE, _resume_context())
    emit(Path(CONTACT_PAGE_DIR) / PAGE_FILENAME, CONTACT_TEMPLATE, _contact_context())

    for project in index.projects:
        if project.is_external:
            result.skipped_external.append(project.slug)
            rprint(f"  -- skipping {project.slug} (external URL)", style="dim")
            continue
        content = load_content_fragment(project.slug, config.content_dir)
        emit(
            project_page_path(project.slug),
            PROJECT_TEMPLATE,
            _project_context(project, content),
        )

    rprint("\nCopying static assets...")
    result.assets = copy_static_assets(config.static_dir, output_dir)
    for asset in result.assets:
        rprint(f"  -> {asset.as_posix()}")

    logger.info(
        "Built %d pages (%d external projects skipped) into %s",
        len(result.pages),
        len(result.skipped_external),
        output_dir,
    )
    rprint(f"\nBuild complete! Output in {output_dir}", style="bold green")
    return result
