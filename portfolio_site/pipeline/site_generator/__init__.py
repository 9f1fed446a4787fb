"""Site generator pipeline package.

Holds the four stages of the static site build and exposes their public
functions. All logic lives in the submodules:

- ``data_loader``: reads ``projects.json`` and ``filter-tags.json``.
- ``project_index``: deduplicates projects and groups them by year.
- ``renderer``: two-layer Jinja2 rendering, content fragments, HTML writes.
- ``assets``: static asset and favicon copy.
- ``builder``: the orchestrator, ``build_site``.
- ``runner``: ``run_from_config`` and logging setup for entrypoints.

Usage
-----
>>> from portfolio_site.config import BuildConfig
>>> from portfolio_site.pipeline.site_generator import build_site
>>> result = build_site(BuildConfig.from_defaults())
"""

from .assets import copy_static_assets
from .builder import BuildResult, PageContext, build_site, clean_output_dir, root_prefix
from .data_loader import (
    FilterTag,
    Project,
    Section,
    SiteData,
    load_filter_tags,
    load_projects,
    load_site_data,
)
from .project_index import (
    ProjectIndex,
    YearGroup,
    build_project_index,
    deduplicate_projects,
    group_by_year,
)
from .renderer import (
    clean_html_output,
    create_environment,
    load_content_fragment,
    render_page,
    write_html_output,
)

__all__ = [
    "BuildResult",
    "FilterTag",
    "PageContext",
    "Project",
    "ProjectIndex",
    "Section",
    "SiteData",
    "YearGroup",
    "build_project_index",
    "build_site",
    "clean_html_output",
    "clean_output_dir",
    "copy_static_assets",
    "create_environment",
    "deduplicate_projects",
    "group_by_year",
    "load_content_fragment",
    "load_filter_tags",
    "load_projects",
    "load_site_data",
    "render_page",
    "root_prefix",
    "write_html_output",
]
