"""Global configuration constants for the project.

Defines default paths, fixed output names and the ``BuildConfig`` context
object that carries them through every stage of the site build.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
PACKAGE_DIR: Path = PROJECT_ROOT / "portfolio_site"
LOG_DIR: Path = PROJECT_ROOT / "logs"

# Site sources (relative to a site root)
DATA_SUBDIR: str = "data"
CONTENT_SUBDIR: str = "content"
TEMPLATES_SUBDIR: str = "templates"
STATIC_SUBDIR: str = "static"
OUTPUT_SUBDIR: str = "dist"
PROJECTS_FILENAME: str = "projects.json"
FILTER_TAGS_FILENAME: str = "filter-tags.json"

DATA_DIR: Path = PROJECT_ROOT / DATA_SUBDIR
PROJECTS_FILE: Path = DATA_DIR / PROJECTS_FILENAME
FILTER_TAGS_FILE: Path = DATA_DIR / FILTER_TAGS_FILENAME
CONTENT_DIR: Path = DATA_DIR / CONTENT_SUBDIR
TEMPLATES_DIR: Path = PROJECT_ROOT / TEMPLATES_SUBDIR
STATIC_DIR: Path = PROJECT_ROOT / STATIC_SUBDIR
OUTPUT_DIR: Path = PROJECT_ROOT / OUTPUT_SUBDIR

# Templates
PAGES_TEMPLATE_SUBDIR: str = "pages"
LAYOUT_TEMPLATE: str = "layouts/base.html"
HOME_TEMPLATE: str = "home.html"
RESUME_TEMPLATE: str = "resume.html"
CONTACT_TEMPLATE: str = "contact.html"
PROJECT_TEMPLATE: str = "project.html"

# Page titles
HOME_TITLE: str = "Portfolio"
RESUME_TITLE: str = "Resume"
CONTACT_TITLE: str = "Contact"

# Output layout
PAGE_FILENAME: str = "index.html"
RESUME_PAGE_DIR: str = "resume"
CONTACT_PAGE_DIR: str = "contact"
PROJECT_COLLECTION_DIR: str = "portfolio"
STATIC_OUTPUT_DIR: str = "static"
FAVICON_FILENAME: str = "favicon.svg"
RESUME_STYLESHEET: str = "static/css/resume.css"

# Content fragments
CONTENT_HTML_SUFFIX: str = ".html"
CONTENT_MARKDOWN_SUFFIX: str = ".md"
MARKDOWN_EXTRAS: list[str] = ["tables", "fenced-code-blocks"]

# CLI defaults and logging
LOG_FILENAME_BUILD_SITE: str = "build_site.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class BuildConfig:
    """Paths for one build invocation.

    Parameters
    ----------
    projects_file : Path
        JSON document holding the project sections.
    filter_tags_file : Path
        JSON array of filter tag records.
    content_dir : Path
        Directory with optional per-project content fragments.
    templates_dir : Path
        Template root containing ``pages/`` and ``layouts/``.
    static_dir : Path
        Static asset source tree, copied to ``<output>/static``.
    output_dir : Path
        Build output root. Removed and recreated on every build.

    Examples
    --------
    >>> cfg = BuildConfig.from_root(Path("/srv/site"))
    >>> cfg.output_dir
    PosixPath('/srv/site/dist')
    """

    projects_file: Path = PROJECTS_FILE
    filter_tags_file: Path = FILTER_TAGS_FILE
    content_dir: Path = CONTENT_DIR
    templates_dir: Path = TEMPLATES_DIR
    static_dir: Path = STATIC_DIR
    output_dir: Path = OUTPUT_DIR
    extra_protected: tuple[Path, ...] = field(default_factory=tuple)

    @classmethod
    def from_defaults(cls, **overrides: Path | None) -> BuildConfig:
        """Return the project-level defaults, replacing any non-``None`` override."""
        values = {k: Path(v) for k, v in overrides.items() if v is not None}
        return replace(cls(), **values)

    @classmethod
    def from_root(cls, root: Path, output_dir: Path | None = None) -> BuildConfig:
        """Return a config for a self-contained site directory laid out like the project root."""
        root = Path(root)
        data_dir = root / DATA_SUBDIR
        return cls(
            projects_file=data_dir / PROJECTS_FILENAME,
            filter_tags_file=data_dir / FILTER_TAGS_FILENAME,
            content_dir=data_dir / CONTENT_SUBDIR,
            templates_dir=root / TEMPLATES_SUBDIR,
            static_dir=root / STATIC_SUBDIR,
            output_dir=Path(output_dir) if output_dir is not None else root / OUTPUT_SUBDIR,
        )

    def input_paths(self) -> tuple[Path, ...]:
        """Return every input location the output directory must never swallow."""
        return (
            self.projects_file,
            self.filter_tags_file,
            self.content_dir,
            self.templates_dir,
            self.static_dir,
            *self.extra_protected,
        )
