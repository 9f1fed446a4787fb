"""Data loader for the portfolio projects and filter tags.

This module is the ingestion point of the site build. It reads the two JSON
documents that describe the site, validates their schema and returns frozen,
read-only records for the rest of the pipeline.

Input formats
-------------
``projects.json``::

    {"sections": [{"title": "Featured", "projects": [
        {"slug": "a", "title": "A", "year": 2021, "externalUrl": "https://..."}
    ]}]}

``filter-tags.json``::

    [{"key": "games", "name": "Games"}]

Any missing file raises ``ConfigurationError``; unreadable JSON or a schema
violation raises ``DataValidationError``. There is no partial load.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from portfolio_site.exceptions import ConfigurationError, DataValidationError

logger = logging.getLogger(__name__)

# Display fields the bundled templates iterate over
LIST_FIELDS: tuple[str, ...] = ("filters", "tags")


@dataclass(frozen=True)
class Project:
    """A single portfolio entry.

    Display fields beyond the identity ones stay in ``record`` and are
    reachable by item lookup, so templates can write ``project.description``.
    """

    slug: str
    title: str
    year: int
    external_url: str | None
    record: Mapping[str, Any]

    @property
    def is_external(self) -> bool:
        return bool(self.external_url)

    def __getitem__(self, key: str) -> Any:
        return self.record[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.record.get(key, default)


@dataclass(frozen=True)
class Section:
    title: str | None
    projects: tuple[Project, ...]

    def __iter__(self) -> Iterator[Project]:
        return iter(self.projects)


@dataclass(frozen=True)
class FilterTag:
    key: str
    name: str


@dataclass(frozen=True)
class SiteData:
    sections: list[Section]
    filter_tags: list[FilterTag]


def read_json_document(path: Path) -> Any:
    r"""Read and parse a JSON document.

    Parameters
    ----------
    path : Path
        Path of the UTF-8 JSON file.

    Returns
    -------
    Any
        The decoded document.

    Raises
    ------
    ConfigurationError
        If the file does not exist.
    DataValidationError
        If the file cannot be read or is not valid JSON.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(
            f"Data file not found: {path}", context={"path": str(path)}
        )
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DataValidationError(
            f"Could not parse {path.name}: {exc}", context={"path": str(path)}
        ) from exc


def _parse_year(value: Any, slug: str) -> int:
    if isinstance(value, bool):
        raise DataValidationError(
            f"Project '{slug}' has a non-integer year: {value!r}",
            context={"slug": slug},
        )
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isascii():
        try:
            return int(value.strip())
        except ValueError as exc:
            raise DataValidationError(
                f"Project '{slug}' has a non-integer year: {value!r}",
                context={"slug": slug},
            ) from exc
    raise DataValidationError(
        f"Project '{slug}' has a non-integer year: {value!r}", context={"slug": slug}
    )


def parse_project(record: Any) -> Project:
    r"""Validate one raw project record and wrap it as a ``Project``.

    Parameters
    ----------
    record : Any
        Mapping decoded from the projects document.

    Returns
    -------
    Project
        Frozen project carrying the full raw record.

    Raises
    ------
    DataValidationError
        If ``slug`` is missing or empty, ``title`` is not a string, ``year``
        is not an integer, ``externalUrl`` is present but not a string, or
        ``filters``/``tags`` is present but not a list.

    Examples
    --------
    >>> p = parse_project({"slug": "a", "title": "A", "year": "2021"})
    >>> (p.slug, p.year, p.external_url)
    ('a', 2021, None)
    """
    if not isinstance(record, Mapping):
        raise DataValidationError(f"Project record must be an object, got {record!r}")
    slug = record.get("slug")
    if not isinstance(slug, str) or not slug.strip():
        raise DataValidationError(
            "Project record is missing a 'slug'", context={"record": dict(record)}
        )
    if "/" in slug or "\\" in slug or slug in (".", ".."):
        raise DataValidationError(
            f"Project slug '{slug}' is not a valid path segment", context={"slug": slug}
        )
    title = record.get("title")
    if not isinstance(title, str):
        raise DataValidationError(
            f"Project '{slug}' is missing a 'title'", context={"slug": slug}
        )
    if "year" not in record:
        raise DataValidationError(
            f"Project '{slug}' is missing a 'year'", context={"slug": slug}
        )
    year = _parse_year(record["year"], slug)
    external_url = record.get("externalUrl")
    if external_url is not None and not isinstance(external_url, str):
        raise DataValidationError(
            f"Project '{slug}' has a non-string 'externalUrl'", context={"slug": slug}
        )
    for list_field in LIST_FIELDS:
        value = record.get(list_field)
        if value is not None and not isinstance(value, list):
            raise DataValidationError(
                f"Project '{slug}' field '{list_field}' must be a list",
                context={"slug": slug, "field": list_field},
            )
    return Project(
        slug=slug,
        title=title,
        year=year,
        external_url=external_url or None,
        record=dict(record),
    )


def load_projects(path: Path) -> list[Section]:
    """Load the ordered project sections from ``path``."""
    document = read_json_document(path)
    if not isinstance(document, Mapping) or not isinstance(
        document.get("sections"), list
    ):
        raise DataValidationError(
            f"{Path(path).name} must be an object with a 'sections' list",
            context={"path": str(path)},
        )
    sections: list[Section] = []
    for index, raw_section in enumerate(document["sections"]):
        if not isinstance(raw_section, Mapping) or not isinstance(
            raw_section.get("projects"), list
        ):
            raise DataValidationError(
                f"Section {index} must be an object with a 'projects' list",
                context={"path": str(path), "section": index},
            )
        projects = tuple(parse_project(p) for p in raw_section["projects"])
        sections.append(Section(title=raw_section.get("title"), projects=projects))
    logger.debug("Loaded %d sections from %s", len(sections), path)
    return sections


def load_filter_tags(path: Path) -> list[FilterTag]:
    """Load the ordered filter tag list from ``path``.

    Each record needs a string ``key`` and a string ``name``.
    """
    document = read_json_document(path)
    if not isinstance(document, list):
        raise DataValidationError(
            f"{Path(path).name} must be a list of tag objects",
            context={"path": str(path)},
        )
    tags: list[FilterTag] = []
    for raw_tag in document:
        if (
            not isinstance(raw_tag, Mapping)
            or not isinstance(raw_tag.get("key"), str)
            or not isinstance(raw_tag.get("name"), str)
        ):
            raise DataValidationError(
                f"Filter tag needs string 'key' and 'name': {raw_tag!r}",
                context={"path": str(path)},
            )
        tags.append(FilterTag(key=raw_tag["key"], name=raw_tag["name"]))
    return tags


def load_site_data(projects_path: Path, filter_tags_path: Path) -> SiteData:
    """Load both data documents; either failing aborts the whole load."""
    sections = load_projects(projects_path)
    filter_tags = load_filter_tags(filter_tags_path)
    return SiteData(sections=sections, filter_tags=filter_tags)
