"""Project index: deduplication and year grouping.

Sections may cross-list the same project, so the flat project list is built
by walking sections in order, then projects in order, keeping the first
occurrence of each slug. The year groups derived from it drive the display
order of the home page and must be deterministic for identical input.

Examples
--------
>>> from portfolio_site.pipeline.site_generator.data_loader import Section, parse_project
>>> a = parse_project({"slug": "a", "title": "A", "year": 2021})
>>> b = parse_project({"slug": "b", "title": "B", "year": 2022})
>>> index = build_project_index([Section(None, (a, b)), Section(None, (a,))])
>>> [p.slug for p in index.projects]
['a', 'b']
>>> [(g.year, [p.slug for p in g.projects]) for g in index.year_groups]
[(2022, ['b']), (2021, ['a'])]
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .data_loader import Project, Section


@dataclass(frozen=True)
class YearGroup:
    year: int
    projects: tuple[Project, ...]


@dataclass(frozen=True)
class ProjectIndex:
    projects: list[Project]
    year_groups: list[YearGroup]


def deduplicate_projects(sections: Iterable[Section]) -> list[Project]:
    """Flatten sections in document order, keeping the first project per slug."""
    projects: list[Project] = []
    seen_slugs: set[str] = set()
    for section in sections:
        for project in section.projects:
            if project.slug in seen_slugs:
                continue
            seen_slugs.add(project.slug)
            projects.append(project)
    return projects


def group_by_year(projects: Iterable[Project]) -> list[YearGroup]:
    """Group projects by year, newest year first.

    Projects inside a group keep their relative input order.
    """
    by_year: dict[int, list[Project]] = {}
    for project in projects:
        by_year.setdefault(project.year, []).append(project)
    return [
        YearGroup(year=year, projects=tuple(by_year[year]))
        for year in sorted(by_year, reverse=True)
    ]


def build_project_index(sections: Iterable[Section]) -> ProjectIndex:
    projects = deduplicate_projects(sections)
    return ProjectIndex(projects=projects, year_groups=group_by_year(projects))
