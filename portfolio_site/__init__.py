"""Portfolio static site builder.

Reads project and filter-tag data, renders the home, resume, contact and
per-project pages through Jinja2 templates, and copies static assets into a
deployable output directory.

Package Structure
-----------------
- `pipeline/site_generator/`: data loading, project index, rendering and the
  ``build_site`` orchestrator.
- `config.py`: configuration constants (UPPER_SNAKE_CASE) and ``BuildConfig``.
- `exceptions.py`: the ``AppError`` hierarchy.
- `cli.py`: command line entry point.
"""

__version__ = "1.0.0"
