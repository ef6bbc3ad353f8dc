"""
gopkgs package

Generates static "go get" vanity import pages: one `index.html` per configured
Go package, each pointing the go tool at the package's source repository.

Key responsibilities are split across modules:
- `config.py`: parse the YAML configuration into `Config` / `Package`
- `repo_url.py`: complete partial repository references into absolute URLs
- `renderer.py`: Jinja2 rendering of the landing page template
- `writer.py`: per-package output directory, `.gitignore` and `index.html`
- `generator.py`: pipeline driver (normalize -> write) with error aggregation
- `cli.py`: CLI entrypoint
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
