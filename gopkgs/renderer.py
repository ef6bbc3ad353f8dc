"""
renderer.py

Responsibility: Render the vanity import landing page for one package.

Rules:
- The template sees exactly two variables: `config` (the whole `Config`) and
  `pkg` (the normalized `Package`).
- Undefined template variables are errors, never empty strings.
- Output is streamed into a handle the caller opened; this module does not
  create files or directories.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from jinja2 import Environment, FileSystemLoader, PackageLoader, StrictUndefined

from gopkgs.config import Config, Package

PAGE_TEMPLATE = "index.html.j2"


class RenderError(RuntimeError):
    pass


def build_environment(loader: FileSystemLoader | PackageLoader) -> Environment:
    return Environment(
        loader=loader,
        autoescape=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


@dataclass(frozen=True)
class PageRenderer:
    env: Environment
    template_name: str = PAGE_TEMPLATE

    @classmethod
    def from_path(cls, template_path: str | Path | None = None) -> PageRenderer:
        """
        Use the packaged template, or the template file at `template_path`.

        A missing file is only reported when a page is rendered.
        """
        if template_path is None:
            return cls(env=build_environment(PackageLoader("gopkgs", "templates")))
        path = Path(template_path)
        return cls(env=build_environment(FileSystemLoader(str(path.parent))), template_name=path.name)

    def render(self, config: Config, pkg: Package, stream: TextIO) -> None:
        """Render the page for `pkg` into `stream`."""
        try:
            template = self.env.get_template(self.template_name)
            template.stream(config=config, pkg=pkg).dump(stream)
        except Exception as e:  # noqa: BLE001 - surface as RenderError
            raise RenderError(f"Failed rendering {self.template_name} for package {pkg.name!r}: {e}") from e
