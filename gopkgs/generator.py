"""
generator.py

Responsibility: Drive the whole run over every configured package.

For each package, in declaration order: normalize its repo URL, then write its
directory (rendering happens inside the writer). A failing package is recorded
and the loop moves on; callers decide what to do with the collected failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from gopkgs.config import Config, Package
from gopkgs.renderer import PageRenderer, RenderError
from gopkgs.repo_url import InvalidReferenceError, normalize_package
from gopkgs.writer import OutputError, write_package

log = structlog.get_logger(__name__)

DEFAULT_OUTPUT_ROOT = "public"


@dataclass(frozen=True)
class PackageError:
    """A failure tied to one package; `repo` is the raw configured value."""

    name: str
    repo: str
    cause: Exception

    def __str__(self) -> str:
        return f"package {self.name!r} (repo {self.repo!r}): {self.cause}"


class GenerateError(RuntimeError):
    def __init__(self, errors: list[PackageError] | tuple[PackageError, ...]) -> None:
        self.errors = tuple(errors)
        super().__init__("\n".join(str(e) for e in self.errors))


@dataclass(frozen=True)
class GenerateResult:
    pages: tuple[Path, ...]
    errors: tuple[PackageError, ...]

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise GenerateError(self.errors)


def _generate_one(
    config: Config,
    pkg: Package,
    *,
    output_root: Path,
    renderer: PageRenderer,
    gitignore: bool,
) -> Path:
    normalized = normalize_package(config, pkg)
    return write_package(output_root, config, normalized, renderer, gitignore=gitignore)


def generate(
    config: Config,
    *,
    output_root: str | Path = DEFAULT_OUTPUT_ROOT,
    gitignore: bool = True,
    template_path: str | Path | None = None,
) -> GenerateResult:
    """
    Generate a landing page for every package in `config`.

    Never raises for per-package failures; they are returned in the result.
    """
    root = Path(output_root)
    renderer = PageRenderer.from_path(template_path)

    pages: list[Path] = []
    errors: list[PackageError] = []
    for pkg in config.packages:
        try:
            pages.append(_generate_one(config, pkg, output_root=root, renderer=renderer, gitignore=gitignore))
        except (InvalidReferenceError, OutputError, RenderError) as e:
            log.error("package failed", name=pkg.name, repo=pkg.repo, error=str(e))
            errors.append(PackageError(name=pkg.name, repo=pkg.repo, cause=e))

    log.debug("generation finished", pages=len(pages), failed=len(errors))
    return GenerateResult(pages=tuple(pages), errors=tuple(errors))
