"""
writer.py

Responsibility: Lay out one package's output directory.

    <output_root>/<name>/.gitignore    (optional)
    <output_root>/<name>/index.html
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

import structlog

from gopkgs.config import Config, Package
from gopkgs.renderer import PageRenderer

log = structlog.get_logger(__name__)

# Generated pages are build artifacts; keep them out of version control.
GITIGNORE_CONTENT = ".gitignore\nindex.html"


class OutputError(RuntimeError):
    pass


def package_dir(output_root: str | Path, name: str) -> Path:
    """
    Return `<output_root>/<name>`, keeping absolute names under the root.

    Raises OutputError for names that climb out of the root with "..".
    """
    parts = [p for p in PurePosixPath(name).parts if p != "/"]
    if ".." in parts:
        raise OutputError(f"Package name {name!r} escapes the output root.")
    return Path(output_root).joinpath(*parts)


def write_package(
    output_root: str | Path,
    config: Config,
    pkg: Package,
    renderer: PageRenderer,
    *,
    gitignore: bool = True,
) -> Path:
    """
    Write the landing page for an already-normalized `pkg`; return the index.html path.

    Raises OutputError on filesystem failures and RenderError on template failures.
    """
    pkg_dir = package_dir(output_root, pkg.name)
    index_path = pkg_dir / "index.html"

    try:
        pkg_dir.mkdir(parents=True, exist_ok=True)
        if gitignore:
            (pkg_dir / ".gitignore").write_text(GITIGNORE_CONTENT, encoding="utf-8")
        f = index_path.open("w", encoding="utf-8", newline="\n")
    except (OSError, ValueError) as e:
        # ValueError covers names the OS cannot take (NUL, unencodable characters).
        raise OutputError(f"Cannot write output for package {pkg.name!r}: {e}") from e

    log.info("generating page", name=pkg.name, repo=pkg.repo, path=str(index_path))
    with f:
        renderer.render(config, pkg, f)
    return index_path
