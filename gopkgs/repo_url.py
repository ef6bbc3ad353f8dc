"""
repo_url.py

Responsibility: Complete a package's raw repository reference into an absolute URL.

A reference may be:
- empty            -> https://github.com/<defaultUser>/<package name>
- a bare repo name -> https://github.com/<defaultUser>/<repo>
- "user/repo"      -> https://github.com/user/repo
- a full URL       -> kept as is

Purely syntactic: nothing here touches the network.
"""

from __future__ import annotations

import dataclasses
import re
from urllib.parse import SplitResult, urlsplit, urlunsplit

from gopkgs.config import Config, Package

DEFAULT_SCHEME = "https"
DEFAULT_HOST = "github.com"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_BAD_HOST_CHAR = re.compile(r"[ {}|\\^`]")


class InvalidReferenceError(ValueError):
    pass


def _split(raw: str) -> SplitResult:
    # urlsplit silently strips some control characters, so reject them up front.
    if _CONTROL_CHARS.search(raw):
        raise InvalidReferenceError(f"Invalid control character in repository reference: {raw!r}")
    if _BAD_ESCAPE.search(raw):
        raise InvalidReferenceError(f"Invalid percent escape in repository reference: {raw!r}")
    if raw.startswith(":"):
        raise InvalidReferenceError(f"Missing scheme in repository reference: {raw!r}")
    try:
        parts = urlsplit(raw)
        parts.port  # validates the port
    except ValueError as e:
        raise InvalidReferenceError(f"Cannot parse repository reference {raw!r}: {e}") from e

    host = parts.netloc.rpartition("@")[2]
    if _BAD_HOST_CHAR.search(host):
        raise InvalidReferenceError(f"Invalid character in host of repository reference: {raw!r}")

    # A scheme-less reference may not have a colon before its first slash.
    rest = re.split(r"[?#]", raw, maxsplit=1)[0]
    if not parts.scheme and not rest.startswith("/") and ":" in rest.split("/", 1)[0]:
        raise InvalidReferenceError(f"First path segment of repository reference contains a colon: {raw!r}")
    return parts


def normalize_repo_url(raw: str, *, name: str, default_user: str) -> str:
    """
    Return the fully qualified repository URL for `raw`.

    Raises InvalidReferenceError if `raw` cannot be parsed as a URL.
    """
    parts = _split(raw)

    path = parts.path
    if path == "":
        path = f"{default_user}/{name}"
    elif "/" not in path:
        path = f"{default_user}/{raw}"

    scheme = parts.scheme or DEFAULT_SCHEME
    netloc = parts.netloc or DEFAULT_HOST
    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))


def normalize_package(config: Config, pkg: Package) -> Package:
    """Return a copy of `pkg` with its `repo` replaced by the normalized URL."""
    repo = normalize_repo_url(pkg.repo, name=pkg.name, default_user=config.default_user)
    return dataclasses.replace(pkg, repo=repo)
