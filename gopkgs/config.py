"""
config.py

Responsibility: Load the YAML configuration into an immutable, typed model.

Schema:
    host: str           # vanity import host, e.g. "go.example.com"
    defaultUser: str    # user/org used to complete partial repo references
    packages:
      - name: str       # output directory name and page title
        repo: str       # raw (possibly partial) repository reference

Missing keys load as empty values; completing them is the normalizer's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Package:
    """A single vanity import path and its repository reference."""

    name: str
    repo: str = ""


@dataclass(frozen=True)
class Config:
    """Parsed configuration shared by every generated page."""

    host: str = ""
    default_user: str = ""
    packages: tuple[Package, ...] = field(default_factory=tuple)


def _str_field(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{where}: `{key}` must be a string, got {type(value).__name__}.")
    return value


def _parse_package(raw: Any, index: int) -> Package:
    where = f"packages[{index}]"
    if not isinstance(raw, dict):
        raise ConfigError(f"{where} must be an object/mapping.")
    return Package(name=_str_field(raw, "name", where), repo=_str_field(raw, "repo", where))


def parse_config(data: bytes | str) -> Config:
    """
    Parse a YAML document into a `Config`.

    Raises ConfigError on malformed YAML or fields of the wrong type.
    """
    try:
        doc = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed configuration: {e}") from e

    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise ConfigError("Configuration must be an object/mapping at the top level.")

    pkgs_raw = doc.get("packages")
    if pkgs_raw is None:
        pkgs_raw = []
    if not isinstance(pkgs_raw, list):
        raise ConfigError("`packages` must be a list when provided.")

    return Config(
        host=_str_field(doc, "host", "config"),
        default_user=_str_field(doc, "defaultUser", "config"),
        packages=tuple(_parse_package(p, i) for i, p in enumerate(pkgs_raw)),
    )


def load_config(path: str | Path | None = None) -> Config:
    """
    Load the configuration from `path`, or the copy embedded in the package.
    """
    try:
        if path is None:
            data = resources.files("gopkgs").joinpath("config.yaml").read_bytes()
        else:
            data = Path(path).read_bytes()
    except OSError as e:
        raise ConfigError(f"Cannot read configuration: {e}") from e
    return parse_config(data)
