from __future__ import annotations

from pathlib import Path

import pytest

from gopkgs.config import Config, ConfigError, Package, load_config, parse_config


def test_parse_config_full_document() -> None:
    config = parse_config(
        b"""
host: example.com
defaultUser: acme
packages:
  - name: foo
  - name: bar
    repo: myrepo
"""
    )
    assert config == Config(
        host="example.com",
        default_user="acme",
        packages=(Package(name="foo", repo=""), Package(name="bar", repo="myrepo")),
    )


def test_parse_config_keeps_declaration_order() -> None:
    config = parse_config("packages: [{name: z}, {name: a}, {name: m}]")
    assert [p.name for p in config.packages] == ["z", "a", "m"]


def test_parse_config_empty_document() -> None:
    assert parse_config(b"") == Config()


def test_parse_config_malformed_yaml() -> None:
    with pytest.raises(ConfigError, match="Malformed"):
        parse_config(b"host: [unterminated")


@pytest.mark.parametrize(
    "doc",
    [
        "- just\n- a list\n",
        "packages: not-a-list\n",
        "packages: [plain-string]\n",
        "host: [a, b]\n",
        "defaultUser: 42\n",
        "packages: [{name: foo, repo: {nested: true}}]\n",
    ],
)
def test_parse_config_rejects_wrong_types(doc: str) -> None:
    with pytest.raises(ConfigError):
        parse_config(doc)


def test_config_is_immutable() -> None:
    config = parse_config("host: example.com\n")
    with pytest.raises(AttributeError):
        config.host = "other.com"  # type: ignore[misc]


def test_load_config_from_path(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("host: go.acme.dev\ndefaultUser: acme\npackages:\n  - name: tool\n", encoding="utf-8")
    config = load_config(path)
    assert config.host == "go.acme.dev"
    assert config.packages == (Package(name="tool"),)


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path / "nope.yaml")


def test_load_embedded_config() -> None:
    config = load_config()
    assert config.host
    assert config.default_user
    assert config.packages
