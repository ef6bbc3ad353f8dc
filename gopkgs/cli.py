"""
cli.py

Responsibility: CLI entrypoint for the vanity page generator.

High-level flow:
1) Load the YAML configuration -> `Config` (a failure here aborts the run)
2) For every package: normalize repo URL -> write `.gitignore` / `index.html`
3) Report every package failure and exit non-zero if there was any

This module should orchestrate behavior but keep concerns isolated:
- Configuration: `config.py`
- Pipeline: `generator.py`
- Logging setup: `logging.py`
"""

from __future__ import annotations

import argparse

import structlog

from gopkgs.config import ConfigError, load_config
from gopkgs.generator import DEFAULT_OUTPUT_ROOT, GenerateError, generate
from gopkgs.logging import configure_logging

log = structlog.get_logger(__name__)

_TRUE = {"1", "t", "true", "y", "yes", "on"}
_FALSE = {"0", "f", "false", "n", "no", "off"}


def _parse_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def generate_cmd(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config)
    except ConfigError as e:
        log.error("cannot load configuration", path=args.config or "<embedded>", error=str(e))
        return 1

    result = generate(
        config,
        output_root=args.output,
        gitignore=bool(args.gitignore),
        template_path=args.template,
    )
    try:
        result.raise_for_errors()
    except GenerateError as e:
        log.error("generation failed", failed=len(e.errors), total=len(config.packages), errors=str(e))
        return 1

    log.info("generation complete", pages=len(result.pages), output=str(args.output))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="generate-go-pkgs",
        description="Generate static go-import vanity pages for configured Go packages",
    )
    p.add_argument(
        "--gitignore",
        nargs="?",
        const=True,
        default=True,
        type=_parse_bool,
        help="Generate .gitignore files for each pkg (default: true; accepts --gitignore=false)",
    )
    p.add_argument("--no-gitignore", dest="gitignore", action="store_false", help="Do not generate .gitignore files")
    p.add_argument("--config", default=None, help="Configuration YAML (default: the embedded config.yaml)")
    p.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_ROOT,
        help=f"Output root directory (default: {DEFAULT_OUTPUT_ROOT})",
    )
    p.add_argument("--template", default=None, help="Page template file (default: the embedded template)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-json", action="store_true", help="Emit JSON log lines")

    p.set_defaults(func=generate_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=bool(args.verbose), log_json=bool(args.log_json))
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
