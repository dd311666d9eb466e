"""CLI entry point: git hook dispatch (via symlink name) + install/dry-run commands."""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path

import click
from rich.console import Console

from .core.config import load_config
from .core.document import dump_document
from .core.errors import LhmError
from .core.log import setup_logging
from .core.utils import invoked_name
from .hooks import is_hook_name, run_engine
from .install import install as _install
from .resolve import resolve_config

console = Console(emoji=False)
logger = logging.getLogger("lhm")

HELP = """\
Merges global and per-repo lefthook configs.

When invoked as a git hook (via symlink), lhm finds the global config
(~/.lefthook.yaml) and repo config ($REPO/lefthook.yaml), merges them and
runs lefthook. If no repo config exists, a config is generated from the
repo's pre-commit, husky or hooks-directory setup instead.

\b
Supported config names: lefthook.<ext>, .lefthook.<ext>, .config/lefthook.<ext>
Supported extensions: yaml, yml, json, jsonc, toml
"""


def _current_binary() -> Path:
    """The installed lhm executable that hook symlinks should point at."""
    argv0 = sys.argv[0]
    found = shutil.which(argv0) if Path(argv0).name == "lhm" else None
    found = found or shutil.which("lhm")
    if found is None:
        raise LhmError("cannot find the lhm executable on PATH")
    return Path(found).resolve()


# ── Hook mode ───────────────────────────────────────────────────────


def run_hook(hook_name: str, args: list[str]) -> int:
    """Resolve the config for the current repo and hand it to the engine."""
    config = load_config()
    setup_logging(config.debug)
    logger.debug("invoked as hook: %s", hook_name)
    try:
        merged = resolve_config(config)
        return run_engine(config, hook_name, args, merged)
    except LhmError as e:
        logger.error("error: %s", e)
        return 1


# ── CLI ─────────────────────────────────────────────────────────────


@click.group(help=HELP)
@click.option("--debug", is_flag=True, help="Enable debug logging (also via LHM_DEBUG=1)")
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    config = load_config(debug=debug)
    setup_logging(config.debug)
    ctx.obj = config


@cli.command()
@click.option(
    "--default-config", is_flag=True, help="Write the default global config to ~/.lefthook.yaml"
)
@click.pass_obj
def install(config, default_config: bool):
    """Configure global core.hooksPath to use lhm."""
    try:
        _install(config, _current_binary(), default_config=default_config)
    except LhmError as e:
        logger.error("error: %s", e)
        sys.exit(1)


@cli.command("dry-run")
@click.pass_obj
def dry_run(config):
    """Print the merged config that would be used, then exit."""
    try:
        output = dump_document(resolve_config(config))
    except LhmError as e:
        logger.error("error: %s", e)
        sys.exit(1)
    console.print(output, markup=False, highlight=False, soft_wrap=True, end="")


def main():
    """True entry point: git runs us under the hook's name via symlink."""
    name = invoked_name(sys.argv[0])
    if is_hook_name(name):
        sys.exit(run_hook(name, sys.argv[1:]))
    cli()


if __name__ == "__main__":
    main()
