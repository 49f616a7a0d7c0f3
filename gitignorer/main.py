"""
gitignorer — CLI entrypoint.

Usage:
    gitignorer                     # scan cwd, write ./.gitignore
    gitignorer detect --json
    gitignorer generate --dry-run
    python -m gitignorer --help
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from gitignorer import __version__
from gitignorer.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


def _resolve_project_root(ctx: click.Context) -> Path:
    """Resolve project root from context or CWD."""
    root: Path | None = ctx.obj.get("root")
    return (root or Path.cwd()).resolve()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gitignorer")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--root",
    "root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory to scan (default: current directory).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    root: Path | None,
) -> None:
    """gitignorer — detect project ecosystems and write a .gitignore.

    Run without a subcommand to scan the project and write .gitignore.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["root"] = root

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(generate)


# ── Detect ──────────────────────────────────────────────────────


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def detect(ctx: click.Context, as_json: bool) -> None:
    """Show detected ecosystems and the marker files behind them."""
    from gitignorer.core.services.generators.gitignore import selected_blocks
    from gitignorer.core.use_cases.generate import scan_project

    project_root = _resolve_project_root(ctx)
    detection, error = scan_project(project_root)

    if as_json:
        if error:
            click.echo(json.dumps({"error": error}, indent=2))
            sys.exit(1)
        assert detection is not None
        data = detection.to_dict()
        data["blocks"] = selected_blocks(detection.tags)
        click.echo(json.dumps(data, indent=2))
        return

    if error:
        click.secho(f"❌ {error}", fg="red")
        sys.exit(1)
    assert detection is not None

    click.secho(f"\n🔍 Detection: {project_root}", fg="cyan", bold=True)

    if not detection.markers:
        click.secho("   No ecosystem markers found", fg="yellow")
    for tag in sorted(detection.markers):
        paths = detection.markers[tag]
        click.secho(f"   ✓ {tag} ", fg="green", nl=False)
        click.echo(f"({len(paths)} marker{'s' if len(paths) != 1 else ''})")
        if ctx.obj.get("verbose"):
            for rel in sorted(paths):
                click.echo(f"     │ {rel}")

    click.echo()
    click.echo(f"   Blocks: {', '.join(selected_blocks(detection.tags))}")

    if detection.skipped:
        click.echo()
        click.secho(f"   ⚠️  Skipped {len(detection.skipped)} unreadable path(s)", fg="yellow")

    click.echo()


# ── Generate ────────────────────────────────────────────────────


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--dry-run", is_flag=True, help="Print the generated file instead of writing it.")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Target file (default: <root>/.gitignore).",
)
@click.pass_context
def generate(
    ctx: click.Context,
    as_json: bool = False,
    dry_run: bool = False,
    output: Path | None = None,
) -> None:
    """Scan the project and write a .gitignore (old file kept as .bak)."""
    from gitignorer.core.use_cases.generate import run_generate

    result = run_generate(
        project_root=_resolve_project_root(ctx),
        output=output,
        dry_run=dry_run,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    if dry_run and result.file is not None:
        click.echo(result.file.content, nl=False)
        return

    if result.publish and result.publish.backed_up:
        click.secho(
            f"⚠️  Existing {result.publish.path.name} backed up to "
            f"{result.publish.backup_path.name}",  # type: ignore[union-attr]
            fg="yellow",
        )

    if not result.ok:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    assert result.publish is not None
    click.secho(f"✅ Generated {result.publish.path.name}", fg="green")

    if ctx.obj.get("verbose") and result.detection is not None:
        tags = ", ".join(sorted(result.detection.tags)) or "none"
        click.echo(f"   Detected: {tags}")


if __name__ == "__main__":
    cli()
