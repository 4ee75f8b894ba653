import json
import logging
from pathlib import Path

import click

from bundle_info import __version__
from bundle_info.error_boundary import cli_error_boundary
from bundle_info.io import dumps_bundle_info, load_bundle_info
from bundle_info.kit_version import parse_kit_version

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

_PATH_ARGUMENT = click.Path(dir_okay=False, path_type=Path)


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Inspect and validate kit bundle information."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("check")
@click.argument("path", type=_PATH_ARGUMENT)
@cli_error_boundary
def check(path: Path) -> None:
    """Validate a bundle information file."""
    info = load_bundle_info(path)
    click.echo(f"OK: {path} ({info.kit.name} {info.kit.version})")


@cli.command("show")
@click.argument("path", type=_PATH_ARGUMENT)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@cli_error_boundary
def show(path: Path, as_json: bool) -> None:
    """Print a bundle information file in canonical form."""
    info = load_bundle_info(path)
    if as_json:
        click.echo(info.model_dump_json(indent=2))
    else:
        click.echo(dumps_bundle_info(info), nl=False)


@cli.command("parse-version")
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@cli_error_boundary
def parse_version(version: str, as_json: bool) -> None:
    """Print the components of a kit version string."""
    kit_version = parse_kit_version(version)
    build_info = kit_version.build_info
    fields = {
        "epoch": kit_version.epoch,
        "major": kit_version.major,
        "minor": kit_version.minor,
        "patch": kit_version.patch,
        "dev": kit_version.dev,
        "commit": build_info.commit if build_info is not None else None,
        "branch": build_info.branch if build_info is not None else None,
    }

    if as_json:
        click.echo(json.dumps(fields, indent=2))
        return

    for name, value in fields.items():
        if value is None:
            continue
        click.echo(f"{name}: {str(value).lower() if isinstance(value, bool) else value}")


if __name__ == "__main__":
    cli()
