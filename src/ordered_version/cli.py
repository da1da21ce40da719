# SPDX-License-Identifier: MIT
"""CLI entry point for the ordered-version command."""

from __future__ import annotations

import sys
from functools import cmp_to_key
from typing import Callable

import click

from .errors import VersionError
from .java import parse_java_version
from .log import configure_logging
from .ranges import parse_range
from .semver import Version, parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.java: bool = False

    @property
    def parser(self) -> Callable[[str], Version]:
        """Return the version parser selected by --java."""
        return parse_java_version if self.java else parse_version


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def _parse_all(ctx: Context, values: tuple[str, ...]) -> list[Version]:
    try:
        return [ctx.parser(value) for value in values]
    except VersionError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(package_name="ordered-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log parser decisions to stderr.",
)
@click.option(
    "--java",
    is_flag=True,
    help="Parse arguments as Java versions (1.8.0_45).",
)
@pass_context
def cli(ctx: Context, verbose: bool, java: bool) -> None:
    """Compare, sort and filter version numbers.

    \b
    Examples:
        ordered-version compare 1.0-alpha 1.0-beta
        ordered-version inspect 0.9.1-rc.2+build.5
        ordered-version sort 1.0 1.0-rc 0.9
        ordered-version match "[1.0,2.0)" 0.9 1.0 1.5 2.0
    """
    ctx.verbose = verbose
    ctx.java = java
    if verbose:
        configure_logging("DEBUG")


@cli.command()
@click.argument("first")
@click.argument("second")
@pass_context
def compare(ctx: Context, first: str, second: str) -> None:
    """Print -1, 0 or 1 as FIRST is older than, equal to or newer than SECOND."""
    v1, v2 = _parse_all(ctx, (first, second))
    echo_info(str(v1.compare(v2)))


@cli.command()
@click.argument("version")
@pass_context
def inspect(ctx: Context, version: str) -> None:
    """Show the components of VERSION."""
    (v,) = _parse_all(ctx, (version,))
    category = v.pre_release_category

    echo_info(f"canonical:      {v}")
    echo_info(f"major:          {v.major}")
    echo_info(f"minor:          {v.minor}")
    echo_info(f"patch:          {v.patch}")
    if ctx.java:
        echo_info(f"update:         {getattr(v, 'update_number', 0)}")
    echo_info(f"pre-release:    {v.pre_release or '-'}")
    echo_info(f"build metadata: {v.build_metadata or '-'}")
    echo_info(f"category:       {category.name.lower() if category else '-'}")
    echo_info(f"revision:       {v.pre_release_revision}")
    echo_info(f"stable:         {'yes' if v.is_stable else 'no'}")


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Print newest first.")
@pass_context
def sort_versions(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS from oldest to newest."""
    parsed = _parse_all(ctx, versions)
    order = cmp_to_key(lambda a, b: a.compare(b))
    for raw, _ in sorted(zip(versions, parsed), key=lambda pair: order(pair[1]), reverse=reverse):
        echo_info(raw)


@cli.command()
@click.argument("notation")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def match(ctx: Context, notation: str, versions: tuple[str, ...]) -> None:
    """Print the VERSIONS that fall within the range NOTATION.

    Exits with status 1 when no version matches.
    """
    try:
        version_range = parse_range(notation, ctx.parser)
    except VersionError as e:
        raise click.ClickException(str(e)) from e

    matched = [
        raw for raw, v in zip(versions, _parse_all(ctx, versions)) if version_range.matches(v)
    ]
    for raw in matched:
        echo_info(raw)
    if not matched:
        echo_error(f"No version matches {version_range}")
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
