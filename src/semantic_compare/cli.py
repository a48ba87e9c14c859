# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import sys

import click

from . import __version__
from .compare import compare_versions, sort_versions
from .operators import Operator, VersionAssertionError, satisfies
from .semver import Version, parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def _describe(version: Version) -> list[str]:
    return [
        f"number: {version.number}",
        f"major: {version.major}",
        f"minor: {version.minor}",
        f"patch: {version.patch}",
        f"prerelease: {version.prerelease or None}",
        f"build: {version.build}",
    ]


def _parse_operand(operator: str, operand: str) -> object:
    """Split comma-separated operands into a list for range operators."""
    try:
        is_range = Operator.from_name(operator).is_range
    except VersionAssertionError:
        # Left for satisfies() to report
        return operand
    if is_range and "," in operand:
        return [part.strip() for part in operand.split(",")]
    return operand


@click.group()
@click.version_option(__version__)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Semantic version comparison tool.

    \b
    Examples:
        semver show 1.2.3-alpha.1+build.5
        semver compare 1.0.0 1
        semver check 1.5.0 -a within 1.0.0,2.0.0
        semver sort 1.0.0 1.0.0-rc.1 0.9
    """
    ctx.verbose = verbose


@cli.command()
@click.argument("version")
def show(version: str) -> None:
    """Print a version in canonical form with its components."""
    parsed = parse_version(version)
    echo_info(str(parsed))
    for line in _describe(parsed):
        echo_info(f"  {line}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2."""
    result = compare_versions(version1, version2)
    if ctx.verbose:
        symbol = {-1: "<", 0: "==", 1: ">"}[result]
        echo_info(f"{parse_version(version1)} {symbol} {parse_version(version2)}")
    echo_info(str(result))


@cli.command()
@click.argument("version")
@click.option(
    "-a",
    "--assert",
    "assertions",
    type=(str, str),
    multiple=True,
    metavar="OPERATOR OPERAND",
    help="Assertion to check, e.g. '-a gte 1.0.0' or '-a between 1.0,2.0'. Repeatable.",
)
@pass_context
def check(ctx: Context, version: str, assertions: tuple[tuple[str, str], ...]) -> None:
    """Check VERSION against operator assertions.

    Exits with status 0 when every assertion holds and 1 otherwise.
    Operators: eq, lt, lte, gt, gte (or equal_to, less_than, ...), between,
    within, any_of. Range operands are comma-separated.
    """
    if not assertions:
        echo_warning("No assertions given")

    parsed = parse_version(version)
    for operator, operand in assertions:
        value = _parse_operand(operator, operand)
        try:
            holds = satisfies(parsed, {operator: value})
        except VersionAssertionError as e:
            echo_error(str(e))
            sys.exit(1)

        if not holds:
            if ctx.verbose:
                echo_info(f"{parsed} does not satisfy {operator} {operand}")
            echo_error("Version does not satisfy all assertions")
            sys.exit(1)
        if ctx.verbose:
            echo_info(f"{parsed} satisfies {operator} {operand}")

    echo_success("All assertions hold")


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Sort highest first.")
def sort_command(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in ascending order."""
    for version in sort_versions(versions, reverse=reverse):
        echo_info(str(version))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
