"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

import click

from runtime_launcher.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    write_placeholder_settings,
)
from runtime_launcher.run_execution import (
    ApplicationContext,
    LaunchRequest,
    RunExecutionError,
    describe_invocation,
    execute_launch,
)
from runtime_launcher.target_backends import reachable_backends


class CliError(Exception):
    """Custom CLI error."""


def _launch_options(command: Callable[..., None]) -> Callable[..., None]:
    command = click.argument("guest_args", nargs=-1, type=click.UNPROCESSED)(command)
    command = click.option(
        "--test-file",
        "test_selections",
        multiple=True,
        metavar="FILE:START-END",
        help="Run the tests of FILE with indices in [START, END). Repeatable.",
    )(command)
    command = click.option(
        "--test-package",
        "test_package",
        required=False,
        help="Treat the artifact as a test executable for this package.",
    )(command)
    command = click.argument("artifact_path", type=click.Path(path_type=str))(command)
    command = click.argument("backend")(command)
    return command


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="runtime-launcher")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML launcher configuration file",
)
@click.option("--verbose", is_flag=True, default=False, help="Log runtime discovery details.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Run compiled artifacts on their target backend runtime."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config_path


def _application_context(ctx: click.Context) -> ApplicationContext:
    try:
        return ApplicationContext.from_config_path(ctx.obj)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML launcher configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a launcher configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_settings(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="locate")
@click.pass_context
def locate(ctx: click.Context) -> None:
    """Show where each toolchain runtime was found and which backends are enabled."""
    context = _application_context(ctx)
    overrides = context.settings.runtimes.as_mapping()
    for name, path in context.locator.report():
        line = f"{name}: {path if path is not None else 'not found'}"
        if name in overrides:
            line += f" (configured: {overrides[name]})"
        click.echo(line)
    backends = reachable_backends(moongres_enabled=context.settings.features.moongres)
    click.echo(f"backends: {', '.join(backend.value for backend in backends)}")


@cli.command(name="command")
@_launch_options
@click.pass_context
def show_command(
    ctx: click.Context,
    backend: str,
    artifact_path: str,
    test_package: str | None,
    test_selections: tuple[str, ...],
    guest_args: tuple[str, ...],
) -> None:
    """Print the command that would run ARTIFACT_PATH on BACKEND."""
    context = _application_context(ctx)
    request = LaunchRequest(
        backend=backend,
        artifact_path=artifact_path,
        test_package=test_package,
        test_selections=test_selections,
        guest_args=guest_args,
    )
    try:
        click.echo(describe_invocation(request, context))
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="run")
@_launch_options
@click.pass_context
def run_artifact(
    ctx: click.Context,
    backend: str,
    artifact_path: str,
    test_package: str | None,
    test_selections: tuple[str, ...],
    guest_args: tuple[str, ...],
) -> None:
    """Run ARTIFACT_PATH on BACKEND, passing GUEST_ARGS to the program."""
    context = _application_context(ctx)
    request = LaunchRequest(
        backend=backend,
        artifact_path=artifact_path,
        test_package=test_package,
        test_selections=test_selections,
        guest_args=guest_args,
    )
    try:
        outcome = execute_launch(request, context)
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    ctx.exit(outcome.exit_code)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
