"""
Console entry point.

Usage:
    miraveja-boot version
    miraveja-boot alias @app/components --alias @app=/var/www/app
    miraveja-boot locate GoogleMap --alias @app=/var/www/app --import "@app/components/*"
"""

import logging
from typing import List

import typer

from miraveja_boot.application import Kernel
from miraveja_boot.domain import BootException
from miraveja_boot.infrastructure.bootstrap import bootstrap
from miraveja_boot.infrastructure.settings import BootSettings

app = typer.Typer(help="Bootstrap console: inspect aliases and class resolution.")

AliasOption = typer.Option([], "--alias", "-a", help="Register an alias first, as @name=path.")
ImportOption = typer.Option([], "--import", "-i", help="Import an alias or directory alias first.")


def _build_kernel(ctx: typer.Context, aliases: List[str]) -> Kernel:
    settings = BootSettings()
    if ctx.obj and ctx.obj.get("verbose"):
        settings = settings.model_copy(update={"debug": True})
    kernel = bootstrap(settings)
    for item in aliases:
        name, separator, path = item.partition("=")
        if not separator:
            raise typer.BadParameter(f"Expected @name=path, got {item!r}", param_hint="--alias")
        kernel.set_alias(name, path)
    return kernel


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print debug diagnostics."),
) -> None:
    """Bootstrap console: inspect aliases and class resolution."""
    ctx.obj = {"verbose": verbose}
    if verbose:
        logging.basicConfig(format="%(asctime)s [%(levelname)-8s] %(name)s - %(message)s", level=logging.DEBUG)


@app.command()
def version() -> None:
    """Print the package version."""
    typer.echo(Kernel.get_version())


@app.command("alias")
def resolve_alias(ctx: typer.Context, name: str, aliases: List[str] = AliasOption) -> None:
    """Print the path an alias stands for."""
    try:
        kernel = _build_kernel(ctx, aliases)
    except BootException as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    path = kernel.get_alias(name)
    if path is None:
        typer.echo(f"Invalid path alias: {name}", err=True)
        raise typer.Exit(code=1)
    typer.echo(path)


@app.command()
def locate(ctx: typer.Context, class_name: str, aliases: List[str] = AliasOption, imports: List[str] = ImportOption) -> None:
    """Print the file the autoloader would load for a class."""
    try:
        kernel = _build_kernel(ctx, aliases)
        for alias in imports:
            kernel.import_(alias)
    except BootException as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    class_file = kernel.resolver.locate(class_name)
    if class_file is None:
        typer.echo(f"Unable to find class: {class_name}", err=True)
        raise typer.Exit(code=1)
    typer.echo(class_file)


def run() -> None:
    app()
