"""Typer CLI application for mern-cmd."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import merncmd
from merncmd.cli._prompts import prompt_overwrite
from merncmd.cli._renderer import (
    DestinationExistsError,
    copy_project,
    target_path,
    template_source,
    write_file,
)
from merncmd.cli._types import FileKind, ProjectTemplate

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
_err_console = Console(stderr=True)

ForceOption = Annotated[
    bool, Option("--force", "-f", help="Overwrite the destination if it already exists.")
]
YesOption = Annotated[
    bool,
    Option("--yes", "-y", help="Do not ask before overwriting. Only valid together with --force."),
]


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"mern-cmd v{merncmd.__version__}")
        raise Exit()


def _print_generators() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available generators")
    _console.print("[dim]│[/]")
    for t in ProjectTemplate:
        _console.print(f"[dim]│[/]  [bold cyan]{t.value:<22}[/] [dim]{t.description}[/]")
    for k in FileKind:
        _console.print(f"[dim]│[/]  [bold cyan]{k.value:<22}[/] [dim]{k.description}[/]")
    _console.print()


def _list_callback(value: bool) -> None:
    if value:
        _print_generators()
        raise Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        Option(
            "--version",
            "-V",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
    list_generators: Annotated[
        bool,
        Option(
            "--list",
            "-l",
            help="List all available generators and exit.",
            callback=_list_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """mern-cmd: a CLI to generate boilerplate code for MERN projects."""


def _check_overwrite_flags(force: bool, yes: bool) -> None:
    if yes and not force:
        _err_console.print(
            "[bold red]Error:[/] [bold]--yes[/] can only be used with [bold]--force[/]."
        )
        raise Exit(code=2)


def _may_overwrite(force: bool, yes: bool, shown: str) -> bool:
    return force and (yes or prompt_overwrite(shown))


def _create_project(template: ProjectTemplate, project_name: str, force: bool, yes: bool) -> None:
    _check_overwrite_flags(force, yes)
    name = escape(project_name)
    destination = Path.cwd() / project_name

    _console.print(f"[bold cyan]●[/]  Creating {template.label} project: {name}")

    try:
        template_source(template)
        overwrite = destination.exists() and _may_overwrite(force, yes, project_name)
        created = copy_project(destination, template, overwrite=overwrite)
    except DestinationExistsError:
        _console.print(f"[bold red]■[/]  Directory {name} already exists.")
        return
    except OSError as err:
        _err_console.print(f"[bold red]■[/]  Error copying template files: {escape(str(err))}")
        return

    for rel in created:
        _console.print(f"[dim]│[/]  {name}/{escape(rel)}")
    _console.print(f"[bold green]◇[/]  {template.label} project created successfully!")


def _create_file(kind: FileKind, entity_name: str, force: bool, yes: bool) -> None:
    _check_overwrite_flags(force, yes)
    name = escape(entity_name)
    root = Path.cwd()
    shown = target_path(Path(), kind, entity_name).as_posix()

    _console.print(f"[bold cyan]●[/]  Creating {kind.label}: {name}")

    overwrite = target_path(root, kind, entity_name).exists() and _may_overwrite(
        force, yes, shown
    )
    try:
        write_file(root, kind, entity_name, overwrite=overwrite)
    except DestinationExistsError:
        _console.print(f"[bold red]■[/]  {kind.noun} {name} already exists.")
        return
    except OSError as err:
        _err_console.print(
            f"[bold red]■[/]  Error creating {kind.noun.lower()}: {escape(str(err))}"
        )
        return

    _console.print(f"[dim]│[/]  {escape(shown)}")
    _console.print(f"[bold green]◇[/]  {kind.noun} {name} created successfully!")


@app.command("express")
def express(
    project_name: Annotated[str, Argument(help="Name for the new project directory")],
    force: ForceOption = False,
    yes: YesOption = False,
) -> None:
    """Generate a basic Express boilerplate."""
    _create_project(ProjectTemplate.EXPRESS, project_name, force, yes)


@app.command("react")
def react(
    project_name: Annotated[str, Argument(help="Name for the new project directory")],
    force: ForceOption = False,
    yes: YesOption = False,
) -> None:
    """Generate a basic React boilerplate."""
    _create_project(ProjectTemplate.REACT, project_name, force, yes)


@app.command("react-component")
def react_component(
    component_name: Annotated[str, Argument(help="Component name")],
    force: ForceOption = False,
    yes: YesOption = False,
) -> None:
    """Add a new React component in src/components."""
    _create_file(FileKind.REACT_COMPONENT, component_name, force, yes)


@app.command("express-model")
def express_model(
    model_name: Annotated[str, Argument(help="Model name")],
    force: ForceOption = False,
    yes: YesOption = False,
) -> None:
    """Generate a MongoDB model."""
    _create_file(FileKind.EXPRESS_MODEL, model_name, force, yes)


@app.command("express-controller")
def express_controller(
    controller_name: Annotated[str, Argument(help="Controller name")],
    force: ForceOption = False,
    yes: YesOption = False,
) -> None:
    """Generate a MongoDB controller."""
    _create_file(FileKind.EXPRESS_CONTROLLER, controller_name, force, yes)


@app.command("express-route")
def express_route(
    route_name: Annotated[str, Argument(help="Route name")],
    force: ForceOption = False,
    yes: YesOption = False,
) -> None:
    """Generate a route file for a MongoDB model."""
    _create_file(FileKind.EXPRESS_ROUTE, route_name, force, yes)


@app.command("express-middleware")
def express_middleware(
    file_name: Annotated[str, Argument(help="Middleware file name")],
    force: ForceOption = False,
    yes: YesOption = False,
) -> None:
    """Generate a middleware file for Express."""
    _create_file(FileKind.EXPRESS_MIDDLEWARE, file_name, force, yes)
