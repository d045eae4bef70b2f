"""Writes bundled project trees and generated files to disk."""

from __future__ import annotations

import importlib.resources as ilr
from importlib.resources.abc import Traversable
from pathlib import Path

from merncmd.cli._types import FileKind, ProjectTemplate
from merncmd.cli.templates import render_file


class DestinationExistsError(FileExistsError):
    """The file or directory about to be generated is already there."""


_SKIPPED: frozenset[str] = frozenset({"__pycache__"})


def scaffold_root() -> Traversable:
    """Directory holding the bundled project trees."""
    return ilr.files("merncmd.cli").joinpath("scaffold")


def _copy_tree(source: Traversable, destination: Path, prefix: str = "") -> list[str]:
    created: list[str] = []
    for entry in sorted(source.iterdir(), key=lambda e: e.name):
        if entry.name in _SKIPPED:
            continue
        target = destination / entry.name
        if entry.is_dir():
            target.mkdir(exist_ok=True)
            created.extend(_copy_tree(entry, target, f"{prefix}{entry.name}/"))
        else:
            target.write_bytes(entry.read_bytes())
            created.append(f"{prefix}{entry.name}")
    return created


def template_source(template: ProjectTemplate) -> Traversable:
    """Bundled tree for *template*. Raises ``FileNotFoundError`` when it is not bundled."""
    source = scaffold_root().joinpath(template.value)
    if not source.is_dir():
        raise FileNotFoundError(f"Template directory '{template.value}' is missing")
    return source


def copy_project(
    destination: Path,
    template: ProjectTemplate,
    overwrite: bool = False,
) -> list[str]:
    """Copy a bundled project tree into *destination*. Returns the relative paths written.

    Raises ``FileNotFoundError`` without touching *destination* when the template is not
    bundled, and ``DestinationExistsError`` when *destination* exists and *overwrite* is
    false. Files copied before a failure are left in place.
    """
    source = template_source(template)

    if destination.exists() and not overwrite:
        raise DestinationExistsError(f"'{destination}' already exists")

    destination.mkdir(parents=True, exist_ok=True)
    return _copy_tree(source, destination)


def target_path(root: Path, kind: FileKind, name: str) -> Path:
    return root.joinpath(*kind.directory, f"{name}.{kind.extension}")


def write_file(root: Path, kind: FileKind, name: str, overwrite: bool = False) -> Path:
    """Render a *kind* file for *name* under *root*. Returns the written path.

    The target directory is created first; an existing file raises
    ``DestinationExistsError`` and is left untouched unless *overwrite* is true.
    """
    path = target_path(root, kind, name)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.exists() and not overwrite:
        raise DestinationExistsError(f"'{path}' already exists")

    path.write_text(render_file(kind, name), encoding="utf-8")
    return path
