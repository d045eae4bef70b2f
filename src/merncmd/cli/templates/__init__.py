"""Source templates for generated files."""

from __future__ import annotations

from typing import Protocol

from merncmd.cli._types import FileKind
from merncmd.cli.templates._express import controller_js, middleware_js, model_js, route_js
from merncmd.cli.templates._react import component_jsx


class FileTemplate(Protocol):
    """Protocol for file templates. Each takes the entity name and returns the file content."""

    def __call__(self, name: str) -> str: ...


_TEMPLATES: dict[FileKind, FileTemplate] = {
    FileKind.REACT_COMPONENT: component_jsx,
    FileKind.EXPRESS_MODEL: model_js,
    FileKind.EXPRESS_CONTROLLER: controller_js,
    FileKind.EXPRESS_ROUTE: route_js,
    FileKind.EXPRESS_MIDDLEWARE: middleware_js,
}


def render_file(kind: FileKind, name: str) -> str:
    """Return the content of a *kind* file for entity *name*."""
    return _TEMPLATES[kind](name)
