"""Enums for CLI generators."""

from enum import Enum


class ProjectTemplate(str, Enum):
    """Bundled project trees copied by the project commands."""

    EXPRESS = "express"
    REACT = "react"

    @property
    def label(self) -> str:
        labels: dict[ProjectTemplate, str] = {
            ProjectTemplate.EXPRESS: "Express",
            ProjectTemplate.REACT: "React",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[ProjectTemplate, str] = {
            ProjectTemplate.EXPRESS: "Generate a basic Express boilerplate",
            ProjectTemplate.REACT: "Generate a basic React boilerplate",
        }
        return descriptions[self]


class FileKind(str, Enum):
    """Single-file generators that write into the current project."""

    REACT_COMPONENT = "react-component"
    EXPRESS_MODEL = "express-model"
    EXPRESS_CONTROLLER = "express-controller"
    EXPRESS_ROUTE = "express-route"
    EXPRESS_MIDDLEWARE = "express-middleware"

    @property
    def label(self) -> str:
        labels: dict[FileKind, str] = {
            FileKind.REACT_COMPONENT: "React component",
            FileKind.EXPRESS_MODEL: "MongoDB model",
            FileKind.EXPRESS_CONTROLLER: "MongoDB controller",
            FileKind.EXPRESS_ROUTE: "route for",
            FileKind.EXPRESS_MIDDLEWARE: "middleware file",
        }
        return labels[self]

    @property
    def noun(self) -> str:
        nouns: dict[FileKind, str] = {
            FileKind.REACT_COMPONENT: "Component",
            FileKind.EXPRESS_MODEL: "Model",
            FileKind.EXPRESS_CONTROLLER: "Controller",
            FileKind.EXPRESS_ROUTE: "Route",
            FileKind.EXPRESS_MIDDLEWARE: "Middleware",
        }
        return nouns[self]

    @property
    def description(self) -> str:
        descriptions: dict[FileKind, str] = {
            FileKind.REACT_COMPONENT: "Add a new React component in src/components",
            FileKind.EXPRESS_MODEL: "Generate a MongoDB model",
            FileKind.EXPRESS_CONTROLLER: "Generate a MongoDB controller",
            FileKind.EXPRESS_ROUTE: "Generate a route file for a MongoDB model",
            FileKind.EXPRESS_MIDDLEWARE: "Generate a middleware file for Express",
        }
        return descriptions[self]

    @property
    def directory(self) -> tuple[str, ...]:
        """Target directory, relative to the project root."""
        directories: dict[FileKind, tuple[str, ...]] = {
            FileKind.REACT_COMPONENT: ("src", "components"),
            FileKind.EXPRESS_MODEL: ("models",),
            FileKind.EXPRESS_CONTROLLER: ("controllers",),
            FileKind.EXPRESS_ROUTE: ("routes",),
            FileKind.EXPRESS_MIDDLEWARE: ("middlewares",),
        }
        return directories[self]

    @property
    def extension(self) -> str:
        return "jsx" if self == FileKind.REACT_COMPONENT else "js"
