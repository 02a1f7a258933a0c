"""Data models for module specifiers extracted from source text."""

from dataclasses import dataclass
from typing import ClassVar, Literal

SpecifierKind = Literal["import", "require", "service", "template"]


@dataclass(frozen=True)
class ImportSpecifier:
    """Path bound by an ES module `import ... from '<text>'` statement."""

    kind: ClassVar[SpecifierKind] = "import"

    text: str
    bound_member: str | None = None


@dataclass(frozen=True)
class RequireSpecifier:
    """Path bound by a CommonJS `... = require('<text>')` declaration."""

    kind: ClassVar[SpecifierKind] = "require"

    text: str
    bound_member: str | None = None


@dataclass(frozen=True)
class ServiceSpecifier:
    """Conventional file path of an injected Ember service."""

    kind: ClassVar[SpecifierKind] = "service"

    text: str
    service_name: str
    bound_member: str | None = None


@dataclass(frozen=True)
class TemplateSpecifier:
    """Conventional file path of a component invoked from a template."""

    kind: ClassVar[SpecifierKind] = "template"

    text: str
    component_name: str
    bound_member: str | None = None


Specifier = ImportSpecifier | RequireSpecifier | ServiceSpecifier | TemplateSpecifier
