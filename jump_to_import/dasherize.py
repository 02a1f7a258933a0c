"""Helpers for turning identifiers into Ember's conventional file names."""

import re

DECAMELIZE_RE = re.compile(r"([a-z\d])([A-Z])")
SEPARATOR_RE = re.compile(r"[ _]")


def dasherize(name: str) -> str:
    """Convert `fooBar`, `foo_bar` or `FooBar` into `foo-bar`."""
    decamelized = DECAMELIZE_RE.sub(r"\1_\2", name).lower()
    return SEPARATOR_RE.sub("-", decamelized)


def component_path_name(name: str) -> str:
    """Convert a template invocation name into a component path name.

    Angle-bracket names nest with `::` (`Foo::BarBaz` -> `foo/bar-baz`), curly
    names already use slashes (`foo/bar-baz`).
    """
    return "/".join(dasherize(part) for part in name.split("::"))
