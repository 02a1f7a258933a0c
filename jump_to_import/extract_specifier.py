"""Extract the module specifier bound to an identifier from source text.

Scanning is done with regular expressions rather than a JavaScript parser. A
small binding tokenizer understands the usual import/require shapes (default,
namespace, named, renamed and destructured bindings); anything more exotic is
simply not found.
"""

from __future__ import annotations

import dataclasses
import re

from jump_to_import.dasherize import component_path_name, dasherize
from jump_to_import.specifier import (
    ImportSpecifier,
    RequireSpecifier,
    ServiceSpecifier,
    Specifier,
    TemplateSpecifier,
)

IMPORT_RE = re.compile(
    r"""(?:^|;)\s*import\s+([^;'"]*?)\s*\bfrom\s*['"]([^'"]+)['"]""",
    re.MULTILINE,
)
REQUIRE_RE = re.compile(
    r"""(?:\b(?:const|let|var)\s+)?([\w$]+|\{[^}]*\})\s*=\s*"""
    r"""require\(\s*['"]([^'"]+)['"]\s*\)""",
)
# String literals are matched first so `//` inside a path is never a comment
COMMENT_RE = re.compile(
    r"""('(?:\\.|[^'\\\n])*'|"(?:\\.|[^"\\\n])*"|`(?:\\.|[^`\\])*`)"""
    r"""|//[^\n]*|/\*.*?\*/""",
    re.DOTALL,
)
NAMED_BINDINGS_RE = re.compile(r"\{(.*?)\}", re.DOTALL)
NAMED_BINDING_RE = re.compile(r"(?:type\s+)?([\w$]+)(?:\s+as\s+([\w$]+))?")
DESTRUCTURED_BINDING_RE = re.compile(r"([\w$]+)(?:\s*:\s*([\w$]+))?(?:\s*=.*)?")
NAMESPACE_BINDING_RE = re.compile(r"\*\s*as\s+([\w$]+)")
IDENTIFIER_RE = re.compile(r"[\w$]+")
TEMPLATE_NAME_RE = re.compile(r"[\w$][\w$:/-]*")

SKIPPED_RECEIVERS = {"this"}


def is_import_path(cursor_string: str | None) -> bool:
    """Check if the cursor string is a quoted path literal."""
    return bool(cursor_string) and cursor_string[0] in ("'", '"')


def strip_comments(document_text: str) -> str:
    """Blank out `//` and `/* */` comments, keeping line structure."""

    def blank(m: re.Match[str]) -> str:
        if m.group(1):
            return m.group(1)
        return re.sub(r"[^\n]", " ", m.group(0))

    return COMMENT_RE.sub(blank, document_text)


def import_bindings(clause: str) -> list[str]:
    """Return the local names bound by an import clause."""
    names: list[str] = []

    named = NAMED_BINDINGS_RE.search(clause)
    if named:
        for part in named.group(1).split(","):
            m = NAMED_BINDING_RE.fullmatch(part.strip())
            if m:
                names.append(m.group(2) or m.group(1))
        clause = clause[: named.start()] + clause[named.end() :]

    namespace = NAMESPACE_BINDING_RE.search(clause)
    if namespace:
        names.append(namespace.group(1))
        clause = clause[: namespace.start()] + clause[namespace.end() :]

    for token in clause.split(","):
        token = token.strip()
        if token.startswith("type "):
            token = token[len("type ") :].strip()
        if IDENTIFIER_RE.fullmatch(token):
            names.append(token)
    return names


def require_bindings(declaration: str) -> list[str]:
    """Return the local names bound by the left-hand side of a require call."""
    declaration = declaration.strip()
    if not declaration.startswith("{"):
        return [declaration]
    names = []
    for part in declaration.strip("{}").split(","):
        m = DESTRUCTURED_BINDING_RE.fullmatch(part.strip())
        if m:
            names.append(m.group(2) or m.group(1))
    return names


def extract_es_import_path(identifier: str, document_text: str) -> str | None:
    """Find the path of the `import` statement binding `identifier`."""
    for m in IMPORT_RE.finditer(document_text):
        if identifier in import_bindings(m.group(1)):
            return m.group(2)
    return None


def extract_require_path(identifier: str, document_text: str) -> str | None:
    """Find the path of the `require` call whose declaration binds `identifier`."""
    for m in REQUIRE_RE.finditer(document_text):
        if identifier in require_bindings(m.group(1)):
            return m.group(2)
    return None


def service_path(service_name: str, *, use_ember_pods: bool) -> str:
    """Map a service name to its conventional path (no extension)."""
    name = dasherize(service_name)
    if use_ember_pods:
        return f"app/services/{name}"
    return f"app/{name}/service"


def component_path(component_name: str, *, use_ember_pods: bool) -> str:
    """Map a template component name to its conventional path (no extension)."""
    name = component_path_name(component_name)
    if use_ember_pods:
        return f"app/components/{name}/component"
    return f"app/components/{name}"


def _service_injection_patterns(identifier: str) -> list[re.Pattern[str]]:
    ident = re.escape(identifier)
    return [
        # session: service(), session: Ember.inject.service('user-session')
        re.compile(
            rf"""(?<![\w$]){ident}\s*:\s*(?:Ember\.)?(?:inject\.)?"""
            rf"""(?:service|inject)\s*\(\s*(?:['"]([^'"]+)['"])?"""
        ),
        # @service session;  @service('user-session') declare session;
        re.compile(
            rf"""@(?:service|inject)\s*(?:\(\s*(?:['"]([^'"]+)['"])?\s*\))?\s+"""
            rf"""(?:(?:declare|readonly)\s+)*{ident}(?![\w$])"""
        ),
    ]


def extract_service_name(identifier: str, document_text: str) -> str | None:
    """Find an Ember service injection for `identifier`, line by line.

    Returns the explicit service name when one is passed to the injection
    call, otherwise the identifier itself.
    """
    patterns = _service_injection_patterns(identifier)
    for line in document_text.splitlines():
        if identifier not in line:
            continue
        for pattern in patterns:
            m = pattern.search(line)
            if m:
                return m.group(1) or identifier
    return None


def extract_template_component(identifier: str, document_text: str) -> bool:
    """Check if `identifier` is invoked as a component in template text."""
    if not TEMPLATE_NAME_RE.fullmatch(identifier):
        return False
    ident = re.escape(identifier)
    curly = re.compile(rf"\{{\{{[#]?{ident}(?=[\s}}])")
    angle = re.compile(rf"<{ident}(?=[\s/>])")
    return bool(curly.search(document_text) or angle.search(document_text))


def extract(
    document_text: str, identifier: str | None, *, use_ember_pods: bool = False
) -> Specifier | None:
    """Find the specifier bound to `identifier`.

    Tries, in order: ES import, CommonJS require, Ember service injection and
    template component invocation. Returns None when nothing matches.
    """
    if not identifier or identifier in SKIPPED_RECEIVERS:
        return None

    code = strip_comments(document_text)
    path = extract_es_import_path(identifier, code)
    if path:
        return ImportSpecifier(text=path)

    path = extract_require_path(identifier, code)
    if path:
        return RequireSpecifier(text=path)

    service_name = extract_service_name(identifier, document_text)
    if service_name:
        return ServiceSpecifier(
            text=service_path(service_name, use_ember_pods=use_ember_pods),
            service_name=service_name,
        )

    if extract_template_component(identifier, document_text):
        return TemplateSpecifier(
            text=component_path(identifier, use_ember_pods=use_ember_pods),
            component_name=identifier,
        )

    return None


def extract_for_cursor(
    document_text: str,
    cursor_string: str | None,
    receiver: str | None = None,
    *,
    use_ember_pods: bool = False,
) -> Specifier | None:
    """Turn the text under the cursor into a specifier.

    A quoted string is the specifier itself. A member access (`receiver.word`)
    is looked up first by the member name, then by the receiver; the member is
    kept as `bound_member` so the caller can jump to it.
    """
    if not cursor_string:
        return None
    if is_import_path(cursor_string):
        return ImportSpecifier(text=cursor_string[1:-1])

    word = cursor_string.replace(",", "").strip()
    if receiver is None:
        return extract(document_text, word, use_ember_pods=use_ember_pods)
    if receiver in SKIPPED_RECEIVERS:
        return None

    specifier = extract(
        document_text, word, use_ember_pods=use_ember_pods
    ) or extract(document_text, receiver, use_ember_pods=use_ember_pods)
    if specifier is None:
        return None
    return dataclasses.replace(specifier, bound_member=word)
