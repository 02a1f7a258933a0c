"""Tests for extracting specifiers from source text."""

import pytest

from jump_to_import.dasherize import component_path_name, dasherize
from jump_to_import.extract_specifier import (
    extract,
    extract_for_cursor,
    import_bindings,
    require_bindings,
)
from jump_to_import.specifier import (
    ImportSpecifier,
    RequireSpecifier,
    ServiceSpecifier,
    TemplateSpecifier,
)

ES_SOURCE = """
import Ember from 'ember';
import Foo from "app/models/foo";
import { computed,
         observer as watch } from '@ember/object';
import * as utils from './utils';
import Default, { named } from 'pkg/thing';
import './side-effect';
import foobar from 'app/foobar';
"""

CJS_SOURCE = """
const path = require('path');
const { debounce, throttle: limit } = require("lodash/function");
var a = require('a'), b = require('b');
"""

EMBER_SOURCE = """
export default Component.extend({
  session: service(),
  currentUser: Ember.inject.service('user-session'),
  flashMessages: inject(),
});
"""


def test_import_bindings_forms() -> None:
    """Verify local names for default, named, renamed and namespace imports."""
    assert import_bindings("Foo") == ["Foo"]
    assert import_bindings("{ a, b as c }") == ["a", "c"]
    assert import_bindings("* as ns") == ["ns"]
    assert sorted(import_bindings("Def, { x }")) == ["Def", "x"]


def test_require_bindings_forms() -> None:
    """Verify local names for plain and destructured requires."""
    assert require_bindings("path") == ["path"]
    assert require_bindings("{ a, b: c, d = 1 }") == ["a", "c", "d"]


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("Ember", "ember"),
        ("Foo", "app/models/foo"),
        ("computed", "@ember/object"),
        ("watch", "@ember/object"),
        ("utils", "./utils"),
        ("Default", "pkg/thing"),
        ("named", "pkg/thing"),
    ],
)
def test_es_import_extraction(identifier: str, expected: str) -> None:
    """Verify ES imports are found, including multi-line statements."""
    assert extract(ES_SOURCE, identifier) == ImportSpecifier(text=expected)


def test_es_import_word_boundary() -> None:
    """Verify `foo` does not match the `foobar` binding."""
    assert extract(ES_SOURCE, "foo") is None
    assert extract(ES_SOURCE, "foobar") == ImportSpecifier(text="app/foobar")


def test_renamed_import_matches_local_name_only() -> None:
    """Verify `observer as watch` binds `watch`, not `observer`."""
    assert extract(ES_SOURCE, "observer") is None


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("path", "path"),
        ("debounce", "lodash/function"),
        ("limit", "lodash/function"),
        ("a", "a"),
        ("b", "b"),
    ],
)
def test_require_extraction(identifier: str, expected: str) -> None:
    """Verify CommonJS requires are found."""
    assert extract(CJS_SOURCE, identifier) == RequireSpecifier(text=expected)


def test_import_word_in_comment_does_not_swallow_statement() -> None:
    """Verify prose mentioning `import` before a real statement is ignored."""
    assert extract("// import helpers first\nimport Foo from './foo';\n", "Foo") == (
        ImportSpecifier(text="./foo")
    )
    text = "/* we import\n   everything below */\nimport { a } from 'lib/a';\n"
    assert extract(text, "a") == ImportSpecifier(text="lib/a")


def test_commented_out_bindings_are_skipped() -> None:
    """Verify imports and requires inside comments are not matches."""
    text = (
        "// import Old from 'legacy/old';\n"
        "/* const gone = require('gone'); */\n"
        "import Cdn from 'https://cdn.example.com/cdn.js';\n"
    )
    assert extract(text, "Old") is None
    assert extract(text, "gone") is None
    assert extract(text, "Cdn") == ImportSpecifier(
        text="https://cdn.example.com/cdn.js"
    )


def test_import_after_statement_on_same_line() -> None:
    """Verify several statements on one line are all scanned."""
    text = "import a from 'a';import b from 'b/b';\n"
    assert extract(text, "b") == ImportSpecifier(text="b/b")


def test_import_preferred_over_require() -> None:
    """Verify the ES form wins when both bind the identifier."""
    text = "const x = require('cjs/x');\nimport x from 'esm/x';\n"
    assert extract(text, "x") == ImportSpecifier(text="esm/x")


def test_service_injection_flat_layout() -> None:
    """Verify service injections map to app/<name>/service by default."""
    assert extract(EMBER_SOURCE, "session") == ServiceSpecifier(
        text="app/session/service", service_name="session"
    )
    assert extract(EMBER_SOURCE, "flashMessages") == ServiceSpecifier(
        text="app/flash-messages/service", service_name="flashMessages"
    )


def test_service_injection_explicit_name_and_pods() -> None:
    """Verify explicit service names and the pods layout."""
    spec = extract(EMBER_SOURCE, "currentUser", use_ember_pods=True)
    assert spec == ServiceSpecifier(
        text="app/services/user-session", service_name="user-session"
    )
    assert extract("session: service(),", "session", use_ember_pods=True) == (
        ServiceSpecifier(text="app/services/session", service_name="session")
    )


def test_service_decorator_form() -> None:
    """Verify `@service` decorated class fields are recognised."""
    text = "class A {\n  @service('store') declare db;\n  @service router;\n}\n"
    assert extract(text, "db") == ServiceSpecifier(
        text="app/store/service", service_name="store"
    )
    assert extract(text, "router") == ServiceSpecifier(
        text="app/router/service", service_name="router"
    )


def test_template_component_forms() -> None:
    """Verify curly and angle-bracket component invocations."""
    hbs = (
        "{{#user-card user=this.user}}{{/user-card}}\n"
        "<Ui::DatePicker @value={{x}} />\n"
    )
    assert extract(hbs, "user-card") == TemplateSpecifier(
        text="app/components/user-card", component_name="user-card"
    )
    assert extract(hbs, "Ui::DatePicker", use_ember_pods=True) == TemplateSpecifier(
        text="app/components/ui/date-picker/component",
        component_name="Ui::DatePicker",
    )


def test_no_match_returns_none() -> None:
    """Verify that unknown identifiers yield None."""
    assert extract(ES_SOURCE, "nothingHere") is None
    assert extract(ES_SOURCE, "") is None


def test_this_is_never_extracted() -> None:
    """Verify the `this` receiver short-circuits extraction."""
    assert extract("import this from 'x';", "this") is None
    assert extract_for_cursor(ES_SOURCE, "get", receiver="this") is None


def test_cursor_on_quoted_path() -> None:
    """Verify that a quoted literal is used as the specifier directly."""
    assert extract_for_cursor("", "'app/models/user'") == ImportSpecifier(
        text="app/models/user"
    )


def test_cursor_member_falls_back_to_receiver() -> None:
    """Verify member calls try the method first, then the receiver."""
    spec = extract_for_cursor(ES_SOURCE, "findAll", receiver="Foo")
    assert spec == ImportSpecifier(text="app/models/foo", bound_member="findAll")


def test_cursor_member_bound_directly() -> None:
    """Verify a method imported by name wins over its receiver."""
    spec = extract_for_cursor(ES_SOURCE, "named", receiver="Foo")
    assert spec == ImportSpecifier(text="pkg/thing", bound_member="named")


def test_cursor_strips_commas() -> None:
    """Verify trailing commas from word selection are ignored."""
    assert extract_for_cursor(ES_SOURCE, "Foo,") == ImportSpecifier(
        text="app/models/foo"
    )


def test_dasherize() -> None:
    """Verify Ember-style dasherization."""
    assert dasherize("flashMessages") == "flash-messages"
    assert dasherize("FooBar") == "foo-bar"
    assert dasherize("user_session") == "user-session"
    assert component_path_name("Foo::BarBaz") == "foo/bar-baz"


def test_specifier_kinds() -> None:
    """Verify every variant reports its kind tag."""
    assert ImportSpecifier("x").kind == "import"
    assert RequireSpecifier("x").kind == "require"
    assert ServiceSpecifier("x", "x").kind == "service"
    assert TemplateSpecifier("x", "x").kind == "template"
