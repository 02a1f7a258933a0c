"""Tests for tag generation and symbol location."""

from pathlib import Path
from unittest.mock import MagicMock

from jump_to_import.symbol_locator import locate
from jump_to_import.tag import Position, Tag
from jump_to_import.tag_generator import generate_tags, tags_for_text

SOURCE = """import Ember from 'ember';

export default class UserService {
  static create() {
    return new UserService();
  }

  async findAll(query) {
    if (query) {
      return [];
    }
  }
}

export function formatName(user) {}
const helper = () => 1;
const obj = {
  getUser: function () {},
  getUserName: (id) => id,
  fullName: computed('first', 'last', function () {}),
};
"""


def test_tags_for_text() -> None:
    """Verify classes, functions, methods and variables are tagged."""
    tags = {t.name: t for t in tags_for_text(SOURCE)}
    assert tags["UserService"] == Tag("UserService", Position(2, 21), "class")
    assert tags["create"].kind == "method"
    assert tags["findAll"].position == Position(7, 8)
    assert tags["formatName"].kind == "function"
    assert tags["helper"].kind == "variable"
    assert tags["getUser"].position == Position(17, 2)
    assert "fullName" in tags
    assert "if" not in tags


def test_generate_tags_is_lazy(tmp_path: Path) -> None:
    """Verify the generator yields once and is then exhausted."""
    source = tmp_path / "a.js"
    source.write_text("function one() {}\nfunction two() {}\n", encoding="utf-8")
    tags = generate_tags(str(source))
    assert [t.name for t in tags] == ["one", "two"]
    assert list(tags) == []


def test_locate_exact_match(tmp_path: Path) -> None:
    """Verify the first exact match wins and substrings do not match."""
    source = tmp_path / "a.js"
    source.write_text(SOURCE, encoding="utf-8")
    assert locate(str(source), "getUserName") == Position(18, 2)
    assert locate(str(source), "getUser") == Position(17, 2)
    assert locate(str(source), "getUs") is None


def test_locate_without_tags() -> None:
    """Verify empty tag lists and empty names yield None."""
    generator = MagicMock(return_value=iter([]))
    assert locate("x.js", "anything", generator) is None
    generator.assert_called_once_with("x.js")
    assert locate("x.js", None, generator) is None


def test_locate_missing_file(tmp_path: Path) -> None:
    """Verify an unreadable file is a silent miss."""
    assert locate(str(tmp_path / "missing.js"), "x") is None
