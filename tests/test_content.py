import io
import sys

import pytest

from beans.bean import Bean, InvalidTagError
from beans.content import apply_tags, format_cycle, merge_tags, resolve_content


@pytest.mark.parametrize(
    "initial, to_add, expected",
    [
        ([], ["bug"], ["bug"]),
        ([], ["bug", "urgent"], ["bug", "urgent"]),
        (["existing"], ["new"], ["existing", "new"]),
        (["existing"], [], ["existing"]),
        ([], ["InvalidTag"], ["invalidtag"]),
    ],
    ids=[
        "add single tag",
        "add multiple tags",
        "add to existing tags",
        "empty tags list",
        "uppercase tag gets normalized",
    ],
)
def test_apply_tags(initial, to_add, expected):
    bean = Bean(tags=list(initial))
    apply_tags(bean, to_add)
    assert bean.tags == expected


def test_apply_tags_invalid_tag_with_spaces():
    bean = Bean()
    with pytest.raises(InvalidTagError):
        apply_tags(bean, ["invalid tag"])


@pytest.mark.parametrize(
    "path, expected",
    [
        (["a", "b", "c", "a"], "a → b → c → a"),
        (["x", "y"], "x → y"),
        (["single"], "single"),
        ([], ""),
    ],
)
def test_format_cycle(path, expected):
    assert format_cycle(path) == expected


def test_resolve_content_direct_value():
    assert resolve_content("hello body", "") == "hello body"


def test_resolve_content_empty():
    assert resolve_content("", "") == ""


def test_resolve_content_both_given_raises():
    with pytest.raises(ValueError, match="cannot use both"):
        resolve_content("text", "some-file.md")


def test_resolve_content_reads_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("from stdin\n"))
    assert resolve_content("-", "") == "from stdin\n"


def test_resolve_content_reads_file(tmp_path):
    body_file = tmp_path / "body.md"
    body_file.write_text("# Heading\n\nParagraph.", encoding="utf-8")
    assert resolve_content("", str(body_file)) == "# Heading\n\nParagraph."


def test_resolve_content_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        resolve_content("", str(tmp_path / "missing.md"))


def test_merge_tags_adds_and_removes():
    result = merge_tags(["a", "b"], ["c", "a"], ["b"])
    assert sorted(result) == ["a", "c"]


def test_merge_tags_handles_none():
    assert merge_tags(None, None, None) == []


def test_merge_tags_remove_wins_over_add():
    assert merge_tags([], ["x"], ["x"]) == []