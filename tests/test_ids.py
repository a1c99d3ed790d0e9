import pytest

from beans.ids import ID_ALPHABET, build_filename, new_id, parse_filename, slugify


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Hello World", "hello-world"),
        ("hello_world", "hello-world"),
        ("Hello! World?", "hello-world"),
        ("hello   world", "hello-world"),
        ("hello---world", "hello-world"),
        ("--hello--", "hello"),
        ("", ""),
        ("Test 123", "test-123"),
        ("Hello, World! How's it going?", "hello-world-hows-it-going"),
        ("!@#$%^&*()", ""),
        ("Café Résumé", "café-résumé"),
        ("already-slugified", "already-slugified"),
        ("ALL CAPS", "all-caps"),
        ("hello world_test", "hello-world-test"),
        ("this is a very long title that should be truncated to fifty characters",
         "this-is-a-very-long-title-that-should-be-truncated"),
        ("this is a very long title that should be truncated-at dash",
         "this-is-a-very-long-title-that-should-be-truncated"),
    ],
)
def test_slugify(title, expected):
    assert slugify(title) == expected


@pytest.mark.parametrize(
    "filename, expected_id, expected_slug",
    [
        ("abc--my-slug.md", "abc", "my-slug"),
        ("beans-z5r9--add-unit-tests.md", "beans-z5r9", "add-unit-tests"),
        ("xyz--this-is-a-longer-slug.md", "xyz", "this-is-a-longer-slug"),
        ("abc.my-slug.md", "abc", "my-slug"),
        ("beans-z5r9.add-unit-tests.md", "beans-z5r9", "add-unit-tests"),
        ("abc-my-slug.md", "abc", "my-slug"),
        ("abc-my-multi-part-slug.md", "abc", "my-multi-part-slug"),
        ("abc.md", "abc", ""),
        ("beans-z5r9.md", "beans", "z5r9"),
        ("abc", "abc", ""),
        ("", "", ""),
        (".md", "", ""),
    ],
)
def test_parse_filename(filename, expected_id, expected_slug):
    assert parse_filename(filename) == (expected_id, expected_slug)


@pytest.mark.parametrize(
    "bean_id, slug, expected",
    [
        ("abc", "my-slug", "abc--my-slug.md"),
        ("abc", "", "abc.md"),
        ("beans-z5r9", "add-tests", "beans-z5r9--add-tests.md"),
        ("xyz", "this-is-a-longer-slug", "xyz--this-is-a-longer-slug.md"),
    ],
)
def test_build_filename(bean_id, slug, expected):
    assert build_filename(bean_id, slug) == expected


def test_new_id_length_without_prefix():
    assert len(new_id("", 4)) == 4


def test_new_id_length_with_prefix():
    assert len(new_id("beans-", 4)) == 10


def test_new_id_prefix_preserved():
    assert new_id("myapp-", 4).startswith("myapp-")


def test_new_id_uses_alphabet():
    generated = new_id("", 100)
    assert set(generated) <= set(ID_ALPHABET)


def test_new_id_unique():
    ids = {new_id("", 8) for _ in range(100)}
    assert len(ids) == 100


def test_new_id_rejects_non_positive_length():
    with pytest.raises(ValueError):
        new_id("x-", 0)


@pytest.mark.parametrize(
    "bean_id, slug",
    [("abc", "my-slug"), ("beans-z5r9", "add-tests"), ("xyz", "")],
)
def test_filename_roundtrip(bean_id, slug):
    assert parse_filename(build_filename(bean_id, slug)) == (bean_id, slug)