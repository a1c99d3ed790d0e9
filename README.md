# beans

A small library for working with *beans*: issues stored as Markdown files
with YAML front matter, kept next to your code.

## Modules

- `beans.bean`: the `Bean` dataclass (id, slug, path, title, status, type,
  priority, tags, created_at, updated_at, body, parent, blocking).
  `parse(text)` reads Markdown with optional front matter and raises
  `FrontMatterError` if the front matter is unclosed or malformed.
  `Bean.render()` writes it back, with the ID as a `# id` comment on the first
  front matter line. `Bean.to_dict()` and `Bean.to_json()` give a JSON form
  that leaves out empty optional fields. Tag helpers: `validate_tag`,
  `normalize_tag`, `Bean.has_tag`, `Bean.add_tag`, `Bean.remove_tag`.
  Relationship helpers: `Bean.has_parent`, `Bean.is_blocking`,
  `Bean.add_blocking`, `Bean.remove_blocking`.
- `beans.ids`: `new_id(prefix, length)` makes a random ID from lowercase
  letters and digits (a non-positive length raises `ValueError`);
  `parse_filename` understands `id--slug.md`, `id.slug.md`, the older
  `id-slug.md` and `id.md`; `build_filename` writes `id--slug.md` (or `id.md`);
  `slugify` turns a title into a slug of at most 50 bytes.
- `beans.sorting`: `sort_by_status_priority_and_type(beans, status_names,
  priority_names, type_names)` sorts in place by status, priority, type and
  case-insensitive title. Unknown values sort last; a missing priority counts
  as `normal`.
- `beans.content`: `resolve_content(value, file)` returns a value given
  directly, reads stdin when the value is `-`, or reads a file (both at once
  raises `ValueError`); `apply_tags`, `merge_tags` and `format_cycle`
  (`a → b → a`).
- `beans.listing`: `sort_beans(beans, sort_by, status_names, priority_names,
  type_names)` with `sort_by` one of `created`, `updated` (newest first),
  `status`, `priority`, `id`, or anything else for the default order;
  `truncate(text, max_len)` cuts text and ends it with `...`.
- `beans.roadmap`: `build_roadmap(beans, ordering, include_done,
  status_filter, no_status_filter)` groups beans into a `Roadmap` of
  `MilestoneGroup`, `EpicGroup` and `UnscheduledGroup` objects, each with a
  `to_dict()` for JSON output. `Ordering` holds the status and type order and
  the archive statuses (by default `completed` and `scrapped`). Markdown
  helpers: `first_paragraph` (at most 200 bytes), `render_bean_ref` and
  `type_badge`.

## Installation

```
pip install .
```

## Example

```python
from beans.bean import Bean, parse
from beans.ids import new_id, slugify, build_filename

bean = Bean(id=new_id("proj-", 4), title="Fix login redirect", status="todo", type="bug")
bean.add_tag("frontend")

filename = build_filename(bean.id, slugify(bean.title))  # e.g. "proj-a1b2--fix-login-redirect.md"
text = bean.render()

again = parse(text)
assert again.title == "Fix login redirect"
assert again.tags == ["frontend"]
```

A rendered bean looks like this:

```
---
# proj-a1b2
title: Fix login redirect
status: todo
type: bug
tags:
- frontend
---
```

## Tags

Tags are lowercase, start with a letter and may contain digits and single
hyphens (`tech-debt`, `v1`). `Bean.add_tag` normalizes case and surrounding
whitespace, and raises `InvalidTagError` for anything else.

## What this package does not do

This is a library only. It has no command-line program, no interactive
screen, and no query interface. It does not find, load or save a directory of
bean files, read a project configuration file, or check links between beans;
callers read and write the files themselves using `parse`, `Bean.render` and
the filename helpers. `beans.roadmap` builds the roadmap structure and
provides Markdown snippets, but does not render a complete Markdown document.

## Running the tests

```
pip install .[test]
pytest
```